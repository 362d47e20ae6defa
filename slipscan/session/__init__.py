from .invoice_fields import FoundField, InvoiceFields, format_display_value
from .scan_session import ScanSession

__all__ = ["FoundField", "InvoiceFields", "format_display_value", "ScanSession"]
