from .models import FieldKind, TextSpan, ExtractedValue, ObservationRecord
from .interfaces import IFieldExtractor, IValueStabilizer
from .exceptions import (
    ScanError,
    ScanConfigurationError,
    ScanFileSystemError,
    ScanFileNotFoundError,
    ScanDataFormatError,
)

__all__ = [
    "FieldKind",
    "TextSpan",
    "ExtractedValue",
    "ObservationRecord",
    "IFieldExtractor",
    "IValueStabilizer",
    "ScanError",
    "ScanConfigurationError",
    "ScanFileSystemError",
    "ScanFileNotFoundError",
    "ScanDataFormatError",
]
