"""
Slipscan: распознавание полей шведской платёжной квитанции с видео.

Архитектура: покадровый цикл
- Extraction: строка OCR -> ExtractedValue (OCR-номер, сумма, bankgiro)
- Tracking: значения кадра -> стабильное значение (10 наблюдений)
- Session: отчёт о новом стабильном поле и его сброс

Вход: contracts.RecognizedFrame (от OCR)
Выход: contracts.FoundFieldDTO (для UI)
"""

from slipscan.domain.models import FieldKind, TextSpan, ExtractedValue, ObservationRecord
from slipscan.extraction import FieldExtractor, ConfusableCharCorrector, extract_field
from slipscan.tracking import TemporalStabilizer
from slipscan.session import ScanSession, FoundField, InvoiceFields
from slipscan.application import ScanComponentFactory

__all__ = [
    # Models
    "FieldKind",
    "TextSpan",
    "ExtractedValue",
    "ObservationRecord",
    # Components
    "FieldExtractor",
    "ConfusableCharCorrector",
    "extract_field",
    "TemporalStabilizer",
    "ScanSession",
    "FoundField",
    "InvoiceFields",
    "ScanComponentFactory",
]
