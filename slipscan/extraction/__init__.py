"""
Extraction модуль: извлечение полей квитанции из одной строки OCR.

Экспортирует экстрактор, паттерны полей и корректор похожих символов.
"""

from .char_corrector import ConfusableCharCorrector, CharCorrectionResult
from .field_patterns import (
    FieldPattern,
    FIELD_PATTERNS,
    ACCOUNT_NUMBER_PATTERN,
    REFERENCE_PATTERN,
    AMOUNT_PATTERN,
)
from .field_extractor import FieldExtractor, extract_field

__all__ = [
    "ConfusableCharCorrector",
    "CharCorrectionResult",
    "FieldPattern",
    "FIELD_PATTERNS",
    "ACCOUNT_NUMBER_PATTERN",
    "REFERENCE_PATTERN",
    "AMOUNT_PATTERN",
    "FieldExtractor",
    "extract_field",
]
