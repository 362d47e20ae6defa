from typing import Optional, Sequence
from loguru import logger

from slipscan.domain.interfaces import IFieldExtractor
from slipscan.domain.models import ExtractedValue, TextSpan
from .char_corrector import ConfusableCharCorrector
from .field_patterns import FieldPattern, FIELD_PATTERNS


class FieldExtractor(IFieldExtractor):
    """
    Извлекает одно поле квитанции из строки OCR.

    Паттерны пробуются в порядке приоритета (bankgiro -> OCR-номер -> сумма),
    каждый независимо на той же сырой строке. Позиция совпадения в строке
    на приоритет не влияет.
    ЦКП: ExtractedValue с исправленным значением или None.
    """

    def __init__(
        self,
        patterns: Sequence[FieldPattern] = FIELD_PATTERNS,
        corrector: Optional[ConfusableCharCorrector] = None,
    ):
        self.patterns = tuple(patterns)
        self.corrector = corrector or ConfusableCharCorrector()

    def extract(self, line: str) -> Optional[ExtractedValue]:
        if not line:
            return None

        for pattern in self.patterns:
            value = self.extract_kind(line, pattern)
            if value is not None:
                return value

        logger.trace(f"[FieldExtractor] Нет совпадений в строке: '{line}'")
        return None

    def extract_kind(self, line: str, pattern: FieldPattern) -> Optional[ExtractedValue]:
        """Пробует один паттерн: поиск по всей строке, проверка длины, исправление символов."""
        match = pattern.regex.search(line)
        if not match:
            return None

        matched = match.group(0)
        if not pattern.length_ok(matched):
            logger.trace(f"[FieldExtractor] {pattern.kind.value}: длина {len(matched)} вне границ '{matched}'")
            return None

        correction = self.corrector.correct(matched, pattern.allowed_chars)
        if not correction.ok:
            logger.debug(f"[FieldExtractor] {pattern.kind.value}: исправление не удалось '{matched}'")
            return None

        logger.trace(f"[FieldExtractor] {pattern.kind.value}: '{correction.text}' из '{line}'")
        return ExtractedValue(
            span=TextSpan(start=match.start(), end=match.end()),
            value=correction.text,
            kind=pattern.kind,
        )


_default_extractor = FieldExtractor()


def extract_field(line: str) -> Optional[ExtractedValue]:
    """Извлечение с паттернами по умолчанию."""
    return _default_extractor.extract(line)
