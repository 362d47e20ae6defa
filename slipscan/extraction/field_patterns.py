"""
Паттерны полей шведской платёжной квитанции (inbetalningskort).

Порядок в FIELD_PATTERNS = приоритет: первый успешный паттерн выигрывает.
"""

import re
from dataclasses import dataclass
from typing import Optional

from slipscan.domain.models import FieldKind


@dataclass(frozen=True)
class FieldPattern:
    """Описание одного поля: regex, допустимые символы и доп. ограничение длины."""
    kind: FieldKind
    regex: re.Pattern
    allowed_chars: str
    min_length: Optional[int] = None    # Строго больше (длина сырого совпадения)
    max_length: Optional[int] = None    # Строго меньше

    def length_ok(self, matched: str) -> bool:
        if self.min_length is not None and len(matched) <= self.min_length:
            return False
        if self.max_length is not None and len(matched) >= self.max_length:
            return False
        return True


# Bankgiro: 7-8 цифр, первая не ноль, затем "#" + 2 цифры + "#"
ACCOUNT_NUMBER_PATTERN = FieldPattern(
    kind=FieldKind.ACCOUNT_NUMBER,
    regex=re.compile(r"[1-9]\d{6,7}#\d{2}#"),
    allowed_chars="0123456789#",
)

# OCR-номер: 3-20 цифр, пробел, "#".
# Длина совпадения включает пробел и "#", поэтому проверка длины
# почти дублирует regex, но не полностью.
REFERENCE_PATTERN = FieldPattern(
    kind=FieldKind.REFERENCE,
    regex=re.compile(r"\d{3,20}\s#"),
    allowed_chars="0123456789# ",
    min_length=5,
    max_length=25,
)

# Сумма: кроны + пробел + эре, эре на квитанциях всегда 00 или 50
AMOUNT_PATTERN = FieldPattern(
    kind=FieldKind.AMOUNT,
    regex=re.compile(r"\d{1,7}\s[05]0"),
    allowed_chars="0123456789 ",
)

FIELD_PATTERNS = (
    ACCOUNT_NUMBER_PATTERN,
    REFERENCE_PATTERN,
    AMOUNT_PATTERN,
)
