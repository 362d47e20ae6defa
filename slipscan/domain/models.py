"""
Доменные модели Slipscan.

ЦКП: Типизированное значение поля квитанции, пригодное как ключ трекинга.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple


class FieldKind(Enum):
    """Закрытый набор полей платёжной квитанции."""
    REFERENCE = "reference"              # OCR-номер (referens)
    AMOUNT = "amount"                    # Сумма (кроны + эре)
    ACCOUNT_NUMBER = "account_number"    # Номер bankgiro


@dataclass(frozen=True)
class TextSpan:
    """Положение совпадения в исходной строке [start, end)."""
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class ExtractedValue:
    """
    Значение, извлечённое из одной строки OCR.

    Равенство и хэш только по (value, kind): одно и то же значение
    на разных позициях строки - это одно и то же наблюдение.
    """
    span: TextSpan = field(compare=False)
    value: str
    kind: FieldKind

    @property
    def key(self) -> Tuple[str, FieldKind]:
        """Ключ трекинга в стабилизаторе."""
        return (self.value, self.kind)


@dataclass
class ObservationRecord:
    """
    Наблюдение за одним ключом внутри стабилизатора.

    count - число повторов сверх первого: первое наблюдение даёт 0.
    """
    last_seen_frame: int = 0
    count: int = -1
