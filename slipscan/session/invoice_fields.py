from dataclasses import dataclass
from typing import Dict, Optional

from contracts.frame_dto import FoundFieldDTO
from slipscan.domain.models import FieldKind


def format_display_value(value: str, kind: FieldKind) -> str:
    """
    Форматирует значение для показа.

    OCR-номер: до первого пробела ("1234567 #" -> "1234567")
    Сумма: пробел -> запятая ("123 50" -> "123,50")
    Bankgiro: до первого "#" ("1234567#89#" -> "1234567")
    """
    if kind is FieldKind.REFERENCE:
        return value.split(" ")[0]
    if kind is FieldKind.AMOUNT:
        return value.replace(" ", ",")
    if kind is FieldKind.ACCOUNT_NUMBER:
        return value.split("#")[0]
    return value


@dataclass(frozen=True)
class FoundField:
    """Стабильное поле, о котором сессия сообщает слою отображения."""
    kind: FieldKind
    value: str
    frame_index: int

    @property
    def display_value(self) -> str:
        return format_display_value(self.value, self.kind)

    def to_dto(self) -> FoundFieldDTO:
        return FoundFieldDTO(
            kind=self.kind.value,
            value=self.value,
            display_value=self.display_value,
            frame_index=self.frame_index,
        )


@dataclass
class InvoiceFields:
    """Собранные поля квитанции (последнее стабильное значение каждого типа)."""
    reference: Optional[str] = None
    amount: Optional[str] = None
    account_number: Optional[str] = None

    def get(self, kind: FieldKind) -> Optional[str]:
        return getattr(self, kind.value)

    def set(self, kind: FieldKind, value: Optional[str]) -> None:
        setattr(self, kind.value, value)

    def clear(self) -> None:
        self.reference = None
        self.amount = None
        self.account_number = None

    @property
    def is_complete(self) -> bool:
        return all(self.get(kind) is not None for kind in FieldKind)

    def display(self) -> Dict[str, Optional[str]]:
        return {
            kind.value: format_display_value(self.get(kind), kind) if self.get(kind) is not None else None
            for kind in FieldKind
        }

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {kind.value: self.get(kind) for kind in FieldKind}
