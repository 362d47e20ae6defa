"""
DTO контракт: OCR (внешний движок) -> Slipscan -> UI (слой отображения)

Вход: распознанные строки одного кадра видео.
Выход: стабильное поле квитанции, найденное на очередном кадре.

ВАЖНО: Это публичный контракт. Изменения должны быть обратно совместимы.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BoundingBox(BaseModel):
    """
    Нормализованные координаты строки в кадре (0.0 - 1.0).

    Ядро использует только x: строки у самого края кадра отбрасываются.
    """

    x: float = Field(..., ge=0.0, le=1.0, description="Левый край (нормализованный)")
    y: float = Field(0.0, ge=0.0, le=1.0, description="Нижний край (нормализованный)")
    width: float = Field(0.0, ge=0.0, le=1.0, description="Ширина (нормализованная)")
    height: float = Field(0.0, ge=0.0, le=1.0, description="Высота (нормализованная)")

    model_config = ConfigDict(frozen=True)


class RecognizedLine(BaseModel):
    """Одна строка, распознанная OCR на кадре (лучший кандидат)."""

    text: str = Field(..., description="Сырой текст строки как его вернул OCR")
    bounding_box: Optional[BoundingBox] = Field(None, description="Координаты строки, если известны")

    model_config = ConfigDict(frozen=True)


class RecognizedFrame(BaseModel):
    """
    Все строки одного кадра.

    Пустой кадр допустим: стабилизатор всё равно должен получить его,
    чтобы старые наблюдения устаревали.
    """

    lines: List[RecognizedLine] = Field(default_factory=list, description="Строки кадра")

    model_config = ConfigDict(frozen=True)

    @field_validator("lines", mode="before")
    @classmethod
    def wrap_plain_strings(cls, v):
        """Разрешаем строки без координат: "123 50" -> {"text": "123 50"}."""
        if isinstance(v, list):
            return [{"text": item} if isinstance(item, str) else item for item in v]
        return v

    @property
    def texts(self) -> List[str]:
        return [line.text for line in self.lines]


class FoundFieldDTO(BaseModel):
    """Стабильное поле квитанции для слоя отображения."""

    kind: str = Field(..., description="reference | amount | account_number")
    value: str = Field(..., description="Исправленное значение как его отследил стабилизатор")
    display_value: str = Field(..., description="Значение в формате для показа пользователю")
    frame_index: int = Field(..., ge=0, description="Номер кадра, на котором значение стало стабильным")

    model_config = ConfigDict(frozen=True)

    @field_validator("kind")
    @classmethod
    def kind_known(cls, v: str) -> str:
        if v not in {"reference", "amount", "account_number"}:
            raise ValueError(f"Неизвестный тип поля: {v}")
        return v
