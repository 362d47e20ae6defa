"""
Контракты DTO между Slipscan и внешними коллабораторами.

Все контракты используют Pydantic v2 для валидации.

Контракты:
- OCR -> Slipscan: RecognizedFrame, RecognizedLine, BoundingBox
- Slipscan -> UI: FoundFieldDTO
"""

from .frame_dto import BoundingBox, RecognizedLine, RecognizedFrame, FoundFieldDTO

__all__ = [
    # OCR -> Slipscan
    "BoundingBox",
    "RecognizedLine",
    "RecognizedFrame",
    # Slipscan -> UI
    "FoundFieldDTO",
]
