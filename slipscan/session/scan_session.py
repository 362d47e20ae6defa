"""
Scan Session - покадровый цикл сканирования квитанции.

Координирует на каждом кадре:
1. Извлечение полей из строк OCR (FieldExtractor)
2. Учёт кадра в стабилизаторе (TemporalStabilizer)
3. Отчёт о стабильном значении и его сброс

Планирование, потоки и UI - забота хоста; сессия только меняет состояние.
"""

from typing import Iterable, List, Optional, Union
from loguru import logger

from config.settings import MIN_LINE_X
from contracts.frame_dto import RecognizedFrame, RecognizedLine
from slipscan.domain.interfaces import IFieldExtractor, IValueStabilizer
from slipscan.domain.models import ExtractedValue
from slipscan.extraction.field_extractor import FieldExtractor
from slipscan.tracking.stabilizer import TemporalStabilizer
from .invoice_fields import FoundField, InvoiceFields

LineInput = Union[str, RecognizedLine]


class ScanSession:
    """
    Один сеанс сканирования: от открытия камеры до закрытия.

    ЦКП: FoundField ровно один раз на каждое новое стабильное значение.
    """

    def __init__(
        self,
        extractor: Optional[IFieldExtractor] = None,
        stabilizer: Optional[IValueStabilizer] = None,
        min_line_x: float = MIN_LINE_X,
    ):
        self.extractor = extractor or FieldExtractor()
        self.stabilizer = stabilizer or TemporalStabilizer()
        self.min_line_x = min_line_x
        self.fields = InvoiceFields()
        self.frames_processed = 0
        self.found: List[FoundField] = []

    def extract_frame(self, lines: Iterable[LineInput]) -> List[ExtractedValue]:
        """Извлекает значения из всех строк кадра (без учёта в стабилизаторе)."""
        values = []
        for line in lines:
            if isinstance(line, RecognizedLine):
                box = line.bounding_box
                if box is not None and box.x <= self.min_line_x:
                    logger.trace(f"[ScanSession] Строка у края кадра пропущена: '{line.text}'")
                    continue
                text = line.text
            else:
                text = line

            value = self.extractor.extract(text)
            if value is not None:
                values.append(value)
        return values

    def process_frame(self, lines: Iterable[LineInput]) -> Optional[FoundField]:
        """
        Обрабатывает один кадр.

        Args:
            lines: Строки кадра (str или RecognizedLine), может быть пусто

        Returns:
            FoundField, если на этом кадре значение стало стабильным и оно новое
        """
        frame_index = self.frames_processed
        values = self.extract_frame(lines)

        self.stabilizer.log_frame(values)
        self.frames_processed += 1

        stable = self.stabilizer.get_stable_value()
        if stable is None:
            return None

        # Сброс до следующего кадра: значение должно набрать порог заново
        self.stabilizer.reset(stable)

        if self.fields.get(stable.kind) == stable.value:
            logger.debug(f"[ScanSession] Повтор уже найденного {stable.kind.value}: '{stable.value}'")
            return None

        self.fields.set(stable.kind, stable.value)
        found = FoundField(kind=stable.kind, value=stable.value, frame_index=frame_index)
        self.found.append(found)
        logger.info(f"[ScanSession] Найдено {stable.kind.value}: '{found.display_value}' (кадр {frame_index})")
        return found

    def process_recognized_frame(self, frame: RecognizedFrame) -> Optional[FoundField]:
        return self.process_frame(frame.lines)

    def reset_fields(self) -> None:
        """Очищает собранные поля (стабилизатор продолжает работу)."""
        self.fields.clear()
        logger.debug("[ScanSession] Поля очищены")

    def close(self) -> None:
        """Конец сеанса: состояние стабилизатора больше не нужно."""
        if isinstance(self.stabilizer, TemporalStabilizer):
            self.stabilizer.clear()
        logger.debug(f"[ScanSession] Сеанс закрыт после {self.frames_processed} кадров")
