"""
Интерфейсы (абстрактные классы) для домена Slipscan.

Домен Slipscan отвечает за:
1. Извлечение поля квитанции из одной строки OCR
2. Стабилизацию значений во времени (по кадрам)
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from .models import ExtractedValue


class IFieldExtractor(ABC):
    """Интерфейс для экстрактора полей (без состояния)."""

    @abstractmethod
    def extract(self, line: str) -> Optional[ExtractedValue]:
        """
        Извлекает не более одного поля из строки.

        Args:
            line: Сырой текст строки OCR

        Returns:
            Исправленное значение или None
        """
        pass


class IValueStabilizer(ABC):
    """Интерфейс для временного стабилизатора значений."""

    @abstractmethod
    def log_frame(self, values: Iterable[ExtractedValue]) -> None:
        """
        Учитывает значения одного кадра. Вызывается ровно один раз на кадр.

        Args:
            values: Значения, извлечённые из строк кадра (может быть пусто)
        """
        pass

    @abstractmethod
    def get_stable_value(self) -> Optional[ExtractedValue]:
        """
        Returns:
            Стабильное значение или None, если порог ещё не достигнут
        """
        pass

    @abstractmethod
    def reset(self, value: ExtractedValue) -> None:
        """
        Забывает значение после того, как о нём сообщили.

        Args:
            value: Значение (ключ трекинга), которое нужно сбросить
        """
        pass
