"""
Temporal Stabilizer - сглаживание значений по кадрам видео.

ЦКП: Одно уверенное значение вместо мерцающих покадровых распознаваний.

Алгоритм на каждый кадр:
1. Учесть наблюдения кадра (новое значение -> count 0, повтор -> count + 1)
2. Пометить на удаление всё, что не подтверждалось дольше OBSERVATION_TTL_FRAMES
3. Среди оставшихся выбрать значение с наибольшим count
4. Удалить устаревшие наблюдения
5. Увеличить счётчик кадров

Не потокобезопасен: вызывающий сам сериализует вызовы.
"""

from typing import Dict, Iterable, Optional, Tuple
from loguru import logger

from config.settings import OBSERVATION_TTL_FRAMES, STABLE_MIN_COUNT
from slipscan.domain.interfaces import IValueStabilizer
from slipscan.domain.models import ExtractedValue, FieldKind, ObservationRecord

TrackingKey = Tuple[str, FieldKind]


class TemporalStabilizer(IValueStabilizer):
    """
    Трекер повторных наблюдений одного сеанса сканирования.

    Ничья по count: побеждает ключ, добавленный раньше (словарь
    сохраняет порядок вставки, сравнение строгое).
    """

    def __init__(self):
        self.frame_index = 0
        self.best_count = 0
        self._best: Optional[ExtractedValue] = None
        self._records: Dict[TrackingKey, ObservationRecord] = {}
        # Последний экземпляр значения по ключу (со span последнего наблюдения)
        self._values: Dict[TrackingKey, ExtractedValue] = {}

    def __len__(self) -> int:
        return len(self._records)

    @property
    def tracked_count(self) -> int:
        return len(self._records)

    @property
    def best(self) -> Optional[ExtractedValue]:
        return self._best

    def observation(self, value: ExtractedValue) -> Optional[ObservationRecord]:
        return self._records.get(value.key)

    def log_frame(self, values: Iterable[ExtractedValue]) -> None:
        for value in values:
            key = value.key
            record = self._records.get(key)
            if record is None:
                record = ObservationRecord(last_seen_frame=0, count=-1)
                self._records[key] = record
            record.last_seen_frame = self.frame_index
            record.count += 1
            self._values[key] = value
            logger.debug(f"[TemporalStabilizer] Кадр {self.frame_index}: {value.kind.value} '{value.value}' count={record.count}")

        obsolete = []
        best_key: Optional[TrackingKey] = None
        best_count = -1

        for key, record in self._records.items():
            if record.last_seen_frame < self.frame_index - OBSERVATION_TTL_FRAMES:
                obsolete.append(key)
                continue
            if record.count > best_count:
                best_key = key
                best_count = record.count

        for key in obsolete:
            del self._records[key]
            expired = self._values.pop(key)
            logger.debug(f"[TemporalStabilizer] Устарело: {expired.kind.value} '{expired.value}'")

        if best_key is None:
            self._best = None
            self.best_count = 0
        else:
            self._best = self._values[best_key]
            self.best_count = best_count

        self.frame_index += 1

    def get_stable_value(self) -> Optional[ExtractedValue]:
        if self._best is not None and self.best_count >= STABLE_MIN_COUNT:
            return self._best
        return None

    def reset(self, value: ExtractedValue) -> None:
        key = value.key
        self._records.pop(key, None)
        self._values.pop(key, None)

        if self._best is not None and self._best.key == key:
            self._best = None
            self.best_count = 0

        logger.debug(f"[TemporalStabilizer] Сброс: {value.kind.value} '{value.value}'")

    def clear(self) -> None:
        """Сбрасывает всё состояние (конец сеанса)."""
        self._records.clear()
        self._values.clear()
        self._best = None
        self.best_count = 0
        self.frame_index = 0
