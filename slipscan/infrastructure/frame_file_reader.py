"""
Чтение записей кадров для replay.

Запись - это последовательность кадров, каждый кадр - список строк OCR.
Поддерживаемые форматы: JSON и YAML.

    frames:
      - ["1234567#89#", "foo"]
      - {lines: [{text: "123 50", bounding_box: {x: 0.2}}]}
      - []
"""

import json
from pathlib import Path
from typing import Any, List

import yaml
from loguru import logger
from pydantic import ValidationError

from config.settings import SUPPORTED_RECORDING_FORMATS
from contracts.frame_dto import RecognizedFrame
from ..domain.exceptions import ScanDataFormatError, ScanFileNotFoundError, ScanFileSystemError


class FrameFileReader:
    """Загружает и валидирует запись кадров."""

    def read(self, file_path: Path) -> List[RecognizedFrame]:
        """
        Загружает кадры из файла.

        Args:
            file_path: Путь к .json / .yaml / .yml файлу

        Returns:
            Список кадров в порядке записи

        Raises:
            ScanFileNotFoundError: Если файл не существует
            ScanDataFormatError: Если формат или содержимое некорректны
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise ScanFileNotFoundError(
                message=f"Файл записи не найден: {file_path}",
                component="FrameFileReader",
            )

        suffix = file_path.suffix.lower()
        if suffix not in SUPPORTED_RECORDING_FORMATS:
            raise ScanDataFormatError(
                message=f"Неподдерживаемый формат записи: {suffix}",
                component="FrameFileReader",
            )

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                if suffix == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ScanDataFormatError(
                message=f"Не удалось разобрать файл: {file_path}",
                component="FrameFileReader",
                original_error=e,
            )
        except (IOError, OSError) as e:
            raise ScanFileSystemError(
                message=f"Не удалось прочитать файл: {file_path}",
                component="FrameFileReader",
                original_error=e,
            )

        frames = self.parse(data)
        logger.debug(f"[FrameFileReader] Загружено {len(frames)} кадров из {file_path.name}")
        return frames

    def parse(self, data: Any) -> List[RecognizedFrame]:
        """
        Превращает сырые данные (list или {"frames": list}) в кадры.

        Raises:
            ScanDataFormatError: Если структура не соответствует контракту
        """
        if isinstance(data, dict):
            data = data.get("frames")

        if not isinstance(data, list):
            raise ScanDataFormatError(
                message="Ожидается список кадров или объект с ключом 'frames'",
                component="FrameFileReader",
            )

        frames = []
        for i, raw_frame in enumerate(data):
            if raw_frame is None:
                raw_frame = []
            if isinstance(raw_frame, list):
                raw_frame = {"lines": raw_frame}
            try:
                frames.append(RecognizedFrame.model_validate(raw_frame))
            except ValidationError as e:
                raise ScanDataFormatError(
                    message=f"Некорректный кадр #{i}",
                    component="FrameFileReader",
                    original_error=e,
                )
        return frames
