#!/usr/bin/env python3
"""
Прогон записи кадров OCR через сеанс сканирования.

Использование:
    # Прогнать все записи из data/recordings/
    python scripts/replay_frames.py

    # Прогнать конкретную запись
    python scripts/replay_frames.py path/to/frames.yaml

    # Результат в JSON + подробный лог
    python scripts/replay_frames.py path/to/frames.json --json --verbose
"""

import sys
import argparse
import json
from pathlib import Path
from typing import List

from loguru import logger

# Добавляем корень проекта в путь
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.settings import RECORDINGS_DIR, SUPPORTED_RECORDING_FORMATS
from slipscan.application.factory import ScanComponentFactory
from slipscan.domain.exceptions import ScanError


def replay(recording: Path, as_json: bool = False) -> bool:
    """
    Прогоняет одну запись через новый сеанс.

    Returns:
        True если успешно, False если ошибка
    """
    try:
        frames = ScanComponentFactory.create_frame_reader().read(recording)
        session = ScanComponentFactory.create_session()
    except ScanError as e:
        print(f"  [ERROR] {e}")
        return False

    print(f"\n[REPLAY] {recording.name}: {len(frames)} кадров")

    for frame in frames:
        found = session.process_recognized_frame(frame)
        if found is not None and not as_json:
            print(f"  [FOUND] кадр {found.frame_index:>5}  {found.kind.value:<15} {found.display_value}")

    if as_json:
        result = {
            "recording": recording.name,
            "frames": session.frames_processed,
            "found": [f.to_dto().model_dump() for f in session.found],
            "fields": session.fields.to_dict(),
        }
        print(json.dumps(result, ensure_ascii=False, indent=2))
    else:
        for kind, value in session.fields.display().items():
            print(f"  [FIELD] {kind:<15} {value if value is not None else '-'}")
        status = "полностью" if session.fields.is_complete else "частично"
        print(f"  [INFO]  Квитанция распознана {status}")

    session.close()
    return True


def find_recordings(search_dir: Path) -> List[Path]:
    """Ищет записи кадров в директории."""
    if not search_dir.exists():
        return []
    return sorted(
        p for p in search_dir.iterdir()
        if p.is_file() and p.suffix.lower() in SUPPORTED_RECORDING_FORMATS
    )


def main():
    parser = argparse.ArgumentParser(description="Slipscan frame recording replay")
    parser.add_argument("path", nargs="?", help="Путь к записи кадров (опционально)")
    parser.add_argument("--json", action="store_true", help="Вывести результат в JSON")
    parser.add_argument("--verbose", action="store_true", help="Подробный лог (DEBUG)")
    args = parser.parse_args()

    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        level="DEBUG" if args.verbose else "WARNING"
    )

    if args.path:
        recordings = [Path(args.path)]
    else:
        recordings = find_recordings(RECORDINGS_DIR)
        if not recordings:
            print(f"[ERROR] Записи не найдены в {RECORDINGS_DIR}")
            sys.exit(1)

    failed = [r for r in recordings if not replay(r, as_json=args.json)]
    if failed:
        print(f"\n[ERROR] Ошибки в {len(failed)} из {len(recordings)} записей")
        sys.exit(1)


if __name__ == "__main__":
    main()
