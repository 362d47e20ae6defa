"""
Integration тест: запись кадров -> FrameFileReader -> ScanSession -> replay скрипт.

ЦКП: Полный цикл на шумной записи квитанции.
"""

import importlib.util
import json
from pathlib import Path

import pytest

from slipscan.application.factory import ScanComponentFactory
from slipscan.domain.models import FieldKind

SCRIPT_PATH = Path(__file__).parent.parent.parent / "scripts" / "replay_frames.py"


def build_recording() -> list:
    """
    Шумная запись: OCR путает символы, поля то появляются, то пропадают.

    - bankgiro 10 кадров подряд
    - сумма с ошибкой в паре кадров (другое значение не набирает порог)
    - OCR-номер появляется через кадр
    - "мигающий" мусор, который успевает устареть
    """
    frames = []
    for i in range(10):
        frames.append(["Bankgiro 5050505#12#", "Betalningsmottagare AB"])
    for i in range(24):
        lines = ["Att betala 199 50"] if i not in (3, 7) else ["Att betala 199 00"]
        if i % 2 == 0:
            lines.append("# 8821003344 #")
        frames.append(lines)
    frames.append(["12 00"])
    for _ in range(40):
        frames.append([])
    return frames


@pytest.fixture
def recording_path(tmp_path):
    path = tmp_path / "slip.json"
    path.write_text(json.dumps({"frames": build_recording()}), encoding="utf-8")
    return path


def test_full_cycle(recording_path):
    frames = ScanComponentFactory.create_frame_reader().read(recording_path)
    session = ScanComponentFactory.create_session()

    found = []
    for frame in frames:
        result = session.process_recognized_frame(frame)
        if result is not None:
            found.append(result)

    assert [(f.kind, f.display_value) for f in found] == [
        (FieldKind.ACCOUNT_NUMBER, "5050505"),
        (FieldKind.AMOUNT, "199,50"),
        (FieldKind.REFERENCE, "8821003344"),
    ]
    assert session.fields.is_complete
    assert session.frames_processed == len(frames)
    # Всё, что не стало стабильным, к концу записи устарело
    assert session.stabilizer.tracked_count == 0


def test_replay_script(recording_path, capsys):
    spec = importlib.util.spec_from_file_location("replay_frames", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    assert module.replay(recording_path, as_json=True) is True
    output = json.loads(capsys.readouterr().out.split("\n", 2)[2])
    assert output["frames"] == 75
    assert output["fields"] == {
        "reference": "8821003344 #",
        "amount": "199 50",
        "account_number": "5050505#12#",
    }
    assert [f["kind"] for f in output["found"]] == ["account_number", "amount", "reference"]


def test_replay_script_missing_file(tmp_path, capsys):
    spec = importlib.util.spec_from_file_location("replay_frames", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    assert module.replay(tmp_path / "nope.json") is False
    assert "[ERROR]" in capsys.readouterr().out
