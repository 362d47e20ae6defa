"""
Unit-тесты для контрактов OCR -> Slipscan -> UI.
"""

import pytest
from pydantic import ValidationError

from contracts import BoundingBox, FoundFieldDTO, RecognizedFrame, RecognizedLine


def test_frame_accepts_plain_strings():
    frame = RecognizedFrame(lines=["1234567#89#", {"text": "1250 00"}])
    assert frame.texts == ["1234567#89#", "1250 00"]
    assert isinstance(frame.lines[0], RecognizedLine)


def test_frame_is_frozen():
    frame = RecognizedFrame(lines=["a"])
    with pytest.raises(ValidationError):
        frame.lines = []


def test_bounding_box_normalized():
    with pytest.raises(ValidationError):
        BoundingBox(x=-0.1)
    assert BoundingBox(x=0.5).width == 0.0


def test_found_field_unknown_kind():
    with pytest.raises(ValidationError):
        FoundFieldDTO(kind="iban", value="x", display_value="x", frame_index=0)


def test_found_field_negative_frame():
    with pytest.raises(ValidationError):
        FoundFieldDTO(kind="amount", value="1250 00", display_value="1250,00", frame_index=-1)
