# tests/data_model/test_enum_cleared_status.py
from __future__ import annotations

import pytest

from qif_ledger.data_model.interfaces import EnumClearedStatus


@pytest.mark.parametrize(
    "char, expected",
    [
        (" ", EnumClearedStatus.UNMARKED),
        ("*", EnumClearedStatus.PENDING),
        ("C", EnumClearedStatus.PENDING),
        ("X", EnumClearedStatus.CLEARED),
        ("R", EnumClearedStatus.CLEARED),
        ("", EnumClearedStatus.UNKNOWN),
        ("A", EnumClearedStatus.UNKNOWN),
        ("x", EnumClearedStatus.UNKNOWN),
        ("XX", EnumClearedStatus.UNKNOWN),
    ],
)
def test_from_char(char, expected):
    assert EnumClearedStatus.from_char(char) is expected


def test_glyphs():
    assert EnumClearedStatus.PENDING.glyph == "!"
    assert EnumClearedStatus.CLEARED.glyph == "*"
    assert EnumClearedStatus.UNMARKED.glyph == ""
    assert EnumClearedStatus.UNKNOWN.glyph == ""
