# tests/conftest.py
from __future__ import annotations

from pathlib import Path

import pytest

BANK_QIF = """\
!Type:Bank
D01/01'2011
T0.00
CX
POpening Balance
L[Paul - smile Current]
^
D28/11'2011
CX
MMonthly allowance in from joint ac
T800.00
PUs
L[Joint - smile Current]
^
D24/11'2011
CX
MLunch/early dinner at Heathrow for me and R
T-14.40
NVISA
PThe Bridge Bar
LFood:Dining Out
SFood:Dining Out
ELunch/early dinner
$-10.00
SDrink
EBeer & juice
$-4.40
^
D15/03/1999
C*
MPaint
T-1,026.07
PHomebase
LHousing:Improvements
^
"""


@pytest.fixture
def bank_qif_text() -> str:
    return BANK_QIF


@pytest.fixture
def write_qif(tmp_path: Path):
    """Write QIF text to a file under tmp_path and return its path."""

    def _write(name: str, text: str, encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding=encoding)
        return path

    return _write
