# qif_ledger/data_model/qif/qif_codes.py
"""Field codes understood by the QIF record reader."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class QifCode:
    code: str
    description: str
    used_in: str
    example: str

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QifCode):
            return NotImplemented
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)


TYPE = QifCode("!", "Account type header", "Header", "!Type:Bank")
DATE = QifCode("D", "Date", "Record", "D15/03'2003")
AMOUNT = QifCode("T", "Amount", "Record", "T-26.07")
AMOUNT_ALT = QifCode("U", "Amount (alternate)", "Record", "U-26.07")
NUMBER = QifCode("N", "Check or reference number", "Record", "NVISA")
CLEARED = QifCode("C", "Cleared status", "Record", "CX")
PAYEE = QifCode("P", "Payee", "Record", "PHomebase")
LABEL = QifCode("L", "Category or [transfer account]", "Record", "LHousing:Improvements")
MEMO = QifCode("M", "Memo", "Record", "MPaint")
SPLIT_CATEGORY = QifCode("S", "Split category", "Split", "SFood:Dining Out")
SPLIT_MEMO = QifCode("E", "Split memo", "Split", "ELunch")
SPLIT_AMOUNT = QifCode("$", "Split amount", "Split", "$-10.00")
SPLIT_PERCENT = QifCode("%", "Split percentage (unsupported)", "Split", "%25.00")
END_OF_RECORD = QifCode("^", "End of record", "Record", "^")
