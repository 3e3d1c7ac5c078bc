# qif_ledger/data_model/interfaces/enum_cleared_status.py
from __future__ import annotations

from enum import Enum


class EnumClearedStatus(Enum):
    """
    Reconciliation status of a ledger transaction.

    Derived from the single-character QIF ``C`` field; see ``from_char``.
    """

    UNKNOWN = "unknown"
    UNMARKED = "unmarked"
    PENDING = "pending"
    CLEARED = "cleared"

    @classmethod
    def from_char(cls, char: str) -> EnumClearedStatus:
        """
        Map a raw QIF cleared code to a status.

        ``" "`` is UNMARKED, ``"*"``/``"C"`` are PENDING, ``"X"``/``"R"`` are
        CLEARED. Anything else, the empty string included, is UNKNOWN.
        """
        return _FROM_CHAR.get(char, cls.UNKNOWN)

    @property
    def glyph(self) -> str:
        """The hledger status mark: ``!`` for pending, ``*`` for cleared."""
        if self is EnumClearedStatus.PENDING:
            return "!"
        if self is EnumClearedStatus.CLEARED:
            return "*"
        return ""


_FROM_CHAR = {
    " ": EnumClearedStatus.UNMARKED,
    "*": EnumClearedStatus.PENDING,
    "C": EnumClearedStatus.PENDING,
    "X": EnumClearedStatus.CLEARED,
    "R": EnumClearedStatus.CLEARED,
}
