# qif_ledger/data_model/interfaces/enum_qif_account_type.py
from __future__ import annotations

from enum import Enum
from typing import Optional


class QifAccountType(Enum):
    """Account-opening headers accepted as the first record of a QIF export."""

    BANK = "Type:Bank"
    CASH = "Type:Cash"
    CCARD = "Type:CCard"

    @classmethod
    def from_header(cls, header: str) -> Optional[QifAccountType]:
        """Return the matching member, or None when ``header`` is not recognized."""
        for member in cls:
            if member.value == header:
                return member
        return None
