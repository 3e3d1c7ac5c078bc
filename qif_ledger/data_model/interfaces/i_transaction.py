# qif_ledger/data_model/interfaces/i_transaction.py
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import runtime_checkable

from typing_extensions import Protocol

from .enum_cleared_status import EnumClearedStatus
from .i_posting import IPosting
from .i_to_dict import IToDict


@runtime_checkable
class ITransaction(IToDict, Protocol):
    """Structural shape of a balanced ledger transaction sufficient for rendering."""

    date: datetime
    status: EnumClearedStatus
    payee: str
    description: str
    comment: str
    postings: tuple[IPosting, ...]

    def balance(self) -> Decimal: ...
    def is_balanced(self) -> bool: ...
