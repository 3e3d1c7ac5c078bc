# qif_ledger/data_model/interfaces/i_posting.py
from __future__ import annotations

from decimal import Decimal
from typing import runtime_checkable

from typing_extensions import Protocol

from .i_to_dict import IToDict


@runtime_checkable
class ILedgerAccount(Protocol):
    """A colon-delimited account hierarchy held as path segments."""

    segments: tuple[str, ...]

    def name(self) -> str: ...


@runtime_checkable
class IPosting(IToDict, Protocol):
    """One leg of a double-entry transaction."""

    account: ILedgerAccount
    amount: Decimal
