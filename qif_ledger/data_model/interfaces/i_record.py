# qif_ledger/data_model/interfaces/i_record.py
from __future__ import annotations

from typing import Sequence, runtime_checkable

from typing_extensions import Protocol

from .i_split import ISplit
from .i_to_dict import IToDict


@runtime_checkable
class IRecord(IToDict, Protocol):
    """
    Structural shape of one ``^``-terminated QIF record.

    All values are kept exactly as they appeared after the field code; dates
    and amounts are parsed later, during conversion.
    """

    type: str
    date: str
    amount: str
    number: str
    cleared: str
    payee: str
    label: str
    memo: str
    splits: Sequence[ISplit]
    transfer: bool

    def has_splits(self) -> bool: ...
