from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..interfaces import ISplit, IToDict, RecursiveDictStr


@dataclass(frozen=True)
class QSplit:
    """
    A single split (sub-transaction) of a QIF record, values as read.
    """

    category: str = ""
    memo: str = ""
    amount: str = ""
    percent: str = ""

    def __str__(self) -> str:
        return f"category {self.category!r} memo {self.memo!r} amount {self.amount!r}"

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        d: dict[str, RecursiveDictStr] = {
            "category": self.category,
            "amount": self.amount,
        }
        if self.memo:
            d["memo"] = self.memo
        if self.percent:
            d["percent"] = self.percent
        return d


if TYPE_CHECKING:
    _is_i_split: type[ISplit] = QSplit
    _is_IToDict: type[IToDict] = QSplit
