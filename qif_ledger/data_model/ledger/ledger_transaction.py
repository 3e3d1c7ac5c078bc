from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from ..interfaces import EnumClearedStatus, IToDict, ITransaction, RecursiveDictStr
from .posting import Posting


@dataclass(frozen=True)
class LedgerTransaction:
    """
    The movement of funds between two or more accounts.

    Built once per QIF record; the postings always sum to zero.
    """

    date: datetime
    status: EnumClearedStatus = EnumClearedStatus.UNKNOWN
    payee: str = ""
    description: str = ""
    comment: str = ""
    postings: tuple[Posting, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if len(self.postings) < 2:
            raise ValueError(
                f"A transaction needs at least two postings, got {len(self.postings)}"
            )
        if not self.is_balanced():
            raise ValueError(f"Postings do not balance: sum is {self.balance()}")

    def balance(self) -> Decimal:
        return sum((p.amount for p in self.postings), Decimal(0))

    def is_balanced(self) -> bool:
        return self.balance() == 0

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        d: dict[str, RecursiveDictStr] = {
            "date": self.date.date().isoformat(),
            "status": self.status.value,
            "postings": [p.to_dict() for p in self.postings],
        }
        if self.payee:
            d["payee"] = self.payee
        if self.description:
            d["description"] = self.description
        if self.comment:
            d["comment"] = self.comment
        return d


if TYPE_CHECKING:
    _is_i_transaction: type[ITransaction] = LedgerTransaction
    _is_IToDict: type[IToDict] = LedgerTransaction
