from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal
from typing import TYPE_CHECKING

from ..interfaces import IPosting, IToDict, RecursiveDictStr
from .ledger_account import LedgerAccount


@dataclass(frozen=True)
class Posting:
    """A credit to, or debit from, a single ledger account."""

    account: LedgerAccount
    amount: Decimal = Decimal(0)

    def with_amount(self, amount: Decimal) -> Posting:
        return replace(self, amount=amount)

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        return {"account": self.account.name(), "amount": str(self.amount)}


if TYPE_CHECKING:
    _is_i_posting: type[IPosting] = Posting
    _is_IToDict: type[IToDict] = Posting
