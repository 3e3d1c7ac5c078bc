from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import TYPE_CHECKING, Final

from qif_ledger.errors import QifCategoryError

from ..interfaces import ILedgerAccount

ACCOUNT_SEPARATOR: Final = ":"
UNKNOWN_ACCOUNT: Final = "((unknown account))"


@total_ordering
@dataclass(frozen=True)
class LedgerAccount:
    """
    A ledger account name held as its hierarchy of path segments,
    e.g. ``("assets", "bank", "smile", "current")``.
    """

    segments: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.segments or "" in self.segments:
            raise QifCategoryError(ACCOUNT_SEPARATOR.join(self.segments))

    @classmethod
    def from_category(
        cls, category: str, unknown_account: str = UNKNOWN_ACCOUNT
    ) -> LedgerAccount:
        """
        Build an account from a colon-delimited category.

        An empty category maps to the single-segment ``unknown_account``
        placeholder rather than an empty path.
        """
        if category == "":
            return cls((unknown_account,))
        return cls(tuple(category.split(ACCOUNT_SEPARATOR)))

    def name(self) -> str:
        return ACCOUNT_SEPARATOR.join(self.segments)

    def __str__(self) -> str:
        return self.name()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LedgerAccount):
            return NotImplemented
        return self.segments < other.segments


if TYPE_CHECKING:
    _is_i_ledger_account: type[ILedgerAccount] = LedgerAccount
