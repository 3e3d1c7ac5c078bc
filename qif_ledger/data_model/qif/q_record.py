from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..interfaces import IRecord, IToDict, RecursiveDictStr
from .q_split import QSplit


@dataclass(frozen=True)
class QRecord:
    """
    One ``^``-terminated QIF record.

    Field values are stored verbatim; ``label`` has its ``[...]`` wrapper
    removed and ``transfer`` records whether it had one.
    """

    type: str = ""
    date: str = ""
    amount: str = ""
    number: str = ""
    cleared: str = ""
    payee: str = ""
    label: str = ""
    memo: str = ""
    splits: tuple[QSplit, ...] = field(default_factory=tuple)
    transfer: bool = False

    def has_splits(self) -> bool:
        return bool(self.splits)

    def __str__(self) -> str:
        return (
            f"type {self.type!r} date {self.date!r} amount {self.amount!r} "
            f"number {self.number!r} cleared {self.cleared!r} payee {self.payee!r} "
            f"label {self.label!r} memo {self.memo!r}"
        )

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        d: dict[str, RecursiveDictStr] = {}
        for name in ("type", "date", "amount", "number", "cleared", "payee", "label", "memo"):
            value = getattr(self, name)
            if value:
                d[name] = value
        if self.transfer:
            d["transfer"] = "true"
        if self.splits:
            d["splits"] = [s.to_dict() for s in self.splits]
        return d


if TYPE_CHECKING:
    _is_i_record: type[IRecord] = QRecord
    _is_IToDict: type[IToDict] = QRecord
