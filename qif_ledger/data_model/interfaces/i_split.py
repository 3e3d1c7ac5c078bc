from __future__ import annotations

from typing import runtime_checkable

from typing_extensions import Protocol

from .i_to_dict import IToDict


@runtime_checkable
class ISplit(IToDict, Protocol):
    """Structural shape of a split (S/E/$ lines) as read from the file, values unparsed."""

    category: str
    memo: str
    amount: str
    percent: str
