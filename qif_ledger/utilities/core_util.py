#!/usr/bin/env python3
"""
Core Utilities

Features:
- File I/O helpers
- String utilities
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, Any, Literal, overload

# region Common functions


def unwrap_brackets(label: str) -> tuple[str, bool]:
    """
    Strip a wrapping ``[`` ``]`` pair from ``label``.

    Returns the stripped label and ``True`` when the pair was present,
    otherwise the original label and ``False``. ``"[]"`` unwraps to ``""``.
    """
    if len(label) >= 2 and label[0] == "[" and label[-1] == "]":
        return label[1:-1], True
    return label, False


@overload
def open_for_read(path: Path, binary: Literal[True], **kwargs: Any) -> IO[bytes]: ...
@overload
def open_for_read(path: Path, binary: Literal[False] = ..., **kwargs: Any) -> IO[str]: ...


def open_for_read(path: Path, binary: bool = False, **kwargs: Any) -> IO[Any]:
    mode = "rb" if binary else "r"
    return open(path, mode, **kwargs)


# endregion Common functions
