# qif_ledger/controllers/category_map.py
"""
Category → ledger account remapping.

QIF labels such as ``"Joint - smile Current"`` name accounts the way the
exporting program displays them. A ``CategoryMap`` rewrites those known labels
into canonical colon-delimited ledger paths
(``"assets:bank:smile:joint:current"``) and leaves every other label alone.

The table is plain configuration: build it from a dict, or load it from a
two-column CSV / Excel sheet with ``load_category_map``.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Optional

import pandas as pd

CATEGORY_COLUMN = "category"
ACCOUNT_COLUMN = "account"

_EXCEL_SUFFIXES = {".xlsx", ".xlsm", ".xls"}


class CategoryMap(Mapping[str, str]):
    """Immutable lookup table from raw QIF label to ledger account path."""

    def __init__(self, mapping: Optional[Mapping[str, str]] = None):
        self._map: dict[str, str] = dict(mapping or {})

    def __getitem__(self, label: str) -> str:
        return self._map[label]

    def __iter__(self) -> Iterator[str]:
        return iter(self._map)

    def __len__(self) -> int:
        return len(self._map)

    def __repr__(self) -> str:
        return f"CategoryMap({len(self._map)} entries)"

    def remap(self, label: str) -> str:
        """Return the canonical path for ``label``, or ``label`` itself when unmapped."""
        return self._map.get(label, label)


def _read_table(path: Path) -> pd.DataFrame:
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return pd.read_csv(path, dtype=str, keep_default_na=False)
    if suffix in _EXCEL_SUFFIXES:
        # Requires an Excel engine such as openpyxl.
        return pd.read_excel(path, dtype=str, keep_default_na=False)
    raise ValueError(f"Unsupported category map format {suffix!r}: use .csv or .xlsx")


def load_category_map(path: Path) -> CategoryMap:
    """Load a category map from a CSV or Excel sheet.

    Parameters
    ----------
    path : Path
        File with (at least) the columns ``category`` and ``account``. Header
        names are matched case-insensitively; cell values are used verbatim.

    Returns
    -------
    CategoryMap
        One entry per row.

    Raises
    ------
    ValueError
        If a required column is missing, a category appears twice, or an
        account path is blank.
    """
    df = _read_table(Path(path))
    df.columns = [str(c).strip().lower() for c in df.columns]

    missing = [c for c in (CATEGORY_COLUMN, ACCOUNT_COLUMN) if c not in df.columns]
    if missing:
        raise ValueError(f"Category map {path} is missing column(s): {', '.join(missing)}")

    duplicated = df.loc[df[CATEGORY_COLUMN].duplicated(), CATEGORY_COLUMN].tolist()
    if duplicated:
        raise ValueError(f"Category map {path} lists categories more than once: {duplicated}")

    blank = df.loc[df[ACCOUNT_COLUMN].str.strip() == "", CATEGORY_COLUMN].tolist()
    if blank:
        raise ValueError(f"Category map {path} has no account for: {blank}")

    return CategoryMap(dict(zip(df[CATEGORY_COLUMN], df[ACCOUNT_COLUMN])))
