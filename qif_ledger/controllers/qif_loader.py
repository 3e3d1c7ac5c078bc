# qif_ledger/controllers/qif_loader.py
from __future__ import annotations

import glob
import logging
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from operator import attrgetter
from pathlib import Path
from typing import Optional

from qif_ledger.data_model import LedgerTransaction, QRecordSet
from qif_ledger.data_model.parsers_emitters import QifRecordSetParser
from qif_ledger.utilities.core_util import open_for_read

from .converter import ConversionSettings, QifConverter

log = logging.getLogger(__name__)

_GLOB_CHARS = set("*?[")


def expand_inputs(patterns: Iterable[str]) -> list[Path]:
    """
    Expand file names and glob patterns into a de-duplicated list of paths.

    Matches of each pattern are sorted; the order of the patterns is kept.

    Raises
    ------
    FileNotFoundError
        If a pattern matches nothing.
    """
    seen: set[Path] = set()
    paths: list[Path] = []
    for pattern in patterns:
        if _GLOB_CHARS & set(pattern):
            matches = sorted(Path(m) for m in glob.glob(pattern))
        else:
            matches = [Path(pattern)] if Path(pattern).is_file() else []
        if not matches:
            raise FileNotFoundError(f"No QIF input matches {pattern!r}")
        for path in matches:
            if path not in seen:
                seen.add(path)
                paths.append(path)
    return paths


def load_record_set(path: Path, encoding: str = "utf-8") -> QRecordSet:
    """Open, decode and parse one single-account QIF export."""
    with open_for_read(path, binary=False, encoding=encoding) as f:
        record_set = QifRecordSetParser().parse_lines(f)
    log.info("Parsed %d QIF records from %s", len(record_set.records), path)
    return record_set


def convert_file(
    path: Path,
    settings: Optional[ConversionSettings] = None,
    encoding: str = "utf-8",
) -> list[LedgerTransaction]:
    record_set = load_record_set(path, encoding=encoding)
    txns = QifConverter(settings).convert(record_set)
    log.info(
        "Converted %d records for account %r from %s",
        len(txns),
        record_set.account_name(),
        path,
    )
    return txns


def sort_by_date(txns: Iterable[LedgerTransaction]) -> list[LedgerTransaction]:
    """Order by ascending date; transactions on the same date keep their input order."""
    return sorted(txns, key=attrgetter("date"))


def load_transactions(
    paths: Sequence[Path],
    settings: Optional[ConversionSettings] = None,
    encoding: str = "utf-8",
    workers: int = 1,
) -> list[LedgerTransaction]:
    """
    Convert several QIF exports and merge them into one date-ordered list.

    Files are independent of each other, so with ``workers > 1`` they are
    parsed and converted on a thread pool. Results are merged in the order of
    ``paths`` before sorting, so the output does not depend on ``workers``.
    The first failing file aborts the whole load.
    """
    if workers < 1:
        raise ValueError("workers must be a positive integer")
    convert = partial(convert_file, settings=settings, encoding=encoding)
    if workers == 1 or len(paths) < 2:
        per_file = [convert(p) for p in paths]
    else:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            per_file = list(pool.map(convert, paths))
    return sort_by_date(txn for txns in per_file for txn in txns)
