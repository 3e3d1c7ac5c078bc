# qif_ledger/cli.py
from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Optional

from qif_ledger.controllers import (
    ConversionSettings,
    expand_inputs,
    load_category_map,
    load_transactions,
)
from qif_ledger.data_model.interfaces import ITransactionEmitter
from qif_ledger.data_model.parsers_emitters import HledgerEmitter, PostingsCsvEmitter
from qif_ledger.utilities.config_logging import configure_logging

log = logging.getLogger(__name__)

EMITTERS: dict[str, type[ITransactionEmitter]] = {
    "hledger": HledgerEmitter,
    "csv": PostingsCsvEmitter,
}


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="qif-ledger",
        description="Convert Microsoft Money / Quicken QIF account exports into a double-entry ledger journal.",
    )
    ap.add_argument("inputs", nargs="+", help="QIF files or glob patterns (quote patterns to keep the shell off them)")
    ap.add_argument("-o", "--out", type=Path, help="Output file (default: stdout)")
    ap.add_argument("--format", choices=sorted(EMITTERS), default="hledger",
                    help="Output format: hledger journal (default) or csv with one row per posting")
    ap.add_argument("--encoding", default="utf-8",
                    help="Text encoding of the QIF inputs (default: utf-8). Try cp1252 for old exports.")
    ap.add_argument("--category-map", type=Path,
                    help="CSV or Excel sheet with 'category' and 'account' columns used to rename categories")
    ap.add_argument("--max", type=int, default=0,
                    help="Maximum number of transactions to write (0 = all)")
    ap.add_argument("--workers", type=int, default=1,
                    help="Number of files converted in parallel (default: 1)")
    ap.add_argument("--log-level", default="INFO",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    ap.add_argument("--log-file", type=Path, help="Also write a detailed log to this file")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    configure_logging(args.log_level, args.log_file)

    if args.max < 0:
        raise SystemExit("--max must be zero or a positive number")
    if args.workers < 1:
        raise SystemExit("--workers must be a positive number")

    try:
        settings = ConversionSettings()
        if args.category_map is not None:
            settings = ConversionSettings(category_map=load_category_map(args.category_map))
        paths = expand_inputs(args.inputs)
        txns = load_transactions(paths, settings, encoding=args.encoding, workers=args.workers)
    except (OSError, ValueError) as e:
        raise SystemExit(f"qif-ledger: {e}") from e

    if args.max > 0:
        txns = txns[: args.max]

    emitter = EMITTERS[args.format]()
    if args.out is None:
        written = emitter.write(txns, sys.stdout)
    else:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        with open(args.out, "w", encoding="utf-8", newline="") as fp:
            written = emitter.write(txns, fp)
    log.info("Wrote %d transactions to %s", written, args.out or "stdout")
    return 0


if __name__ == "__main__":
    sys.exit(main())
