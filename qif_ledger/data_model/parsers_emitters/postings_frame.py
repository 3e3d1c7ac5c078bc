# qif_ledger/data_model/parsers_emitters/postings_frame.py
"""
Tabular view of ledger transactions.

One row per posting, so a transaction with N postings contributes N rows that
share its date, status, payee, description and comment. Amounts stay
``Decimal`` in the frame and are written verbatim to CSV.
"""

from __future__ import annotations

import io
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, TextIO

import pandas as pd

from qif_ledger.data_model.interfaces import ITransaction, ITransactionEmitter

POSTING_COLUMNS = [
    "date",
    "status",
    "payee",
    "description",
    "comment",
    "account",
    "amount",
]


def _posting_rows(txn: ITransaction) -> list[dict[str, Any]]:
    return [
        {
            "date": txn.date.date().isoformat(),
            "status": txn.status.value,
            "payee": txn.payee,
            "description": txn.description,
            "comment": txn.comment,
            "account": p.account.name(),
            "amount": p.amount,
        }
        for p in txn.postings
    ]


def postings_frame(txns: Iterable[ITransaction]) -> pd.DataFrame:
    """Flatten ``txns`` into a DataFrame with ``POSTING_COLUMNS``."""
    rows = [row for txn in txns for row in _posting_rows(txn)]
    return pd.DataFrame(rows, columns=POSTING_COLUMNS)


class PostingsCsvEmitter:
    """Write transactions as CSV, one row per posting."""

    def emit(self, txn: ITransaction) -> str:
        buf = io.StringIO()
        postings_frame([txn]).to_csv(buf, index=False, header=False)
        return buf.getvalue()

    def write(self, txns: Iterable[ITransaction], sink: TextIO) -> int:
        txns = list(txns)
        postings_frame(txns).to_csv(sink, index=False)
        return len(txns)


if TYPE_CHECKING:
    _is_i_transaction_emitter: type[ITransactionEmitter] = PostingsCsvEmitter
