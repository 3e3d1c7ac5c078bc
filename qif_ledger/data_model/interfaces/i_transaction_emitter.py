# qif_ledger/data_model/interfaces/i_transaction_emitter.py
"""
Runtime-checkable protocol for renderers of ledger transactions.

An emitter turns a transaction into the textual syntax of a target ledger
format (date format, status glyphs, posting indentation, number formatting).
The conversion core only guarantees that the transaction it hands over is
complete and balanced; everything about layout belongs to the emitter.

Expectations for implementers:

- **Determinism:** the same transaction always renders to the same text.
- **Purity:** ``emit`` must not mutate its argument.
- **Streaming:** ``write`` renders transactions in the order given and writes
  them to ``sink`` without buffering the whole output.
"""

from __future__ import annotations

from typing import Iterable, TextIO, runtime_checkable

from typing_extensions import Protocol

from .i_transaction import ITransaction


@runtime_checkable
class ITransactionEmitter(Protocol):
    def emit(self, txn: ITransaction) -> str:
        """Return the textual representation of a single transaction."""
        ...

    def write(self, txns: Iterable[ITransaction], sink: TextIO) -> int:
        """Write ``txns`` to ``sink`` and return how many were written."""
        ...
