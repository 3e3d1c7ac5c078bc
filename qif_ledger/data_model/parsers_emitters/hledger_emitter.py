# qif_ledger/data_model/parsers_emitters/hledger_emitter.py
from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, TextIO

from qif_ledger.data_model.interfaces import IPosting, ITransaction, ITransactionEmitter


class HledgerEmitter:
    """
    Render transactions in hledger journal syntax::

        2017/01/12 * Dave | Groceries  ; transfer-to:"Savings"
          expenses:food  12.34
          assets:bank:current

    The amount of the last posting is left out; hledger infers it.
    """

    date_format = "%Y/%m/%d"
    indent = "  "

    def emit(self, txn: ITransaction) -> str:
        last = len(txn.postings) - 1
        lines = [self.top_line(txn)]
        lines.extend(
            f"{self.indent}{self.posting_line(p, elide_amount=i == last)}"
            for i, p in enumerate(txn.postings)
        )
        return "\n".join(lines) + "\n"

    def write(self, txns: Iterable[ITransaction], sink: TextIO) -> int:
        written = 0
        for txn in txns:
            if written:
                sink.write("\n")
            sink.write(self.emit(txn))
            written += 1
        return written

    def top_line(self, txn: ITransaction) -> str:
        items = [txn.date.strftime(self.date_format)]
        if txn.status.glyph:
            items.append(txn.status.glyph)
        if txn.payee:
            items.append(txn.payee)
        if txn.payee and txn.description:
            items.append("|")
        if txn.description:
            items.append(txn.description)
        line = " ".join(items)
        if txn.comment:
            line = f"{line}  ; {txn.comment}"
        return line

    def posting_line(self, posting: IPosting, elide_amount: bool = False) -> str:
        account = ":".join(
            segment.replace(" ", "_").lower() for segment in posting.account.segments
        )
        if elide_amount:
            return account
        return f"{account}  {posting.amount:f}"


if TYPE_CHECKING:
    _is_i_transaction_emitter: type[ITransactionEmitter] = HledgerEmitter
