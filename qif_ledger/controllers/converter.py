# qif_ledger/controllers/converter.py
"""
QIF record → double-entry ledger transaction conversion.

A QIF export describes every movement from the point of view of one account
(the one named by its opening record). Each record therefore becomes a ledger
transaction with one posting per category (or per split) and a final posting
to the file's own account that balances the transaction.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Final, Optional

from qif_ledger.data_model import (
    UNKNOWN_ACCOUNT,
    EnumClearedStatus,
    LedgerAccount,
    LedgerTransaction,
    Posting,
    QRecord,
    QRecordSet,
)
from qif_ledger.errors import QifConversionError, QifError
from qif_ledger.utilities.converters_scalar import parse_qif_date, to_posting_amount

from .category_map import CategoryMap

log = logging.getLogger(__name__)

TRANSFER_ACCOUNT: Final = "transfer_account"


@dataclass(frozen=True)
class ConversionSettings:
    category_map: CategoryMap = field(default_factory=CategoryMap)
    transfer_account: str = TRANSFER_ACCOUNT
    unknown_account: str = UNKNOWN_ACCOUNT


def transfer_comment(record: QRecord) -> str:
    """
    ``transfer-to:"<label>"`` for outgoing amounts, ``transfer-from:"<label>"`` otherwise.

    Backslashes and double quotes inside the label are escaped with a backslash.
    """
    direction = "to" if record.amount.startswith("-") else "from"
    label = record.label.replace("\\", "\\\\").replace('"', '\\"')
    return f'transfer-{direction}:"{label}"'


class QifConverter:
    """Convert QIF record sets into balanced ledger transactions."""

    def __init__(self, settings: Optional[ConversionSettings] = None):
        self.settings = settings if settings is not None else ConversionSettings()

    def convert(self, record_set: QRecordSet) -> list[LedgerTransaction]:
        """
        Convert every body record of ``record_set``, in input order.

        Raises
        ------
        QifConversionError
            On the first record that cannot be converted; nothing is returned
            for the record set in that case.
        """
        opening = self.opening_posting(record_set.opening)
        txns: list[LedgerTransaction] = []
        for record in record_set.records:
            try:
                txns.append(self.convert_record(record, opening))
            except QifConversionError as e:
                log.error("Converting from QIF %s error: %s", record, e.cause)
                raise
        return txns

    def convert_record(self, record: QRecord, opening: Posting) -> LedgerTransaction:
        """Convert one record; ``opening`` is the posting to the file's own account."""
        try:
            date = parse_qif_date(record.date)
        except QifError as e:
            raise QifConversionError(e, record) from e

        comment = ""
        postings: list[Posting] = []
        if record.has_splits():
            for split in record.splits:
                try:
                    postings.append(self.posting(self.remap(split.category), split.amount))
                except QifError as e:
                    raise QifConversionError(e, record, split) from e
        else:
            category = self.remap(record.label)
            if record.transfer:
                category = self.settings.transfer_account
                comment = transfer_comment(record)
            try:
                postings.append(self.posting(category, record.amount))
            except QifError as e:
                raise QifConversionError(e, record) from e

        postings.append(self.balancing_posting(opening, postings))
        return LedgerTransaction(
            date=date,
            status=EnumClearedStatus.from_char(record.cleared),
            payee=record.payee,
            description=record.memo,
            comment=comment,
            postings=tuple(postings),
        )

    def opening_posting(self, opening: QRecord) -> Posting:
        """The zero-amount posting to the account the whole file belongs to."""
        return Posting(self.account(self.remap(opening.label)), Decimal(0))

    def balancing_posting(self, opening: Posting, postings: list[Posting]) -> Posting:
        total = sum((p.amount for p in postings), Decimal(0))
        return opening.with_amount(-total if total else abs(total))

    def posting(self, category: str, raw_amount: str) -> Posting:
        """Build a category posting; ``category`` must already be remapped."""
        account = self.account(category)
        log.debug("posting: account=%s amount=%r", account, raw_amount)
        return Posting(account, to_posting_amount(raw_amount))

    def account(self, category: str) -> LedgerAccount:
        return LedgerAccount.from_category(category, self.settings.unknown_account)

    def remap(self, label: str) -> str:
        return self.settings.category_map.remap(label)


def convert_record_set(
    record_set: QRecordSet, settings: Optional[ConversionSettings] = None
) -> list[LedgerTransaction]:
    return QifConverter(settings).convert(record_set)
