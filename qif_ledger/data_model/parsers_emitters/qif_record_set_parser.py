# qif_ledger/data_model/parsers_emitters/qif_record_set_parser.py
from __future__ import annotations

import io
import logging
from collections.abc import Iterable
from itertools import count

from qif_ledger.data_model.interfaces import QifAccountType
from qif_ledger.data_model.qif import QRecord, QRecordSet
from qif_ledger.errors import (
    QifError,
    QifMissingHeaderError,
    QifRecordError,
    QifUnsupportedAccountTypeError,
)

from .qif_record_reader import END_OF_RECORDS, QifRecordReader

log = logging.getLogger(__name__)


class QifRecordSetParser:
    """Parse a single-account QIF export into a ``QRecordSet``."""

    def parse(self, unparsed_string: str) -> QRecordSet:
        """Parse the full text of a QIF export."""
        # Same line breaking as a file opened in text mode: \n, \r\n and \r only.
        return self.parse_lines(io.StringIO(unparsed_string, newline=None))

    def parse_lines(self, lines: Iterable[str]) -> QRecordSet:
        """
        Parse already-decoded lines.

        The first record must be a Bank, Cash or CCard header; every
        following record up to the end of input becomes a body record.

        Raises
        ------
        QifMissingHeaderError
            If the header record cannot be read.
        QifUnsupportedAccountTypeError
            If the header names another account type.
        QifRecordError
            If a body record fails to parse; carries its 1-based ordinal.
        """
        reader = QifRecordReader(lines)
        opening = self._read_opening(reader)

        records: list[QRecord] = []
        for index in count(1):
            try:
                record = reader.next_record()
            except QifError as e:
                raise QifRecordError(index, e) from e
            if record is END_OF_RECORDS:
                break
            records.append(record)

        log.debug(
            "Parsed %d QIF records for %s over %d lines",
            len(records),
            opening.type,
            reader.lines_read,
        )
        return QRecordSet(opening=opening, records=tuple(records))

    def _read_opening(self, reader: QifRecordReader) -> QRecord:
        try:
            first = reader.next_record()
        except QifError as e:
            raise QifMissingHeaderError(f"missing header: reading first QIF record: {e}") from e
        if first is END_OF_RECORDS:
            raise QifMissingHeaderError("missing header: no complete QIF record in input")
        if QifAccountType.from_header(first.type) is None:
            raise QifUnsupportedAccountTypeError(first.type, first)
        return first
