# qif_ledger/data_model/parsers_emitters/qif_record_reader.py
"""
Line-oriented reader that turns a QIF transaction export into records.

Each line starts with a one-character field code followed by the raw value.
A line starting with ``^`` ends the current record. Records are produced one
at a time, on demand, in a single forward pass over the input.

``QifRecordReader.next_record`` has three distinct outcomes:

- a ``QRecord`` for every ``^``-terminated record,
- the ``END_OF_RECORDS`` sentinel once the input is exhausted (a trailing
  record without ``^`` is dropped),
- a ``QifError`` for a malformed or unsupported record. The reader stays
  usable afterwards and resumes with the following record.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Final, Optional

from qif_ledger.data_model.qif import QRecord, QSplit
from qif_ledger.data_model.qif import qif_codes as codes
from qif_ledger.errors import QifError, QifStructureError, QifUnsupportedFieldError
from qif_ledger.utilities.core_util import unwrap_brackets

log = logging.getLogger(__name__)


class _EndOfRecords:
    __slots__ = ()

    def __repr__(self) -> str:
        return "END_OF_RECORDS"

    def __bool__(self) -> bool:
        return False


# Returned by next_record() when the input holds no further complete record.
END_OF_RECORDS: Final = _EndOfRecords()

# Codes that simply store their value on the record.
_RECORD_FIELDS: Final[dict[str, str]] = {
    codes.TYPE.code: "type",
    codes.DATE.code: "date",
    codes.AMOUNT.code: "amount",
    codes.AMOUNT_ALT.code: "amount",
    codes.NUMBER.code: "number",
    codes.CLEARED.code: "cleared",
    codes.PAYEE.code: "payee",
    codes.MEMO.code: "memo",
}

# Codes that store their value on the currently open split.
_SPLIT_FIELDS: Final[dict[str, str]] = {
    codes.SPLIT_MEMO.code: "memo",
    codes.SPLIT_AMOUNT.code: "amount",
}


@dataclass
class _RecordState:
    """Scratch state for the record currently being read."""

    fields: dict[str, str] = field(default_factory=dict)
    transfer: bool = False
    splits: list[QSplit] = field(default_factory=list)
    open_split: Optional[dict[str, str]] = None
    pending_error: Optional[QifError] = None

    def close_split(self) -> None:
        if self.open_split is not None:
            self.splits.append(QSplit(**self.open_split))
            self.open_split = None

    def finish(self) -> QRecord:
        self.close_split()
        if self.pending_error is not None:
            raise self.pending_error
        return QRecord(**self.fields, splits=tuple(self.splits), transfer=self.transfer)


class QifRecordReader(Iterator[QRecord]):
    """Pull QIF records from an iterable of text lines."""

    def __init__(self, lines: Iterable[str]):
        self._lines = iter(lines)
        self.lines_read = 0

    def __iter__(self) -> QifRecordReader:
        return self

    def __next__(self) -> QRecord:
        record = self.next_record()
        if isinstance(record, _EndOfRecords):
            raise StopIteration
        return record

    def next_record(self) -> QRecord | _EndOfRecords:
        """Return the next record, or ``END_OF_RECORDS`` when the input is exhausted."""
        state = _RecordState()
        for raw in self._lines:
            self.lines_read += 1
            line = raw.rstrip("\r\n")
            if not line:
                raise QifStructureError("empty line", self.lines_read)
            code, value = line[0], line[1:]
            if code == codes.END_OF_RECORD.code:
                # anything after ^ on the same line is ignored
                return state.finish()
            self._apply(state, code, value)
        if state.fields or state.splits or state.open_split is not None:
            log.debug("Dropping unterminated record at end of input (line %d)", self.lines_read)
        return END_OF_RECORDS

    def _apply(self, state: _RecordState, code: str, value: str) -> None:
        if code in _RECORD_FIELDS:
            state.fields[_RECORD_FIELDS[code]] = value
        elif code == codes.LABEL.code:
            state.fields["label"], state.transfer = unwrap_brackets(value)
        elif code == codes.SPLIT_CATEGORY.code:
            state.close_split()
            state.open_split = {"category": value}
        elif code in _SPLIT_FIELDS:
            if state.open_split is None:
                raise QifStructureError(
                    f"split field {code!r} outside of a split", self.lines_read
                )
            state.open_split[_SPLIT_FIELDS[code]] = value
        elif code == codes.SPLIT_PERCENT.code:
            if state.open_split is not None:
                state.open_split["percent"] = value
            state.pending_error = QifUnsupportedFieldError(code, self.lines_read)
        else:
            log.debug("Ignoring field code %r at line %d", code, self.lines_read)
