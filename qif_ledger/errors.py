# qif_ledger/errors.py
"""
Exception hierarchy for QIF parsing and ledger conversion.

Every error derives from ``QifError`` (itself a ``ValueError``) and carries
enough context (line number, record ordinal, raw field value) to diagnose the
input without re-parsing it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from qif_ledger.data_model.qif import QRecord, QSplit


class QifError(ValueError):
    """Base class for all errors raised by qif_ledger."""


class QifStructureError(QifError):
    """The line sequence does not have the shape of a QIF record stream."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"QIF: {message} at line {line_number}"
        super().__init__(message)


class QifUnsupportedFieldError(QifError):
    """A field code that exists in QIF but is not implemented (e.g. ``%``)."""

    def __init__(self, field: str, line_number: Optional[int] = None):
        self.field = field
        self.line_number = line_number
        where = f" (line {line_number})" if line_number is not None else ""
        super().__init__(f"QIF: field {field!r} not supported{where}")


class QifMissingHeaderError(QifStructureError):
    """The first record of a record set could not be read."""


class QifUnsupportedAccountTypeError(QifStructureError):
    """The first record is not a Bank, Cash or CCard header."""

    def __init__(self, account_type: str, record: "QRecord"):
        self.account_type = account_type
        self.record = record
        super().__init__(
            f"unsupported first record type: got {account_type!r} want "
            f"'Type:Bank', 'Type:CCard' or 'Type:Cash' (record: {record})"
        )


class QifRecordError(QifError):
    """A body record failed to parse; ``record_index`` is 1-based."""

    def __init__(self, record_index: int, cause: QifError):
        self.record_index = record_index
        self.cause = cause
        super().__init__(f"reading QIF record {record_index}: {cause}")


class QifDateFormatError(QifError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Unrecognized QIF date: {value!r}")


class QifAmountFormatError(QifError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Could not parse QIF amount: {value!r}")


class QifConversionError(QifError):
    """A record (or one of its splits) could not be converted to a transaction."""

    def __init__(
        self,
        cause: QifError,
        record: "QRecord",
        split: "QSplit | None" = None,
    ):
        self.cause = cause
        self.record = record
        self.split = split
        target = f"split {split} of record {record}" if split else f"record {record}"
        super().__init__(f"converting {target}: {cause}")


class QifCategoryError(QifError):
    """A category does not form a valid account path (empty segment)."""

    def __init__(self, category: str):
        self.category = category
        super().__init__(f"Category {category!r} has an empty account segment")
