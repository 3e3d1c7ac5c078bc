# qif_ledger/utilities/converters_scalar.py
from __future__ import annotations

import re
from datetime import datetime, timezone
from decimal import Decimal
from typing import Final

from qif_ledger.errors import QifAmountFormatError, QifDateFormatError

# Microsoft Money writes dd/mm'yyyy for dates from 2000 on and dd/mm/yyyy before.
_QIF_DATE_FORMATS: Final[tuple[tuple[re.Pattern[str], str], ...]] = (
    (re.compile(r"\d{2}/\d{2}'\d{4}"), "%d/%m'%Y"),
    (re.compile(r"\d{2}/\d{2}/\d{4}"), "%d/%m/%Y"),
)

_THOUSANDS_SEPARATOR: Final = ","

# Plain decimal or exponent notation; no whitespace, underscores, NaN or Infinity.
_QIF_AMOUNT: Final = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


def parse_qif_date(value: str) -> datetime:
    """
    Parse a QIF date into a UTC ``datetime`` at midnight.

    Accepts ``dd/mm'yyyy`` first and falls back to ``dd/mm/yyyy``.

    Raises
    ------
    QifDateFormatError
        If neither format matches.

    Examples:
        parse_qif_date("13/04'2006") -> datetime(2006, 4, 13, tzinfo=UTC)
        parse_qif_date("11/07/1970") -> datetime(1970, 7, 11, tzinfo=UTC)
    """
    for pattern, fmt in _QIF_DATE_FORMATS:
        if not pattern.fullmatch(value):
            continue
        try:
            return datetime.strptime(value, fmt).replace(tzinfo=timezone.utc)
        except ValueError:
            # e.g. 31/02'2006: shaped right, not a calendar date
            continue
    raise QifDateFormatError(value)


def parse_qif_amount(value: str) -> Decimal:
    """Parse a raw QIF amount, dropping ``,`` thousands separators."""
    cleaned = value.replace(_THOUSANDS_SEPARATOR, "")
    if not _QIF_AMOUNT.fullmatch(cleaned):
        raise QifAmountFormatError(value)
    return Decimal(cleaned)


def to_posting_amount(value: str) -> Decimal:
    """
    Convert a raw QIF amount into the signed amount of a category posting.

    QIF states amounts from the point of view of the account the file belongs
    to; the category leg of the double-entry transaction carries the opposite
    sign. ``"-12.34"`` becomes ``Decimal("12.34")`` and ``"1,234.00"`` becomes
    ``Decimal("-1234.00")``. Zero keeps no sign: ``"0.00"`` becomes
    ``Decimal("0.00")``.
    """
    amount = parse_qif_amount(value)
    # zero stays unsigned so it never renders as -0.00
    return -amount if amount else abs(amount)
