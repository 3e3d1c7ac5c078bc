# qif_ledger/__init__.py
"""Convert single-entry QIF account exports into balanced double-entry ledger transactions."""

from .controllers import (
    CategoryMap,
    ConversionSettings,
    QifConverter,
    convert_record_set,
    load_category_map,
    load_record_set,
    load_transactions,
)
from .data_model.parsers_emitters import HledgerEmitter, QifRecordReader, QifRecordSetParser
from .errors import QifError

__version__ = "0.1.0"

__all__ = [
    "CategoryMap",
    "ConversionSettings",
    "HledgerEmitter",
    "QifConverter",
    "QifError",
    "QifRecordReader",
    "QifRecordSetParser",
    "convert_record_set",
    "load_category_map",
    "load_record_set",
    "load_transactions",
]
