from .category_map import CategoryMap, load_category_map
from .converter import (
    TRANSFER_ACCOUNT,
    ConversionSettings,
    QifConverter,
    convert_record_set,
    transfer_comment,
)
from .qif_loader import (
    convert_file,
    expand_inputs,
    load_record_set,
    load_transactions,
    sort_by_date,
)

__all__ = [
    "CategoryMap",
    "ConversionSettings",
    "QifConverter",
    "TRANSFER_ACCOUNT",
    "convert_file",
    "convert_record_set",
    "expand_inputs",
    "load_category_map",
    "load_record_set",
    "load_transactions",
    "sort_by_date",
    "transfer_comment",
]
