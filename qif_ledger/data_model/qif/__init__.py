# qif_ledger/data_model/qif/__init__.py

from . import qif_codes
from .q_record import QRecord
from .q_record_set import QRecordSet
from .q_split import QSplit
from .qif_codes import QifCode

__all__ = [
    "QifCode",
    "QRecord",
    "QRecordSet",
    "QSplit",
    "qif_codes",
]
