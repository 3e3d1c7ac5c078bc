from .hledger_emitter import HledgerEmitter
from .postings_frame import POSTING_COLUMNS, PostingsCsvEmitter, postings_frame
from .qif_record_reader import END_OF_RECORDS, QifRecordReader
from .qif_record_set_parser import QifRecordSetParser

__all__ = [
    "END_OF_RECORDS",
    "HledgerEmitter",
    "POSTING_COLUMNS",
    "PostingsCsvEmitter",
    "QifRecordReader",
    "QifRecordSetParser",
    "postings_frame",
]
