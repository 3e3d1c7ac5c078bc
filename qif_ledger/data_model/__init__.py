# qif_ledger/data_model/__init__.py
from .interfaces import (
    EnumClearedStatus, QifAccountType, ILedgerAccount, IPosting, IRecord,
    ISplit, IToDict, ITransaction, ITransactionEmitter, RecursiveDictStr)
from .ledger import (
    ACCOUNT_SEPARATOR, UNKNOWN_ACCOUNT, LedgerAccount, LedgerTransaction, Posting)
from .qif import QifCode, QRecord, QRecordSet, QSplit, qif_codes
__all__ = [
    "EnumClearedStatus", "QifAccountType", "ILedgerAccount", "IPosting",
    "IRecord", "ISplit", "IToDict", "ITransaction", "ITransactionEmitter",
    "RecursiveDictStr", "ACCOUNT_SEPARATOR", "UNKNOWN_ACCOUNT", "LedgerAccount",
    "LedgerTransaction", "Posting", "QifCode", "QRecord", "QRecordSet", "QSplit",
    "qif_codes"]
