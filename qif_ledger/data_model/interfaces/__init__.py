"""
Interfaces and Enums for the QIF and ledger data model.
"""

from .enum_cleared_status import EnumClearedStatus
from .enum_qif_account_type import QifAccountType
from .i_posting import ILedgerAccount, IPosting
from .i_record import IRecord
from .i_split import ISplit
from .i_to_dict import IToDict, RecursiveDictStr
from .i_transaction import ITransaction
from .i_transaction_emitter import ITransactionEmitter

__all__ = [
    "EnumClearedStatus",
    "QifAccountType",
    "ILedgerAccount",
    "IPosting",
    "IRecord",
    "ISplit",
    "IToDict",
    "ITransaction",
    "ITransactionEmitter",
    "RecursiveDictStr",
]
