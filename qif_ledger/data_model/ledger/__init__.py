# qif_ledger/data_model/ledger/__init__.py

from .ledger_account import ACCOUNT_SEPARATOR, UNKNOWN_ACCOUNT, LedgerAccount
from .ledger_transaction import LedgerTransaction
from .posting import Posting

__all__ = [
    "ACCOUNT_SEPARATOR",
    "UNKNOWN_ACCOUNT",
    "LedgerAccount",
    "LedgerTransaction",
    "Posting",
]
