# qif_ledger/data_model/q_wrapper/__init__.py

from . import qif_codes
from .q_account import QAccount, QAccountBuilder
from .q_file import QuickenFile
from .q_split import QSplit, QSplitBuilder
from .q_transaction import QTransaction, QTransactionBuilder
from .qif_code import QifCode
from .qif_header import QifHeader

__all__ = [
    "QifCode",
    "QifHeader",
    "QAccount",
    "QAccountBuilder",
    "QSplit",
    "QSplitBuilder",
    "QTransaction",
    "QTransactionBuilder",
    "QuickenFile",
    "qif_codes",
]
