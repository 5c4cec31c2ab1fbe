# qif_ledger/data_model/__init__.py
from .errors import AccountTypeParseError, QifLedgerError, TransactionInvariantError
from .interfaces import (
    AccountType, EnumClearedStatus, HasEmitQif,
    IAccount, IHeader, ISplit, IToDict, ITransaction)
from .q_wrapper import (
    QAccount, QAccountBuilder, QSplit, QSplitBuilder, QTransaction,
    QTransactionBuilder, QuickenFile, QifCode, QifHeader, qif_codes)
__all__ = [
    "AccountTypeParseError", "QifLedgerError", "TransactionInvariantError",
    "AccountType", "EnumClearedStatus", "HasEmitQif", "IAccount", "IHeader",
    "ISplit", "IToDict", "ITransaction", "QAccount", "QAccountBuilder",
    "QSplit", "QSplitBuilder", "QTransaction", "QTransactionBuilder",
    "QuickenFile", "QifCode", "QifHeader", "qif_codes"]
