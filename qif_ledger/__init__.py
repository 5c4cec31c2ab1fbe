"""
Build QIF accounts, transactions and splits and render them as QIF text.
"""

import logging

from .data_model import (
    AccountType,
    AccountTypeParseError,
    EnumClearedStatus,
    QAccount,
    QifLedgerError,
    QSplit,
    QTransaction,
    QuickenFile,
    TransactionInvariantError,
)

__all__ = [
    "AccountType",
    "AccountTypeParseError",
    "EnumClearedStatus",
    "QAccount",
    "QifLedgerError",
    "QSplit",
    "QTransaction",
    "QuickenFile",
    "TransactionInvariantError",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
