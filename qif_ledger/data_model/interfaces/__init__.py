"""
Interfaces and Enums for the QIF data model.
"""

from .enum_account_type import AccountType
from .enum_cleared_status import EnumClearedStatus
from .i_account import IAccount
from .i_has_emit_qif import HasEmitQif
from .i_header import IHeader
from .i_split import ISplit
from .i_to_dict import IToDict, RecursiveDictStr
from .i_transaction import ITransaction

__all__ = [
    "AccountType",
    "EnumClearedStatus",
    "HasEmitQif",
    "IHeader",
    "IAccount",
    "ISplit",
    "IToDict",
    "ITransaction",
    "RecursiveDictStr",
]
