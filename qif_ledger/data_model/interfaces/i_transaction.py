# qif_ledger/data_model/interfaces/i_transaction.py
from __future__ import annotations

from datetime import date

from typing_extensions import Protocol, runtime_checkable

from .i_account import IAccount
from .i_has_emit_qif import HasEmitQif
from .i_header import IHeader
from .i_split import ISplit
from .i_to_dict import IToDict


@runtime_checkable
class ITransaction(HasEmitQif, IToDict, Protocol):
    """Structural shape of a QIF transaction sufficient for file emission."""

    account: IAccount
    date: date
    amount: int
    payee: str
    memo: str
    category: str
    cleared_status: str
    splits: tuple[ISplit, ...]

    @property
    def header(self) -> IHeader: ...

    def total(self) -> int: ...
