from __future__ import annotations

from typing_extensions import Protocol, runtime_checkable

from .enum_account_type import AccountType
from .i_has_emit_qif import HasEmitQif
from .i_header import IHeader
from .i_to_dict import IToDict


@runtime_checkable
class IAccount(HasEmitQif, IToDict, Protocol):
    # --- data attributes ---
    name: str
    account_type: AccountType
    description: str

    # --- header (read-only) ---
    @property
    def header(self) -> IHeader: ...
