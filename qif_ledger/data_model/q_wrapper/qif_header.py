from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from qif_ledger.data_model.interfaces import (
    AccountType,
    IHeader,
    IToDict,
    RecursiveDictStr,
)

from . import qif_codes as emit_q


@dataclass(frozen=True)
class QifHeader:
    code: str
    description: str = ""
    type: str = ""

    @classmethod
    def for_account(cls) -> QifHeader:
        h = emit_q.account_header()
        return cls(h.code, h.description, "Account")

    @classmethod
    def for_type(cls, account_type: AccountType) -> QifHeader:
        tag = account_type.display_tag
        return cls(
            f"{emit_q.type_header().code}{tag}",
            emit_q.type_header().description,
            tag,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IHeader):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        return {"code": self.code, "description": self.description, "type": self.type}


if TYPE_CHECKING:
    _is_i_header: type[IHeader] = QifHeader
    _is_IToDict: type[IToDict] = QifHeader
