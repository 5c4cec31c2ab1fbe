from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from ..interfaces import AccountType, IAccount, IToDict, RecursiveDictStr
from . import qif_codes as emit_q
from .qif_header import QifHeader


@dataclass(frozen=True)
class QAccount:
    """
    Represents an account in QIF format.

    ``name`` identifies the account during QIF import. ``description`` is
    informational only and is not written to the account record.
    """

    name: str = ""
    account_type: AccountType = field(default_factory=AccountType.default)
    description: str = ""

    @staticmethod
    def new() -> QAccountBuilder:
        return QAccountBuilder()

    @property
    def header(self) -> QifHeader:
        return QifHeader.for_account()

    def emit_qif(self) -> str:
        """
        Returns the account declaration record (``!Account`` block).
        """
        lines = [
            self.header.code,
            emit_q.name().line(self.name),
            emit_q.account_type().line(self.account_type.display_tag),
            emit_q.end_of_entry().code,
        ]
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.emit_qif()

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        d: dict[str, RecursiveDictStr] = {
            "name": self.name,
            "account_type": self.account_type.long_name,
        }
        if self.description:
            d["description"] = self.description
        return d


@dataclass(frozen=True)
class QAccountBuilder:
    name: str = ""
    account_type: AccountType = field(default_factory=AccountType.default)
    description: str = ""

    def with_name(self, val: str) -> QAccountBuilder:
        return replace(self, name=val)

    def with_description(self, val: str) -> QAccountBuilder:
        return replace(self, description=val)

    def with_account_type(self, val: AccountType) -> QAccountBuilder:
        return replace(self, account_type=val)

    def build(self) -> QAccount:
        return QAccount(
            name=self.name,
            account_type=self.account_type,
            description=self.description,
        )


if TYPE_CHECKING:
    _is_IAccount: type[IAccount] = QAccount
    _is_IToDict: type[IToDict] = QAccount
