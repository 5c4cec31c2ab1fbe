from __future__ import annotations

from enum import Enum

from ..errors import AccountTypeParseError


class AccountType(Enum):
    """
    QIF account types.

    Values are the long-form names accepted by :meth:`parse`; the short
    display tags written into QIF records come from :attr:`display_tag`.
    There are several QIF dialects, so this is the minimal common set.
    """

    BANK = "Bank"
    CASH = "Cash"
    CREDIT_CARD = "CreditCard"
    INVESTMENT = "Investment"
    ASSET_ACCOUNT = "AssetAccount"
    LIABILITY_ACCOUNT = "LiabilityAccount"

    @classmethod
    def default(cls) -> AccountType:
        return cls.BANK

    @classmethod
    def parse(cls, text: str) -> AccountType:
        """
        Look up an account type by its long-form name.

        Only the exact long names ("Bank", "CreditCard", ...) are accepted;
        display tags such as "CCard", other casings and "" are rejected.
        """
        for account_type in cls:
            if account_type.value == text:
                return account_type
        raise AccountTypeParseError(text)

    @property
    def long_name(self) -> str:
        return self.value

    @property
    def display_tag(self) -> str:
        """Short code used after ``T`` in account records and ``!Type:`` headers."""
        return _DISPLAY_TAGS[self]

    def to_display_tag(self) -> str:
        return self.display_tag

    def __str__(self) -> str:
        return self.display_tag


_DISPLAY_TAGS: dict[AccountType, str] = {
    AccountType.BANK: "Bank",
    AccountType.CASH: "Cash",
    AccountType.CREDIT_CARD: "CCard",
    AccountType.INVESTMENT: "Invst",
    AccountType.ASSET_ACCOUNT: "Oth A",
    AccountType.LIABILITY_ACCOUNT: "Oth L",
}
