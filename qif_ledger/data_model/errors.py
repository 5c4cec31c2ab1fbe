"""Error types raised by the QIF data model."""

from __future__ import annotations


class QifLedgerError(ValueError):
    """Base class for data model errors.

    Subclasses ValueError so callers with existing ``except ValueError``
    handling keep working.
    """


class AccountTypeParseError(QifLedgerError):
    """A string did not name any account type."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"No matching account type for {text!r}")


class TransactionInvariantError(QifLedgerError):
    """The sum of a transaction's splits differs from its amount."""

    def __init__(self, amount: int, split_total: int) -> None:
        self.amount = amount
        self.split_total = split_total
        super().__init__(
            "Sum of splits does not equal transaction amount "
            f"(amount={amount}, splits={split_total})"
        )
