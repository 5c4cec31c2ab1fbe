from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from qif_ledger.utilities.converters_scalar import (
    format_minor_units,
    to_date,
    to_minor_units,
)

from ..errors import TransactionInvariantError
from ..interfaces import (
    EnumClearedStatus,
    IAccount,
    ISplit,
    IToDict,
    ITransaction,
    RecursiveDictStr,
)
from . import qif_codes as emit_q
from .q_split import QSplitBuilder
from .qif_header import QifHeader

log = logging.getLogger(__name__)


def _today() -> date:
    return date.today()


def _split_total(splits: Iterable[ISplit]) -> int:
    return sum((s.amount for s in splits), 0)


@dataclass(frozen=True)
class QTransaction:
    """
    Represents a single QIF transaction.

    ``category`` is meaningful when the transaction is spent in a single
    piece; otherwise ``splits`` carry the categorization. ``amount`` is the
    authoritative total in minor units and, when splits are present, equals
    their sum. Construction enforces that and drops any time of day from
    ``date``, so every instance holds a valid transaction.

    The account is shared, never copied: many transactions may reference the
    same immutable account.
    """

    # region Core Fields

    account: IAccount
    date: date
    amount: int = 0
    payee: str = ""
    memo: str = ""
    category: str = ""
    cleared_status: str = ""
    splits: tuple[ISplit, ...] = ()

    # endregion Core Fields

    def __post_init__(self) -> None:
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "date", to_date(self.date))
        object.__setattr__(self, "splits", tuple(self.splits))
        if self.splits:
            split_total = _split_total(self.splits)
            if split_total != self.amount:
                log.debug(
                    "Rejecting transaction dated %s: amount %s, splits sum to %s",
                    self.date,
                    self.amount,
                    split_total,
                )
                raise TransactionInvariantError(self.amount, split_total)

    @staticmethod
    def new(account: IAccount) -> QTransactionBuilder:
        return QTransactionBuilder(account=account)

    @property
    def header(self) -> QifHeader:
        return QifHeader.for_type(self.account.account_type)

    def total(self) -> int:
        return self.amount

    def splits_exist(self) -> bool:
        return bool(self.splits)

    # region Parser/Emitter

    def emit_qif(self) -> str:
        """
        Returns the QIF representation of this transaction, split lines
        included, terminated by ``^``.
        """
        lines = [
            self.header.code,
            emit_q.date().line(self.date.strftime(emit_q.DATE_FORMAT)),
            emit_q.payee().line(self.payee),
            emit_q.memo().line(self.memo),
            emit_q.category().line(self.category),
            emit_q.cleared_status().line(self.cleared_status),
            emit_q.amount_transaction().line(format_minor_units(self.amount)),
        ]
        body = "\n".join(lines) + "\n"
        body += "".join(split.emit_qif() for split in self.splits)
        return body + emit_q.end_of_entry().code + "\n"

    def __str__(self) -> str:
        return self.emit_qif()

    # endregion Parser/Emitter

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        """
        Convert the transaction to a dictionary representation.
        """
        d: dict[str, RecursiveDictStr] = {
            "account": self.account.to_dict(),
            "date": self.date.isoformat(),
            "amount": format_minor_units(self.amount),
        }

        def _addif(key: str, value: str) -> None:
            if value:
                d[key] = value

        _addif("payee", self.payee)
        _addif("memo", self.memo)
        _addif("category", self.category)
        _addif("cleared_status", self.cleared_status)
        if self.splits:
            d["splits"] = {str(i): s.to_dict() for i, s in enumerate(self.splits)}
        return d


@dataclass(frozen=True)
class QTransactionBuilder:
    """
    Fluent builder for :class:`QTransaction`.

    Each ``with_*`` call returns a new builder; nothing is shared between
    builders except the (immutable) account and splits.
    """

    account: IAccount
    date: date = field(default_factory=_today)
    amount: int = 0
    payee: str = ""
    memo: str = ""
    category: str = ""
    cleared_status: str = ""
    splits: tuple[ISplit, ...] = ()

    def with_date(self, val: date | datetime | str) -> QTransactionBuilder:
        """Set the date; any time of day is discarded."""
        return replace(self, date=to_date(val))

    def with_amount(self, val: int | Decimal) -> QTransactionBuilder:
        return replace(self, amount=to_minor_units(val))

    def with_payee(self, val: str) -> QTransactionBuilder:
        return replace(self, payee=val)

    def with_memo(self, val: str) -> QTransactionBuilder:
        return replace(self, memo=val)

    def with_category(self, val: str) -> QTransactionBuilder:
        return replace(self, category=val)

    def with_cleared_status(self, val: str | EnumClearedStatus) -> QTransactionBuilder:
        if isinstance(val, EnumClearedStatus):
            val = val.value
        return replace(self, cleared_status=val)

    def with_split(self, val: ISplit | QSplitBuilder) -> QTransactionBuilder:
        """Append one split and add its amount to the running total."""
        split = val.build() if isinstance(val, QSplitBuilder) else val
        return replace(
            self,
            splits=self.splits + (split,),
            amount=self.amount + split.amount,
        )

    def with_splits(self, val: Iterable[ISplit]) -> QTransactionBuilder:
        """Replace every split; the amount becomes the sum of the new splits."""
        splits = tuple(val)
        return replace(self, splits=splits, amount=_split_total(splits))

    def total(self) -> int:
        return self.amount

    def build(self) -> QTransaction:
        """
        Finalize the transaction.

        When splits are present their sum must equal ``amount`` exactly.
        A transaction without splits keeps whatever amount was set.

        Raises
        ------
        TransactionInvariantError
            If the split sum and the amount disagree.
        """
        txn = QTransaction(
            account=self.account,
            date=self.date,
            amount=self.amount,
            payee=self.payee,
            memo=self.memo,
            category=self.category,
            cleared_status=self.cleared_status,
            splits=self.splits,
        )
        log.debug(
            "Built transaction dated %s for %r with %d split(s)",
            txn.date,
            txn.account.name,
            len(txn.splits),
        )
        return txn


if TYPE_CHECKING:
    _is_i_transaction: type[ITransaction] = QTransaction
    _is_IToDict: type[IToDict] = QTransaction
