from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal
from typing import TYPE_CHECKING

from qif_ledger.utilities.converters_scalar import format_minor_units, to_minor_units

from ..interfaces import ISplit, IToDict, RecursiveDictStr
from . import qif_codes as emit_q


@dataclass(frozen=True)
class QSplit:
    """
    Represents a single QIF split: one categorized portion of a transaction.

    ``amount`` is in signed minor units (cents); its sign gives the
    debit/credit direction.
    """

    category: str = ""
    memo: str = ""
    amount: int = 0

    @staticmethod
    def new() -> QSplitBuilder:
        return QSplitBuilder()

    def emit_qif(self) -> str:
        """
        Returns the QIF representation of this split (S/E/$ lines).
        """
        lines = [
            emit_q.category_split().line(self.category),
            emit_q.memo_split().line(self.memo),
            emit_q.amount_split().line(format_minor_units(self.amount)),
        ]
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.emit_qif()

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        """
        Convert the split to a dictionary representation.
        """
        d: dict[str, RecursiveDictStr] = {
            "category": self.category,
            "amount": format_minor_units(self.amount),
        }
        if self.memo:
            d["memo"] = self.memo
        return d


@dataclass(frozen=True)
class QSplitBuilder:
    """Fluent builder for :class:`QSplit`. Every ``with_*`` returns a new builder."""

    category: str = ""
    memo: str = ""
    amount: int = 0

    def with_category(self, val: str) -> QSplitBuilder:
        return replace(self, category=val)

    def with_memo(self, val: str) -> QSplitBuilder:
        return replace(self, memo=val)

    def with_amount(self, val: int | Decimal) -> QSplitBuilder:
        return replace(self, amount=to_minor_units(val))

    def build(self) -> QSplit:
        return QSplit(category=self.category, memo=self.memo, amount=self.amount)


if TYPE_CHECKING:
    _is_i_split: type[ISplit] = QSplit
    _is_IToDict: type[IToDict] = QSplit
