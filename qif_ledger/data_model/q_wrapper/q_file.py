from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from qif_ledger.utilities.core_util import open_for_write

from ..interfaces import IAccount, ITransaction

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuickenFile:
    """
    An ordered run of transactions emitted as one QIF document.

    The ``!Account`` record is written before the first transaction and again
    whenever the account changes from one transaction to the next.
    """

    transactions: tuple[ITransaction, ...] = ()

    @classmethod
    def of(cls, transactions: Iterable[ITransaction]) -> QuickenFile:
        return cls(tuple(transactions))

    def add(self, txn: ITransaction) -> QuickenFile:
        """Return a new file with ``txn`` appended."""
        return QuickenFile(self.transactions + (txn,))

    def accounts(self) -> list[IAccount]:
        """Distinct accounts in first-seen order."""
        seen: list[IAccount] = []
        for txn in self.transactions:
            if txn.account not in seen:
                seen.append(txn.account)
        return seen

    def emit_transactions(self) -> str:
        """
        Returns the QIF representation of all transactions in this file.
        """
        texts: list[str] = []
        current_account: IAccount | None = None
        for txn in self.transactions:
            if txn.account != current_account:
                current_account = txn.account
                texts.append(current_account.emit_qif())
            texts.append(txn.emit_qif())
        return "".join(texts)

    def emit_qif(self) -> str:
        """
        Returns the complete QIF file content as a string.
        """
        return self.emit_transactions()

    def write(self, path: Path, *, encoding: str = "utf-8") -> Path:
        """Write the emitted document to ``path`` and return the path."""
        path = Path(path)
        text = self.emit_qif()
        with open_for_write(path, encoding=encoding) as f:
            f.write(text)
        log.info(
            "Wrote %d transaction(s) across %d account(s) to %s",
            len(self.transactions),
            len(self.accounts()),
            path,
        )
        return path
