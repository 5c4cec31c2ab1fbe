# qif_ledger/data_model/interfaces/i_has_emit_qif.py
from __future__ import annotations

from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class HasEmitQif(Protocol):
    """
    Minimal protocol for values that render themselves as QIF text.
    The returned text ends with a newline after the record terminator.
    """

    def emit_qif(self) -> str: ...
