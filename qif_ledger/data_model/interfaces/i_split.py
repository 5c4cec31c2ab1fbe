from __future__ import annotations

from typing_extensions import Protocol, runtime_checkable

from .i_has_emit_qif import HasEmitQif
from .i_to_dict import IToDict


@runtime_checkable
class ISplit(HasEmitQif, IToDict, Protocol):
    """Structural shape of a split row (S/E/$) that can be emitted."""

    category: str
    memo: str
    amount: int
