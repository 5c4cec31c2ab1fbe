# qif_ledger/data_model/interfaces/i_header.py
from __future__ import annotations

from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class IHeader(Protocol):
    # data attributes
    code: str
    description: str
    type: str
