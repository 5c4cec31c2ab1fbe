#!/usr/bin/env python3
"""
Core Utilities

Features:
- File I/O helpers
- String utilities
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, Any, Optional


def is_null_or_whitespace(s: Optional[str]) -> bool:
    """Check if a string is None, empty, or consists only of whitespace."""
    return s is None or s.strip() == ""


def open_for_write(path: Path, **kwargs: Any) -> IO[str]:
    """
    Open ``path`` for text writing, creating missing parent directories.

    Newline translation is disabled so emitted records keep their ``\\n``
    terminators on every platform.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    kwargs.setdefault("encoding", "utf-8")
    kwargs.setdefault("newline", "")
    return open(path, "w", **kwargs)
