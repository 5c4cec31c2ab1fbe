# qif_ledger/utilities/converters_scalar.py
from __future__ import annotations

import re
from datetime import date, datetime
from decimal import Decimal
from typing import Final, overload


def _bad(value: object, target: str) -> TypeError:
    return TypeError(f"Cannot convert {type(value).__name__} to {target}")


def to_minor_units(value: object, /) -> int:
    """
    Convert an amount into signed integer minor units (cents).

    Accepts:
      • int     → returned as-is (already minor units)
      • Decimal → major units, scaled by 100; must carry at most two
                  fraction digits so the conversion is exact

    Floats are rejected outright so binary rounding never reaches an amount.
    ``bool`` is rejected even though it subclasses ``int``.

    Raises
    ------
    TypeError
        For float, bool, or any other unsupported type.
    ValueError
        For a Decimal that is not finite or has sub-cent precision.
    """
    if isinstance(value, bool):
        raise _bad(value, "minor units")
    if isinstance(value, int):
        return value
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError(f"Amount must be finite, got {value!r}")
        scaled = value * 100
        if scaled != scaled.to_integral_value():
            raise ValueError(
                f"Amount {value!r} has more than two fraction digits"
            )
        return int(scaled)
    raise _bad(value, "minor units")


def format_minor_units(value: int, /) -> str:
    """
    Render signed minor units as a two-decimal string.

    The absolute value is zero-padded to at least three digits, the last two
    become the fraction, and the sign is attached once to the whole number:

        format_minor_units(-1000)  -> '-10.00'
        format_minor_units(5)      -> '0.05'
        format_minor_units(-5)     -> '-0.05'
        format_minor_units(123456) -> '1234.56'
    """
    sign = "-" if value < 0 else ""
    digits = f"{abs(value):03d}"
    return f"{sign}{digits[:-2]}.{digits[-2:]}"


@overload
def to_date(s: datetime, /) -> date: ...
@overload
def to_date(s: date, /) -> date: ...
@overload
def to_date(s: str, /) -> date: ...


def to_date(s: object, /) -> date:
    """
    Normalise a date-like value to a calendar date, dropping any time of day.

    Supported examples:
      - date(2024, 12, 31)
      - datetime(2024, 12, 31, 23, 59)   (time ignored)
      - 12/31'24              (QIF classic, 2-digit year with apostrophe)
      - 12/31/2024            (US)
      - 2024-12-31            (ISO)
      - 2024/12/31, 2024.12.31
      - 20241231              (ISO compact)
      - 2024-12-31T23:59:59Z  (ISO datetime; time/offset ignored)

    Raises:
        ValueError: if the value is not recognised as a date.
    """
    if isinstance(s, datetime):
        return s.date()
    if isinstance(s, date):
        return s
    if not isinstance(s, str):
        raise ValueError(f"Cannot convert {type(s).__name__} to date")

    txt = s.strip()
    if not txt:
        raise ValueError("Empty string cannot be converted to date")

    # Normalize curly/back quotes used in some exports
    txt = txt.replace("’", "'").replace("`", "'")

    if "T" in txt:
        try:
            return datetime.fromisoformat(_TRAILING_Z.sub("+00:00", txt)).date()
        except ValueError:
            pass  # fall through

    for fmt in _DATE_PATTERNS:
        try:
            return datetime.strptime(txt, fmt).date()
        except ValueError:
            continue

    raise ValueError(f"Unrecognized date format: {s!r}")


# order matters
_DATE_PATTERNS: Final[tuple[str, ...]] = (
    "%m/%d'%y",  # 01/02'25
    "%m/%d/%Y",  # 01/02/2025
    "%Y-%m-%d",  # 2025-01-02
    "%Y/%m/%d",  # 2025/01/02
    "%Y.%m.%d",  # 2025.01.02
    "%Y%m%d",  # 20250102
)
_TRAILING_Z: Final[re.Pattern[str]] = re.compile(r"Z$")
