from .config_logging import LOGGING, configure_logging
from .converters_scalar import format_minor_units, to_date, to_minor_units
from .core_util import is_null_or_whitespace, open_for_write

__all__ = [
    "is_null_or_whitespace",
    "format_minor_units",
    "to_date",
    "to_minor_units",
    "open_for_write",
    "LOGGING",
    "configure_logging",
]
