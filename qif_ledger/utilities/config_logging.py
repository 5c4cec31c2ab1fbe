# qif_ledger/utilities/config_logging.py
import logging.config

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "simple",
        },
    },
    "loggers": {
        "qif_ledger": {
            "level": "DEBUG",
            "handlers": ["console"],
            "propagate": False,
        },
    },
}


def configure_logging(config: dict | None = None) -> None:
    """
    Apply ``LOGGING`` (or ``config``) with ``logging.config.dictConfig``.

    Nothing in the package calls this on import; applications opt in.
    """
    logging.config.dictConfig(config or LOGGING)
