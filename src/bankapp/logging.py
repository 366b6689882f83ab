"""Logging configuration for bankapp.

Ledger events carry structured fields passed through ``extra=``, for example
``logger.info("Deposited %s", amount, extra=event_fields(account_number=1001))``.
The JSON format emits them as top-level keys; the standard format only shows
the message.
"""

import json
import logging
import sys
from datetime import datetime, UTC
from typing import Any

# Record attributes that JsonFormatter copies into its output when set
EVENT_FIELDS = ("username", "account_number", "kind", "amount", "balance")

STANDARD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def event_fields(**fields: Any) -> dict[str, Any]:
    """Build an ``extra`` mapping for a ledger event, dropping unknown or empty keys."""
    unknown = set(fields) - set(EVENT_FIELDS)
    if unknown:
        raise ValueError(f"Unknown log fields: {', '.join(sorted(unknown))}")
    return {key: value for key, value in fields.items() if value is not None}


class JsonFormatter(logging.Formatter):
    """One JSON object per record, with ledger event fields at the top level."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in EVENT_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                entry[name] = value

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        # Decimal amounts and enum kinds serialize as text
        return json.dumps(entry, default=str)


def build_formatter(format_type: str) -> logging.Formatter:
    if format_type == "json":
        return JsonFormatter()
    return logging.Formatter(fmt=STANDARD_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")


def setup_logging(level: str = "WARNING", format_type: str = "standard") -> None:
    """Send bankapp log records to stderr.

    stdout belongs to the menu, so records never share it.

    Parameters
    ----------
    level : str
        Log level name. Unknown names fall back to WARNING.
    format_type : str
        "standard" or "json".
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(build_formatter(format_type))

    root_logger = logging.getLogger()
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    logging.getLogger("bankapp").setLevel(log_level)
    # SQL echo stays off even at DEBUG
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a bankapp module (pass ``__name__``)."""
    return logging.getLogger(name)
