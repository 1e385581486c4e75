"""Structured Logging: JSON and text formatters, stdout plus optional file output.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (error_code, path, board_id, card_id) surfaced when present
    - Unknown level names fall back to INFO
    - Output always goes to stdout; LOG_FILE adds a file destination

Design Decisions:
    - JSONFormatter over third-party libs: stdlib logging only
    - setup_logging called once on startup via lifespan
"""

import logging
import json
from datetime import datetime, timezone

_EXTRA_KEYS = ("error_code", "path", "board_id", "card_id")

# stdlib has no TRACE; treat it as the most verbose level available
_LEVEL_ALIASES = {"TRACE": logging.DEBUG}


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """[timestamp][logger][LEVEL] message"""

    def format(self, record: logging.LogRecord) -> str:
        line = (
            f"[{datetime.now(timezone.utc).isoformat()}]"
            f"[{record.name}][{record.levelname}] {record.getMessage()}"
        )
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def resolve_level(level: str) -> int:
    """Numeric level for a level name; unknown names mean INFO."""
    name = level.upper()
    if name in _LEVEL_ALIASES:
        return _LEVEL_ALIASES[name]
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


def _build_formatter(fmt: str) -> logging.Formatter:
    return JSONFormatter() if fmt == "json" else TextFormatter()


def setup_logging(
    level: str = "INFO", fmt: str = "text", log_file: str | None = None,
) -> None:
    """Configure logging for the application."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w"))
    for handler in handlers:
        handler.setFormatter(_build_formatter(fmt))
        logging.root.addHandler(handler)
    logging.root.setLevel(resolve_level(level))
    logging.getLogger(__name__).debug(f"Logging configured at {level.upper()}")
