# cnn_fear_greed/utils/logging_config.py
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

# LogRecord attributes that are not user-supplied extras
_STANDARD_KEYS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime"}

_HANDLER_PREFIX = "cnn_fear_greed."


class ExtraFormatter(logging.Formatter):
    """Appends `extra={...}` fields as `key=value` pairs after the message."""

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        extras = {
            k: v for k, v in record.__dict__.items() if k not in _STANDARD_KEYS
        }
        if not extras:
            return base
        extra_str = " ".join(f"{k}={v}" for k, v in sorted(extras.items()))
        return f"{base} | {extra_str}"


def setup_logging(level: int = logging.INFO, log_file: Optional[str | Path] = None) -> None:
    """
    CLI logging: `2026-01-14 09:49:59 | INFO | module.name | message | key=value`
    on stderr (stdout carries the JSON result) and, if `log_file` is set, in that file.

    Safe to call more than once; only the level is updated on later calls.
    """
    root = logging.getLogger()
    root.setLevel(level)

    if any((h.get_name() or "").startswith(_HANDLER_PREFIX) for h in root.handlers):
        return

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    handlers[0].set_name(_HANDLER_PREFIX + "stderr")

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.set_name(_HANDLER_PREFIX + "file")
        handlers.append(file_handler)

    formatter = ExtraFormatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    logging.getLogger("urllib3").setLevel(logging.WARNING)
