"""
--------------------------------------------------------------------------------
<pwmscan project>
pwmscan/_logging.py
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import json
import logging
import sys

from rich.logging import RichHandler
from rich.traceback import install as install_rich_traceback


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        return json.dumps(payload)


def setup_console_logging(level: str = "INFO", json_logs: bool = False, console=None) -> None:
    """Configure root logger for CLI. Library code should still use get_logger()."""
    root = logging.getLogger()
    for h in list(root.handlers):  # idempotent re-init
        root.removeHandler(h)
    root.setLevel(level.upper())

    if json_logs:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(JsonFormatter())
    else:
        handler = RichHandler(console=console, show_time=True, show_level=True, show_path=False, markup=True)
    handler.setLevel(level.upper())
    root.addHandler(handler)


def rich_tracebacks(enabled: bool = True) -> None:
    if enabled:
        install_rich_traceback(show_locals=False)


def get_logger(name: str = "pwmscan") -> logging.Logger:
    """Library logger; handlers are left to the application (see setup_console_logging)."""
    return logging.getLogger(name)
