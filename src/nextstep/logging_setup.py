# src/nextstep/logging_setup.py

"""
Process-wide logging for the todo core.

Two sinks share one format: stderr shows nextstep records plus anything
at ERROR or above from other loggers (captured warnings included), and
nextstep.log under the data directory receives every record at file_level.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "nextstep.log"
LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class _ConsoleNoiseFilter(logging.Filter):
    """Pass nextstep.* records; other loggers only at ERROR+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "nextstep" or record.name.startswith("nextstep."):
            return True
        # py.warnings and third-party libraries
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/nextstep",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Install the stderr and file handlers on the root logger.

    Replaces whatever handlers the root logger already had, so calling it
    again does not double every line. Returns the path of the log file.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console)

    file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
    file_handler.setLevel(file_level)
    file_handler.setFormatter(fmt)
    root.addHandler(file_handler)

    logging.captureWarnings(True)
    return log_file


def level_from_name(name: str, default: int = logging.INFO) -> int:
    """Map "debug"/"INFO"/... to a logging level; unknown names give default."""
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else default
