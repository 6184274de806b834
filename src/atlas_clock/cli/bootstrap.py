"""Bootstrap helpers run before the session starts."""

import logging
import sys
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    disable_console: bool = False,
) -> None:
    """Configure the root logger.

    The full-screen session cannot share the terminal with log output, so it
    runs with the console handler disabled; without a log file the records
    are discarded.

    Args:
        level: Logging level name
        log_file: Optional file to append log records to
        disable_console: Do not log to stderr
    """
    handlers: List[logging.Handler] = []
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    if not disable_console:
        handlers.append(logging.StreamHandler(sys.stderr))
    if not handlers:
        handlers.append(logging.NullHandler())

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


def ensure_directories(*paths: Optional[Path]) -> None:
    """Create the parent directories of the given files."""
    for path in paths:
        if path is not None:
            path.parent.mkdir(parents=True, exist_ok=True)
