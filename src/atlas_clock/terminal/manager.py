"""Terminal mode management for the full-screen session."""

import logging
import sys
from typing import Any, List, NoReturn, Optional

from atlas_clock.error_handling import report_error
from atlas_clock.terminal.input_handler import HAS_TERMIOS
from atlas_clock.terminal.themes import print_themed

if HAS_TERMIOS:
    import termios
    import tty

logger = logging.getLogger(__name__)

SHOW_CURSOR = "\033[?25h"

TerminalSettings = Optional[List[Any]]


def setup_terminal() -> TerminalSettings:
    """Switch stdin to cbreak mode so keys arrive one at a time.

    Returns:
        Previous terminal attributes, or None if stdin is not a terminal
    """
    if not HAS_TERMIOS or not sys.stdin.isatty():
        return None

    fd = sys.stdin.fileno()
    old_settings = termios.tcgetattr(fd)
    tty.setcbreak(fd)
    logger.debug("Terminal switched to cbreak mode")
    return old_settings


def restore_terminal(old_settings: TerminalSettings) -> None:
    """Restore terminal attributes saved by ``setup_terminal``."""
    sys.stdout.write(SHOW_CURSOR)
    sys.stdout.flush()

    if old_settings is None or not HAS_TERMIOS:
        return

    try:
        termios.tcsetattr(sys.stdin.fileno(), termios.TCSADRAIN, old_settings)
    except termios.error as e:
        logger.warning(f"Failed to restore terminal settings: {e}")


def handle_error_and_exit(old_settings: TerminalSettings, error: BaseException) -> NoReturn:
    """Restore the terminal, report a fatal error and exit non-zero."""
    restore_terminal(old_settings)
    report_error(exception=error, component="terminal_manager", context_name="fatal")
    print_themed(f"\nError: {error}", style="error")
    sys.exit(1)
