"""Keyboard input for the interactive session.

Provides non-blocking keyboard polling and decoding of terminal escape
sequences into the key names used by the session.
"""

import logging
import os
import select
import sys
from typing import Dict, Optional

from atlas_clock.core.keys import (
    BACKSPACE,
    CTRL_C,
    DOWN,
    ENTER,
    ESCAPE,
    LEFT,
    RIGHT,
    TAB,
    UP,
)

logger = logging.getLogger(__name__)

# Check for termios availability (Unix-only)
try:
    import termios  # noqa: F401

    HAS_TERMIOS = True
except ImportError:
    HAS_TERMIOS = False

# Wait after a lone ESC for the rest of an escape sequence
ESCAPE_SEQUENCE_TIMEOUT = 0.01

SPECIAL_KEYS: Dict[bytes, str] = {
    b"\r": ENTER,
    b"\n": ENTER,
    b"\t": TAB,
    b"\x7f": BACKSPACE,
    b"\x08": BACKSPACE,
    b"\x03": CTRL_C,
    b"\x1b": ESCAPE,
    b"\x1b[A": UP,
    b"\x1b[B": DOWN,
    b"\x1b[C": RIGHT,
    b"\x1b[D": LEFT,
    b"\x1bOA": UP,
    b"\x1bOB": DOWN,
    b"\x1bOC": RIGHT,
    b"\x1bOD": LEFT,
}


def decode_key(data: bytes) -> Optional[str]:
    """Decode raw terminal bytes into a key name or character.

    Args:
        data: Bytes of one key press

    Returns:
        Special key name, the typed character, or None for unknown
        sequences and control bytes
    """
    if not data:
        return None
    if data in SPECIAL_KEYS:
        return SPECIAL_KEYS[data]
    if data.startswith(b"\x1b"):
        logger.debug(f"Ignoring escape sequence {data!r}")
        return None

    char = data.decode("utf-8", errors="ignore")
    if len(char) == 1 and char.isprintable():
        return char
    return None


def _utf8_length(first_byte: int) -> int:
    if first_byte >= 0xF0:
        return 4
    if first_byte >= 0xE0:
        return 3
    if first_byte >= 0xC0:
        return 2
    return 1


def _read_escape_tail(fd: int) -> bytes:
    ready, _, _ = select.select([fd], [], [], ESCAPE_SEQUENCE_TIMEOUT)
    if not ready:
        return b""
    tail = os.read(fd, 1)
    if tail in (b"[", b"O"):
        tail += os.read(fd, 1)
        # Parameterized sequences such as Delete (ESC [ 3 ~)
        while tail[-1:].isdigit() or tail[-1:] == b";":
            chunk = os.read(fd, 1)
            if not chunk:
                break
            tail += chunk
    return tail


def poll_keyboard(timeout: float = 0.05) -> Optional[str]:
    """Poll for a key press without blocking longer than ``timeout``.

    Args:
        timeout: How long to wait for input (seconds)

    Returns:
        The decoded key or None if nothing usable arrived
    """
    if not HAS_TERMIOS or not sys.stdin.isatty():
        return None

    fd = sys.stdin.fileno()
    ready, _, _ = select.select([fd], [], [], timeout)
    if not ready:
        return None

    data = os.read(fd, 1)
    if not data:
        return None

    if data == b"\x1b":
        data += _read_escape_tail(fd)
    else:
        remaining = _utf8_length(data[0]) - 1
        if remaining:
            data += os.read(fd, remaining)

    return decode_key(data)
