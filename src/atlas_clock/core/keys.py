"""Key names and key bindings.

Keys reach the session as strings: a single character for printable input,
or one of the names below for special keys.
"""

from dataclasses import dataclass
from typing import Tuple

UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"
ENTER = "enter"
ESCAPE = "esc"
BACKSPACE = "backspace"
TAB = "tab"
CTRL_C = "ctrl+c"


@dataclass(frozen=True)
class KeyBinding:
    """A set of keys triggering one action, plus its help text."""

    keys: Tuple[str, ...]
    help_key: str
    help_desc: str

    def matches(self, key: str) -> bool:
        return key in self.keys


@dataclass(frozen=True)
class KeyMap:
    """All bindings used by the session."""

    up: KeyBinding = KeyBinding((UP, "k"), "↑/k", "up")
    down: KeyBinding = KeyBinding((DOWN, "j"), "↓/j", "down")
    left: KeyBinding = KeyBinding((LEFT, "h"), "←/h", "left")
    right: KeyBinding = KeyBinding((RIGHT, "l"), "→/l", "right")
    enter: KeyBinding = KeyBinding((ENTER,), "enter", "select")
    add: KeyBinding = KeyBinding(("a",), "a", "add")
    delete: KeyBinding = KeyBinding(("d",), "d", "del")
    back: KeyBinding = KeyBinding((ESCAPE, BACKSPACE), "esc", "back")
    quit: KeyBinding = KeyBinding(("q", CTRL_C), "q", "quit")
    force_quit: KeyBinding = KeyBinding((CTRL_C,), "ctrl+c", "quit")
    confirm: KeyBinding = KeyBinding(("y", "Y", ENTER), "y", "yes")
    decline: KeyBinding = KeyBinding(("n", "N", ESCAPE), "n", "no")
    submit: KeyBinding = KeyBinding((ENTER,), "enter", "next")
    cancel: KeyBinding = KeyBinding((ESCAPE,), "esc", "back")
    complete: KeyBinding = KeyBinding((TAB,), "tab", "complete")


DEFAULT_KEYMAP = KeyMap()
