"""Reusable UI pieces for the clock dashboard."""

from datetime import datetime
from typing import Iterable, List, Optional, Sequence, Tuple

from rich import box
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text

from atlas_clock.core.keys import KeyBinding
from atlas_clock.core.models import ClockEntry
from atlas_clock.terminal.themes import ClockTheme
from atlas_clock.utils.time_utils import format_clock_time, format_short_date

INPUT_CURSOR = "█"
HINT_SEPARATOR = " • "


class ClockCard:
    """A bordered card showing one clock in the grid."""

    def __init__(self, theme: ClockTheme) -> None:
        self.theme = theme

    def render(self, entry: ClockEntry, now: datetime, selected: bool = False) -> Panel:
        """Render a clock card.

        Args:
            entry: Clock to show
            now: Current time in the clock's zone
            selected: Whether the cursor is on this clock

        Returns:
            Rounded panel, accent-bordered when selected
        """
        body = Group(
            Text(entry.label, style=self.theme.label),
            Text(format_clock_time(now), style=self.theme.time),
            Text(format_short_date(now), style=self.theme.muted),
        )
        return Panel(
            body,
            box=box.ROUNDED,
            border_style=self.theme.accent if selected else self.theme.border,
            padding=(1, 4),
            expand=False,
        )


class KeyHintBar:
    """Single-line key help, e.g. ``↑/k up • q quit``."""

    def __init__(self, theme: ClockTheme) -> None:
        self.theme = theme

    def render(self, bindings: Iterable[KeyBinding]) -> Text:
        text = Text()
        for i, binding in enumerate(bindings):
            if i:
                text.append(HINT_SEPARATOR, style=self.theme.hint_desc)
            text.append(binding.help_key, style=self.theme.hint_key)
            text.append(f" {binding.help_desc}", style=self.theme.hint_desc)
        return text


def confirm_dialog(
    theme: ClockTheme, title: str, fields: Sequence[Tuple[str, str]]
) -> Panel:
    """Render a yes/no confirmation dialog.

    Args:
        theme: Active theme
        title: Question shown on the first line
        fields: ``(caption, value)`` pairs listed under the question

    Returns:
        Double-bordered panel
    """
    lines: List[RenderableType] = [Text(title, style="bold"), Text("")]
    for caption, value in fields:
        lines.append(Text.assemble((caption, theme.muted), (value, theme.label)))
    lines.extend([Text(""), Text("(y)es / (n)o", style=theme.muted)])
    return Panel(
        Group(*lines),
        box=box.DOUBLE,
        border_style=theme.accent,
        padding=(1, 4),
        expand=False,
    )


def input_line(
    theme: ClockTheme, value: str, placeholder: Optional[str] = None
) -> Text:
    """Render a text prompt with a block cursor."""
    text = Text("> ", style=theme.accent)
    if value:
        text.append(value, style=theme.time)
        text.append(INPUT_CURSOR, style=theme.accent)
    else:
        text.append(INPUT_CURSOR, style=theme.accent)
        if placeholder:
            text.append(placeholder, style=theme.hint_desc)
    return text


def error_line(theme: ClockTheme, message: str) -> RenderableType:
    return Text(message, style=theme.error)
