"""Color themes for the clock dashboard.

A theme is chosen once at startup and never changes afterwards.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Union

from rich.console import Console
from rich.theme import Theme


@dataclass(frozen=True)
class ClockTheme:
    """Styles used by the presenter, as rich style strings."""

    name: str
    accent: str = "#D4AF37"
    border: str = "#555555"
    time: str = "bold #FFFFFF"
    muted: str = "#AAAAAA"
    error: str = "#FF0000"
    hint_key: str = "#909090"
    hint_desc: str = "#626262"

    @property
    def title(self) -> str:
        return f"bold {self.accent}"

    @property
    def label(self) -> str:
        return f"bold {self.accent}"

    def to_rich_theme(self) -> Theme:
        """Build the rich theme used by ``print_themed``."""
        return Theme(
            {
                "accent": self.accent,
                "info": self.muted,
                "success": "green",
                "warning": "yellow",
                "error": self.error,
            }
        )


THEMES: Dict[str, ClockTheme] = {
    "gold": ClockTheme(name="gold"),
    "ocean": ClockTheme(
        name="ocean",
        accent="#4FC3F7",
        border="#37474F",
        time="bold #E1F5FE",
        muted="#90A4AE",
        error="#FF5252",
    ),
    "mono": ClockTheme(
        name="mono",
        accent="white",
        border="bright_black",
        time="bold",
        muted="white",
        error="bold red",
        hint_key="white",
        hint_desc="bright_black",
    ),
}

DEFAULT_THEME = "gold"


def get_theme(name: Optional[str] = None) -> ClockTheme:
    """Look up a theme by name.

    Raises:
        ValueError: If the name is not a known theme
    """
    key = (name or DEFAULT_THEME).lower()
    try:
        return THEMES[key]
    except KeyError:
        raise ValueError(f"Unknown theme: {name}") from None


def get_themed_console(
    theme: Union[ClockTheme, str, None] = None, stderr: bool = False
) -> Console:
    """Create a console using the theme's named styles."""
    if not isinstance(theme, ClockTheme):
        theme = get_theme(theme)
    return Console(theme=theme.to_rich_theme(), stderr=stderr)


def print_themed(
    message: str, style: str = "info", console: Optional[Console] = None
) -> None:
    """Print plain text with one of the theme's named styles.

    Goes to stderr unless a console is given. The message is not
    parsed as rich markup, so exception text with brackets prints as is.
    """
    (console or get_themed_console(stderr=True)).print(
        message, style=style, markup=False, highlight=False, soft_wrap=True
    )
