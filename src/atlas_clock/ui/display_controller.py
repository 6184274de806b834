"""Display controller for the clock dashboard.

Builds frames from session state and owns the rich Live display.
"""

import logging
from typing import Optional, Sequence

from rich.align import Align
from rich.console import Console, Group, RenderableType
from rich.live import Live
from rich.text import Text

from atlas_clock.core.models import ClockEntry
from atlas_clock.core.session import SessionState
from atlas_clock.core.time_source import TimeSource
from atlas_clock.error_handling import report_error
from atlas_clock.terminal.themes import ClockTheme
from atlas_clock.ui.presenter import TITLE, Presenter

logger = logging.getLogger(__name__)


class DisplayController:
    """Main controller for coordinating UI display operations."""

    def __init__(
        self,
        theme: ClockTheme,
        time_source: TimeSource,
        presenter: Optional[Presenter] = None,
    ) -> None:
        """Initialize display controller.

        Args:
            theme: Theme fixed for the session
            time_source: Supplies the current time per clock
            presenter: Presenter to use, built from theme and time source if omitted
        """
        self.theme = theme
        self.presenter = presenter or Presenter(theme, time_source)
        self.live_manager = LiveDisplayManager()
        self._last_error: Optional[str] = None

    def create_frame(
        self, state: SessionState, entries: Sequence[ClockEntry]
    ) -> RenderableType:
        """Create the renderable for the current state.

        A failure while building the frame is reported and replaced by an
        error screen so the session keeps running.

        Args:
            state: Current session state
            entries: Current clocks

        Returns:
            Rich renderable for display
        """
        try:
            frame = self.presenter.render(state, entries)
        except Exception as e:
            message = f"{type(e).__name__}: {e}"
            if message != self._last_error:
                report_error(
                    exception=e,
                    component="display_controller",
                    context_name="create_frame",
                    context_data={"view": state.active_view.value},
                )
                self._last_error = message
            return self.create_error_display(message, state.height)

        self._last_error = None
        return frame

    def create_error_display(self, message: str, height: int = 24) -> RenderableType:
        """Create an error screen.

        Args:
            message: Error description
            height: Terminal height used for vertical centering

        Returns:
            Rich renderable for the error screen
        """
        body = Group(
            Align.center(Text(TITLE, style=self.theme.title)),
            Text(""),
            Align.center(Text("Display error", style=f"bold {self.theme.error}")),
            Align.center(Text(message, style=self.theme.muted)),
            Text(""),
            Align.center(Text("q to quit", style=self.theme.hint_desc)),
        )
        return Align.center(body, vertical="middle", height=max(height, 1))


class LiveDisplayManager:
    """Manager for Rich Live display operations."""

    def __init__(self, console: Optional[Console] = None) -> None:
        """Initialize live display manager.

        Args:
            console: Optional Rich console instance
        """
        self._console = console
        self._live_context: Optional[Live] = None

    def create_live_display(
        self,
        auto_refresh: bool = False,
        console: Optional[Console] = None,
        refresh_per_second: float = 20,
        screen: bool = True,
    ) -> Live:
        """Create Rich Live display context.

        Args:
            auto_refresh: Whether rich refreshes on its own thread; the
                session refreshes explicitly after every event
            console: Optional console instance
            refresh_per_second: Refresh rate used when auto_refresh is on
            screen: Draw on the alternate screen

        Returns:
            Rich Live context manager
        """
        display_console = console or self._console

        self._live_context = Live(
            console=display_console,
            refresh_per_second=refresh_per_second,
            auto_refresh=auto_refresh,
            screen=screen,
            vertical_overflow="crop",
        )

        return self._live_context
