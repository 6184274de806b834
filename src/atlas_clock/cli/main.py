"""CLI entry point for the clock dashboard."""

import logging
import sys
import time
from typing import Callable, List, Optional, Protocol

from pydantic import ValidationError
from rich.console import Console, RenderableType

from atlas_clock import __version__
from atlas_clock.cli.bootstrap import ensure_directories, setup_logging
from atlas_clock.core.config_store import ConfigStore
from atlas_clock.core.events import KeyPress, Resize, Tick
from atlas_clock.core.session import SessionController
from atlas_clock.core.settings import Settings
from atlas_clock.core.time_source import TimeSource
from atlas_clock.terminal.input_handler import poll_keyboard
from atlas_clock.terminal.manager import (
    handle_error_and_exit,
    restore_terminal,
    setup_terminal,
)
from atlas_clock.terminal.themes import get_theme, get_themed_console, print_themed
from atlas_clock.ui.display_controller import DisplayController

logger = logging.getLogger(__name__)

KeyPoller = Callable[[float], Optional[str]]


class FrameSink(Protocol):
    def update(self, renderable: RenderableType, *, refresh: bool = False) -> None: ...


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        print(f"atlas.clock v{__version__}")
        return 0

    try:
        settings = Settings.load(argv)
    except ValidationError as e:
        print_themed(f"Invalid settings:\n{e}", style="error")
        return 2

    ensure_directories(settings.config_file, settings.log_file)
    setup_logging(settings.log_level, settings.log_file, disable_console=True)

    if not sys.stdin.isatty() or not sys.stdout.isatty():
        print_themed("Error: atlas-clock needs an interactive terminal", style="error")
        return 1

    try:
        _run_session(settings)
        return 0
    except Exception as e:
        logger.error(f"Session failed: {e}", exc_info=True)
        print_themed(f"Error: {e}", style="error")
        return 1


def _run_session(settings: Settings) -> None:
    """Run the interactive session until the user quits."""
    theme = get_theme(settings.theme)
    console = get_themed_console(theme)
    time_source = TimeSource()
    store = ConfigStore(settings.config_file)

    controller = SessionController(store.load(), store=store, time_source=time_source)
    display_controller = DisplayController(theme, time_source)

    logger.info(
        f"Starting session with {len(controller.entries)} clocks, "
        f"refresh every {settings.refresh_interval * 1000:.0f}ms"
    )

    old_terminal_settings = setup_terminal()
    try:
        live_display = display_controller.live_manager.create_live_display(
            console=console
        )
        with live_display:
            run_event_loop(
                controller,
                display_controller,
                live_display,
                console,
                settings.refresh_interval,
            )
    except KeyboardInterrupt:
        logger.info("Session interrupted")
    except Exception as e:
        handle_error_and_exit(old_terminal_settings, e)
    finally:
        restore_terminal(old_terminal_settings)


def run_event_loop(
    controller: SessionController,
    display_controller: DisplayController,
    live_display: FrameSink,
    console: Console,
    refresh_interval: float,
    poll: KeyPoller = poll_keyboard,
) -> None:
    """Feed events to the controller and redraw after each one.

    A key press becomes a ``KeyPress``; a poll that times out becomes a
    ``Tick``. A size change seen before dispatch becomes a ``Resize``.

    Args:
        controller: Session state machine
        display_controller: Builds frames from the session state
        live_display: Target for rendered frames
        console: Console whose size is tracked
        refresh_interval: Seconds to wait for a key before ticking
        poll: Keyboard poller
    """

    def redraw() -> None:
        frame = display_controller.create_frame(controller.state, controller.entries)
        live_display.update(frame, refresh=True)

    size = console.size
    controller.handle(Resize(size.width, size.height))
    redraw()

    while controller.running:
        key = poll(refresh_interval)

        size = console.size
        state = controller.state
        if (size.width, size.height) != (state.width, state.height):
            controller.handle(Resize(size.width, size.height))

        event = KeyPress(key) if key else Tick(time.time())
        if not controller.handle(event):
            break
        redraw()


if __name__ == "__main__":
    sys.exit(main())
