"""Tests for settings, bootstrap and the session event loop."""

import io
import logging
from pathlib import Path
from typing import Iterator, List, Optional
from unittest.mock import Mock

import pytest
from rich.console import Console

from atlas_clock import __version__
from atlas_clock.cli import main as cli_main
from atlas_clock.cli.bootstrap import setup_logging
from atlas_clock.core.config_store import ConfigStore
from atlas_clock.core.keys import ENTER
from atlas_clock.core.models import ClockEntry
from atlas_clock.core.session import SessionController, View
from atlas_clock.core.settings import Settings
from atlas_clock.terminal.themes import get_theme, get_themed_console, print_themed
from atlas_clock.ui.display_controller import DisplayController


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ("CONFIG_FILE", "REFRESH_INTERVAL", "THEME", "LOG_LEVEL", "LOG_FILE"):
        monkeypatch.delenv(f"ATLAS_CLOCK_{name}", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


class TestSettings:
    def test_defaults(self, tmp_path):
        settings = Settings.load([])

        assert settings.config_file == tmp_path / ".atlas" / "clock.json"
        assert settings.refresh_interval == 0.05
        assert settings.theme == "gold"
        assert settings.log_level == "INFO"
        assert settings.log_file is None

    def test_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("ATLAS_CLOCK_THEME", "OCEAN")
        monkeypatch.setenv("ATLAS_CLOCK_REFRESH_INTERVAL", "0.2")
        settings = Settings.load([])

        assert settings.theme == "ocean"
        assert settings.refresh_interval == 0.2

    def test_flags_override_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("ATLAS_CLOCK_THEME", "ocean")
        settings = Settings.load(
            [
                "--theme",
                "mono",
                "--config-file",
                str(tmp_path / "clocks.json"),
                "--log-level",
                "debug",
                "--refresh-interval",
                "0.5",
            ]
        )

        assert settings.theme == "mono"
        assert settings.config_file == tmp_path / "clocks.json"
        assert settings.log_level == "DEBUG"
        assert settings.refresh_interval == 0.5

    @pytest.mark.parametrize(
        "env, value",
        [("REFRESH_INTERVAL", "0"), ("REFRESH_INTERVAL", "5"), ("LOG_LEVEL", "LOUD"), ("THEME", "neon")],
    )
    def test_invalid_values_rejected(self, monkeypatch, env, value):
        monkeypatch.setenv(f"ATLAS_CLOCK_{env}", value)
        with pytest.raises(ValueError):
            Settings.load([])


class TestMain:
    @pytest.mark.parametrize("flag", ["-v", "--version"])
    def test_version(self, capsys, flag):
        assert cli_main.main([flag]) == 0
        assert capsys.readouterr().out.strip() == f"atlas.clock v{__version__}"

    def test_invalid_settings_exit_code(self, monkeypatch, capsys):
        monkeypatch.setenv("ATLAS_CLOCK_LOG_LEVEL", "LOUD")
        assert cli_main.main([]) == 2
        assert "Invalid settings" in capsys.readouterr().err

    def test_requires_terminal(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO())
        assert cli_main.main([]) == 1
        assert "interactive terminal" in capsys.readouterr().err


def test_setup_logging_to_file(tmp_path):
    log_file = tmp_path / "clock.log"
    setup_logging("DEBUG", log_file, disable_console=True)

    logging.getLogger("atlas_clock.test").debug("hello from test")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert "hello from test" in log_file.read_text(encoding="utf-8")


# ===========================================================================
# Event loop
# ===========================================================================


class FakeLive:
    def __init__(self) -> None:
        self.frames: List[object] = []

    def update(self, renderable, *, refresh: bool = False) -> None:
        self.frames.append(renderable)


def scripted_poll(keys: List[Optional[str]]):
    pending: Iterator[Optional[str]] = iter(keys)

    def poll(timeout: float) -> Optional[str]:
        return next(pending)

    return poll


def test_event_loop_adds_clock_and_quits(tmp_path, time_source):
    store = ConfigStore(tmp_path / "clock.json")
    controller = SessionController(
        [ClockEntry(label="UTC", timezone_id="UTC")], store=store, time_source=time_source
    )
    display = DisplayController(get_theme("gold"), time_source)
    live = FakeLive()
    console = Console(width=100, height=30, file=io.StringIO())

    keys = ["a", *"Tokyo", ENTER, None, *"Asia/Tokyo", ENTER, None, "y", None, "q"]
    cli_main.run_event_loop(controller, display, live, console, 0.01, poll=scripted_poll(keys))

    assert not controller.running
    assert (controller.state.width, controller.state.height) == (100, 30)
    assert controller.state.active_view is View.LIST
    # initial frame plus one per event except the final quit
    assert len(live.frames) == 1 + len(keys) - 1
    assert ConfigStore(tmp_path / "clock.json").load() == [
        ClockEntry(label="UTC", timezone_id="UTC"),
        ClockEntry(label="Tokyo", timezone_id="Asia/Tokyo"),
    ]


def test_event_loop_ticks_do_not_persist(tmp_path, time_source):
    path = tmp_path / "clock.json"
    controller = SessionController(
        [ClockEntry(label="UTC", timezone_id="UTC")],
        store=ConfigStore(path),
        time_source=time_source,
    )
    display = DisplayController(get_theme("gold"), time_source)
    console = Console(width=80, height=24, file=io.StringIO())

    cli_main.run_event_loop(
        controller, display, FakeLive(), console, 0.01, poll=scripted_poll([None] * 10 + ["q"])
    )

    assert not Path(path).exists()


# ===========================================================================
# Fatal errors
# ===========================================================================


class TestFatalErrors:
    def test_io_failure_restores_terminal_and_exits(self, monkeypatch, capsys, tmp_path):
        saved_settings = ["saved-attrs"]
        restored = Mock()
        monkeypatch.setattr(cli_main, "setup_terminal", lambda: saved_settings)
        monkeypatch.setattr(cli_main, "restore_terminal", restored)
        monkeypatch.setattr("atlas_clock.terminal.manager.restore_terminal", restored)

        def broken_loop(*args, **kwargs):
            raise OSError(5, "Input/output error")

        monkeypatch.setattr(cli_main, "run_event_loop", broken_loop)

        with pytest.raises(SystemExit) as exc_info:
            cli_main._run_session(Settings(config_file=tmp_path / "clock.json"))

        assert exc_info.value.code == 1
        assert "Error: [Errno 5] Input/output error" in capsys.readouterr().err
        restored.assert_called_with(saved_settings)

    def test_print_themed_keeps_brackets(self, capsys):
        print_themed("Error: [bold]not markup[/bold]", style="error")

        captured = capsys.readouterr()
        assert "Error: [bold]not markup[/bold]" in captured.err
        assert captured.out == ""

    def test_print_themed_to_given_console(self):
        buffer = io.StringIO()
        console = get_themed_console("mono")
        console.file = buffer

        print_themed("saved", style="success", console=console)

        assert buffer.getvalue().strip() == "saved"
