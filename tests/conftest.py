"""Shared fixtures for the Atlas Clock tests."""

from datetime import datetime
from typing import Callable, List, Sequence

import pytest
import pytz

from atlas_clock.core.events import KeyPress
from atlas_clock.core.models import ClockEntry
from atlas_clock.core.session import SessionController
from atlas_clock.core.time_source import TimeSource

FIXED_NOW = datetime(2024, 1, 1, 0, 0, 0, tzinfo=pytz.UTC)


class RecordingStore:
    """Stands in for ConfigStore and records every save."""

    def __init__(self) -> None:
        self.saved: List[List[ClockEntry]] = []

    def save(self, entries: Sequence[ClockEntry]) -> bool:
        self.saved.append(list(entries))
        return True


@pytest.fixture()
def store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture()
def time_source() -> TimeSource:
    return TimeSource(clock=lambda: FIXED_NOW)


@pytest.fixture()
def entries() -> List[ClockEntry]:
    return [
        ClockEntry(label="Local", timezone_id="Local"),
        ClockEntry(label="UTC", timezone_id="UTC"),
        ClockEntry(label="Istanbul", timezone_id="Europe/Istanbul"),
        ClockEntry(label="New York", timezone_id="America/New_York"),
    ]


@pytest.fixture()
def controller(entries, store, time_source) -> SessionController:
    return SessionController(entries, store=store, time_source=time_source)


@pytest.fixture()
def press() -> Callable[..., None]:
    """Send a sequence of keys to a controller."""

    def _press(controller: SessionController, *keys: str) -> None:
        for key in keys:
            controller.handle(KeyPress(key))

    return _press


@pytest.fixture()
def type_text(press) -> Callable[[SessionController, str], None]:
    """Type a string one character at a time."""

    def _type(controller: SessionController, text: str) -> None:
        press(controller, *text)

    return _type
