"""Events consumed by the session controller."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class KeyPress:
    """A decoded key (see ``atlas_clock.core.keys``)."""

    key: str


@dataclass(frozen=True)
class Tick:
    """Periodic refresh; carries nothing but its timestamp."""

    timestamp: float


@dataclass(frozen=True)
class Resize:
    """The terminal changed size."""

    width: int
    height: int


Event = Union[KeyPress, Tick, Resize]
