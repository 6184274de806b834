"""Resolution of timezone identifiers to current wall-clock time."""

import logging
from datetime import datetime, tzinfo
from typing import Callable, Optional, Set

import pytz

from atlas_clock.core.models import LOCAL_ZONE, UTC_ZONE
from atlas_clock.error_handling import InvalidTimezoneError

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Get the current time as an aware UTC datetime."""
    return datetime.now(pytz.UTC)


class TimeSource:
    """Current time per timezone identifier.

    ``resolve`` is strict and is what the add wizard validates with.
    ``now_in`` is lenient: an identifier that does not resolve renders as
    local time, so a bad zone already stored in the config never breaks a
    frame.
    """

    def __init__(self, clock: Optional[Clock] = None) -> None:
        """Initialize the time source.

        Args:
            clock: Callable returning the current aware datetime, defaults
                to the system clock in UTC
        """
        self._clock: Clock = clock or utc_now
        self._fallback_zones: Set[str] = set()

    def now(self) -> datetime:
        """Get the current time from the injected clock."""
        return self._clock()

    def resolve(self, zone: str) -> tzinfo:
        """Resolve a timezone identifier.

        Args:
            zone: ``"Local"``, ``"UTC"`` or an IANA zone name

        Returns:
            tzinfo for the zone

        Raises:
            InvalidTimezoneError: If the zone is unknown
        """
        if zone == UTC_ZONE:
            return pytz.UTC
        if zone == LOCAL_ZONE:
            local = self.now().astimezone().tzinfo
            if local is None:
                raise InvalidTimezoneError(zone)
            return local

        try:
            return pytz.timezone(zone)
        except pytz.exceptions.UnknownTimeZoneError as e:
            raise InvalidTimezoneError(zone) from e

    def canonical_name(self, zone: str) -> str:
        """Get the canonical spelling of a zone (``asia/tokyo`` -> ``Asia/Tokyo``).

        Raises:
            InvalidTimezoneError: If the zone is unknown
        """
        if zone in (LOCAL_ZONE, UTC_ZONE):
            return zone
        return getattr(self.resolve(zone), "zone", zone)

    def now_in(self, zone: str) -> datetime:
        """Get the current time in a zone, falling back to local time.

        Args:
            zone: Timezone identifier, possibly invalid

        Returns:
            Aware datetime in the zone, or in local time if it does not resolve
        """
        now = self.now()
        if not zone or zone == LOCAL_ZONE:
            return now.astimezone()

        try:
            tz = self.resolve(zone)
        except InvalidTimezoneError:
            if zone not in self._fallback_zones:
                self._fallback_zones.add(zone)
                logger.debug(f"Unknown zone {zone!r}, showing local time")
            return now.astimezone()

        return now.astimezone(tz)
