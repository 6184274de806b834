"""Catalog of timezone identifiers offered while adding a clock."""

from typing import List, Tuple

import pytz

from atlas_clock.core.models import LOCAL_ZONE, UTC_ZONE

ZONE_CATALOG: Tuple[str, ...] = (LOCAL_ZONE, UTC_ZONE) + tuple(
    zone for zone in pytz.common_timezones if zone != UTC_ZONE
)


def suggest(fragment: str, limit: int = 5) -> List[str]:
    """Find catalog zones matching typed text.

    Prefix matches come first, then zones containing the text anywhere.
    Matching ignores case.

    Args:
        fragment: Text typed so far
        limit: Maximum number of suggestions

    Returns:
        Matching zone names in catalog order
    """
    needle = fragment.strip().lower()
    if not needle or limit <= 0:
        return []

    prefixed = [zone for zone in ZONE_CATALOG if zone.lower().startswith(needle)]
    if len(prefixed) >= limit:
        return prefixed[:limit]

    containing = [
        zone
        for zone in ZONE_CATALOG
        if needle in zone.lower() and not zone.lower().startswith(needle)
    ]
    return (prefixed + containing)[:limit]
