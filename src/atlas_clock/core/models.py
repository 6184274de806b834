"""Data models for configured clocks."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

LOCAL_ZONE = "Local"
UTC_ZONE = "UTC"
SENTINEL_ZONES = (LOCAL_ZONE, UTC_ZONE)


class ClockEntry(BaseModel):
    """One configured clock.

    The zone is stored on disk under the ``location`` key.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    label: str
    timezone_id: str = Field(alias="location")


class ClockConfig(BaseModel):
    """The persisted clock document."""

    clocks: List[ClockEntry]


DEFAULT_CLOCKS = (
    ClockEntry(label="Local", timezone_id=LOCAL_ZONE),
    ClockEntry(label="UTC", timezone_id=UTC_ZONE),
    ClockEntry(label="Istanbul", timezone_id="Europe/Istanbul"),
)
