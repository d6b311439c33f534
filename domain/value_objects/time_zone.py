from dataclasses import dataclass
from typing import Tuple
from zoneinfo import ZoneInfo


@dataclass(frozen=True)
class TimeZoneEntry:
    """Value object representing a named display time zone"""

    display_name: str
    zone_id: str

    def __post_init__(self):
        if not self.display_name:
            raise ValueError("Time zone display name cannot be empty")
        if not self.zone_id:
            raise ValueError("Time zone id cannot be empty")

    @property
    def zone(self) -> ZoneInfo:
        """IANA zone for this entry"""
        return ZoneInfo(self.zone_id)


# Display order of the announcement time table
TIME_ZONES: Tuple[TimeZoneEntry, ...] = (
    TimeZoneEntry("Pacific", "America/Los_Angeles"),
    TimeZoneEntry("Eastern", "America/New_York"),
    TimeZoneEntry("British", "Europe/London"),
    TimeZoneEntry("Central European", "Europe/Paris"),
    TimeZoneEntry("China", "Asia/Shanghai"),
    TimeZoneEntry("Japan", "Asia/Tokyo"),
    TimeZoneEntry("Australian Eastern", "Australia/Sydney"),
)
