"""
Time conversion for event announcements.

Turns a zone-less UTC timestamp into the local wall-clock time of every
configured display zone.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Sequence

from domain.exceptions import InvalidTimestamp
from domain.value_objects.time_zone import TIME_ZONES, TimeZoneEntry

LOCAL_TIME_FORMAT = "%Y-%m-%d %H:%M"


@dataclass(frozen=True)
class TimeConversion:
    """Local time of an event in one display zone"""
    zone_name: str
    local_time: str
    weekday: str
    abbreviation: str

    def display(self) -> str:
        """e.g. "2025-03-01 10:00 PST (Saturday)" """
        if self.abbreviation:
            return f"{self.local_time} {self.abbreviation} ({self.weekday})"
        return f"{self.local_time} ({self.weekday})"


def parse_utc(utc_timestamp: str) -> datetime:
    """
    Parse a timestamp as UTC.

    A timestamp without an offset is UTC, never local time. One with an
    explicit offset is converted to UTC.

    Raises:
        InvalidTimestamp: If the value is not a calendar date-time
    """
    if not isinstance(utc_timestamp, str) or not utc_timestamp.strip():
        raise InvalidTimestamp(str(utc_timestamp))
    try:
        parsed = datetime.fromisoformat(utc_timestamp.strip())
    except ValueError:
        raise InvalidTimestamp(utc_timestamp)

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def convert(
    utc_timestamp: str,
    zones: Sequence[TimeZoneEntry] = TIME_ZONES,
) -> List[TimeConversion]:
    """
    Convert a UTC timestamp into every display zone.

    Args:
        utc_timestamp: "YYYY-MM-DD HH:MM" in UTC
        zones: Display zones, in output order

    Returns:
        One TimeConversion per zone, in the order of `zones`

    Raises:
        InvalidTimestamp: If the timestamp cannot be parsed
    """
    moment = parse_utc(utc_timestamp)

    conversions = []
    for entry in zones:
        local = moment.astimezone(entry.zone)
        conversions.append(TimeConversion(
            zone_name=entry.display_name,
            local_time=local.strftime(LOCAL_TIME_FORMAT),
            weekday=local.strftime("%A"),
            abbreviation=local.tzname() or "",
        ))
    return conversions
