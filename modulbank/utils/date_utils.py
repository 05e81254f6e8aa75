"""Bank timestamp format helpers"""

import re
from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo

from modulbank.domain.exceptions import MalformedTimestamp

DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

# API returns all dates in bank local time without offset; a fractional
# seconds suffix is accepted on input but never produced
_TIMESTAMP_RE = re.compile(
    r"([0-9]{4})-([0-9]{2})-([0-9]{2})T([0-9]{2}):([0-9]{2}):([0-9]{2})(?:\.([0-9]{1,9}))?"
)


class TimestampCodec:
    """Parses and formats bank timestamps in a fixed timezone"""

    def __init__(self, tz: tzinfo):
        self.tz = tz

    @classmethod
    def for_zone(cls, name: str) -> "TimestampCodec":
        return cls(ZoneInfo(name))

    def decode(self, value: str) -> datetime:
        """
        Bind a wire timestamp to the codec timezone.

        Raises:
            MalformedTimestamp: If value does not match the bank date format
        """
        match = _TIMESTAMP_RE.fullmatch(value) if isinstance(value, str) else None
        if match is None:
            raise MalformedTimestamp(value)

        year, month, day, hour, minute, second = (int(g) for g in match.groups()[:6])
        fraction = match.group(7) or ""
        microsecond = int(fraction[:6].ljust(6, "0")) if fraction else 0

        try:
            return datetime(year, month, day, hour, minute, second, microsecond, tzinfo=self.tz)
        except ValueError as e:
            raise MalformedTimestamp(value) from e

    def encode(self, value: datetime) -> str:
        """Render value in the codec timezone; naive values are taken as already local"""
        if value.tzinfo is None:
            value = value.replace(tzinfo=self.tz)
        return value.astimezone(self.tz).strftime(DATE_FORMAT)
