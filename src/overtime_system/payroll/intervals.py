"""Interval length between two wall-clock times on the same nominal day.

Times are parsed into seconds since midnight instead of going through a
datetime, so no time zone or DST rule can shift the result.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

_CLOCK_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")

SECONDS_PER_HOUR = 3600


@dataclass(frozen=True, order=True)
class ClockTime:
    """Wall-clock time of day as seconds since midnight."""

    seconds: int

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["ClockTime"]:
        """Parse ``HH:MM`` or ``HH:MM:SS`` (24-hour); None when blank or malformed."""
        if not value:
            return None
        m = _CLOCK_RE.match(value.strip())
        if not m:
            return None
        hours, minutes = int(m.group(1)), int(m.group(2))
        seconds = int(m.group(3) or 0)  # missing seconds -> :00
        if hours > 23 or minutes > 59 or seconds > 59:
            return None
        return cls(hours * SECONDS_PER_HOUR + minutes * 60 + seconds)

    def __str__(self) -> str:
        h, rest = divmod(self.seconds, SECONDS_PER_HOUR)
        m, s = divmod(rest, 60)
        return f"{h:02d}:{m:02d}:{s:02d}"


def hours_worked(start_time: Optional[str], end_time: Optional[str]) -> float:
    """Decimal hours between ``start_time`` and ``end_time``.

    Returns 0 when either value is missing or unparsable, or when ``end <= start``
    (overnight spans are not supported; 0 marks the interval as invalid).
    """
    start = ClockTime.parse(start_time)
    end = ClockTime.parse(end_time)
    if start is None or end is None or end <= start:
        return 0
    return (end.seconds - start.seconds) / SECONDS_PER_HOUR
