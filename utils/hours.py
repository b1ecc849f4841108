"""
Closing Time Utilities
Parsing of "9:00 PM" style clock strings into today's local instant
"""

import re
from datetime import datetime
from typing import Optional

from config import get_local_now
from errors import TimeUnparseable

CLOCK_TIME_PATTERN = re.compile(r'(\d{1,2}):(\d{2})\s*(AM|PM)', re.IGNORECASE)


def parse_clock_time(time_str: str, now: Optional[datetime] = None) -> datetime:
    """
    Parse a clock string into an instant on the current local date.

    Times earlier than now are NOT rolled over to tomorrow.

    Args:
        time_str: Clock string like "9:00 PM" or "11:30am"
        now: Reference instant (defaults to local now)

    Returns:
        datetime with the decoded hour/minute, seconds zeroed

    Raises:
        TimeUnparseable: if no "H:MM AM|PM" time is found
    """
    if not isinstance(time_str, str):
        raise TimeUnparseable(f"Not a time string: {time_str!r}")

    match = CLOCK_TIME_PATTERN.search(time_str)
    if not match:
        raise TimeUnparseable(f"Could not parse time '{time_str}'")

    hour = int(match.group(1))
    minute = int(match.group(2))
    meridiem = match.group(3).upper()

    if not 1 <= hour <= 12 or minute > 59:
        raise TimeUnparseable(f"Time out of range '{time_str}'")

    if meridiem == 'AM':
        if hour == 12:
            hour = 0  # 12 AM = 00:00
    elif hour != 12:
        hour += 12

    if now is None:
        now = get_local_now()

    return now.replace(hour=hour, minute=minute, second=0, microsecond=0)


def minutes_until(instant: datetime, now: Optional[datetime] = None) -> float:
    """
    Signed minutes from now until instant (negative = already past)
    """
    if now is None:
        now = get_local_now()
    return (instant - now).total_seconds() / 60
