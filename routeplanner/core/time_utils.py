"""
Utilities for parsing and formatting wall-clock times used by the route planner.
"""

import re
from datetime import datetime

# Anchor date for clock arithmetic; only the time-of-day part is ever displayed
REFERENCE_DATE = datetime(2024, 1, 1)


def parse_time_to_minutes(time_str: str) -> int:
    """
    Convert a 24-hour time string to minutes since midnight.

    Args:
        time_str: Time in "HH:MM" format (e.g., "09:00", "17:30")

    Returns:
        Minutes since midnight (0-1439)

    Raises:
        ValueError: If the string is not a valid 24-hour time
    """
    match = re.match(r"^(\d{1,2}):(\d{2})$", time_str.strip())
    if not match:
        raise ValueError(f"Could not parse time string '{time_str}'")

    hour = int(match.group(1))
    minute = int(match.group(2))

    if hour < 0 or hour > 23:
        raise ValueError(f"Invalid hour {hour} in '{time_str}'")
    if minute < 0 or minute > 59:
        raise ValueError(f"Invalid minute {minute} in '{time_str}'")

    return hour * 60 + minute


def clock_from_start(start_time: str) -> datetime:
    """Build a datetime on the reference date for an "HH:MM" start time."""
    minutes = parse_time_to_minutes(start_time)
    return REFERENCE_DATE.replace(hour=minutes // 60, minute=minutes % 60)


def format_clock_12h(moment: datetime) -> str:
    """
    Format a datetime as a two-digit 12-hour clock label.

    Returns:
        Time string like "09:00 AM" or "01:30 PM"
    """
    return moment.strftime("%I:%M %p")


def format_hhmm(total_minutes: int) -> str:
    """
    Format minutes since midnight as "HH:MM".

    Values past midnight keep counting (e.g. 1500 -> "25:00") so a long day
    still reads as later than its start.
    """
    hours = total_minutes // 60
    minutes = total_minutes % 60
    return f"{hours:02d}:{minutes:02d}"


def format_duration(total_minutes: int) -> str:
    """Format a duration as "Xh Ym" (e.g., 180 -> "3h 0m")."""
    return f"{total_minutes // 60}h {total_minutes % 60}m"


def seconds_to_minutes(seconds: float) -> int:
    """
    Convert a provider travel duration from seconds to whole minutes.

    Truncates toward zero, but never reports a nonzero trip as 0 minutes.
    """
    if seconds <= 0:
        return 0
    return max(1, int(seconds // 60))
