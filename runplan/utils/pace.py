"""Conversions between "M:SS" pace strings and seconds."""

import re

PACE_PATTERN = re.compile(r"^(\d{1,2}):([0-5]\d)$")


def pace_to_seconds(pace: str | None) -> int | None:
    """Parse a pace string such as "6:42" into seconds.

    Returns None for missing or malformed values. Callers must skip those runs
    rather than counting them as a zero pace.
    """
    if not pace:
        return None
    match = PACE_PATTERN.match(pace.strip())
    if match is None:
        return None
    minutes, seconds = match.groups()
    total = int(minutes) * 60 + int(seconds)
    if total <= 0:
        return None
    return total


def seconds_to_pace(total_seconds: float) -> str:
    """Format seconds as "M:SS". Non-positive input gives an empty string."""
    if total_seconds <= 0:
        return ""
    rounded = int(round(total_seconds))
    minutes, seconds = divmod(rounded, 60)
    return f"{minutes}:{seconds:02d}"
