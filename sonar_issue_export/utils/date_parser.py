"""Timestamp parsing utilities for SonarCloud issue data."""

from datetime import datetime, timezone


def parse_timestamp(value: str) -> datetime:
    """Parse a SonarCloud timestamp into a datetime.

    Supports:
    - SonarCloud format: 2024-01-15T10:30:00+0000
    - ISO formats: 2024-01-15T10:30:00Z, 2024-01-15T10:30:00+01:00
    - Naive datetimes and plain dates: 2024-01-15T10:30:00, 2024-01-15

    Args:
        value: Timestamp string to parse

    Returns:
        Parsed datetime object (timezone-aware when an offset was given)

    Raises:
        ValueError: If the timestamp format is not recognized
    """
    formats = [
        "%Y-%m-%dT%H:%M:%S%z",  # 2024-01-15T10:30:00+0000
        "%Y-%m-%dT%H:%M:%S.%f%z",  # 2024-01-15T10:30:00.123+0000
        "%Y-%m-%dT%H:%M:%S",  # 2024-01-15T10:30:00
        "%Y-%m-%d",  # 2024-01-15
    ]

    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+0000"

    for fmt in formats:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue

    raise ValueError(
        f"Unable to parse timestamp '{value}'. "
        f"Expected ISO 8601, e.g. 2024-01-15T10:30:00+0000"
    )


def to_calendar_day(value: str | None) -> str:
    """Truncate a timestamp to its UTC calendar day (YYYY-MM-DD).

    Absent timestamps give an empty string. Unparseable values fall back to
    their first ten characters.
    """
    if not value:
        return ""

    try:
        parsed = parse_timestamp(value)
    except ValueError:
        return value[:10]

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.strftime("%Y-%m-%d")
