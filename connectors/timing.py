"""
Meeting time-window helpers.

Providers that need an explicit end instant get
``start + duration minutes`` rendered as a UTC ISO-8601 instant with
millisecond precision, e.g. ``2025-01-01T10:30:00.000Z``.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone


def parse_start_time(value: str) -> datetime:
    """
    Parse a caller-supplied start time.

    Accepts ISO-8601 strings with a ``Z`` suffix or a numeric offset.
    Naive values are taken as UTC.  Raises ``ValueError`` otherwise.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"start time must be a non-empty string, got {value!r}")
    text = value.strip()
    if text[-1] in ("Z", "z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_instant(moment: datetime) -> str:
    utc = moment.astimezone(timezone.utc)
    return f"{utc:%Y-%m-%dT%H:%M:%S}.{utc.microsecond // 1000:03d}Z"


def meeting_end_time(start_time: str, duration_minutes: int) -> str:
    """
    Return the end instant for a meeting of ``duration_minutes``.

    Raises ``ValueError`` when the start is unparsable or the end falls
    outside the representable date range.
    """
    start = parse_start_time(start_time)
    try:
        end = start + timedelta(minutes=duration_minutes)
    except OverflowError as exc:
        raise ValueError(
            f"meeting of {duration_minutes} minutes ends out of range"
        ) from exc
    return format_instant(end)
