# src/tracking_webhook/rules/datetime_normalizer.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
import logging

logger = logging.getLogger("tracking_webhook.rules.datetime")

DEFAULT_TIME_OF_DAY = "12:00:00"

# Accepted shapes after composing, tried in order. %z takes "Z" or "+HH:MM".
_STAMP_FORMATS = (
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%Y-%m-%dT%H:%M%z",
)


@dataclass(frozen=True)
class CheckpointTime:
    """Outcome of normalising a sheet date/time: a UTC instant or the "now" fallback."""
    value: datetime
    is_fallback: bool

    def isoformat(self) -> str:
        # isoformat always pads the year to four digits; strftime("%Y") does not
        return self.value.replace(tzinfo=None).isoformat(timespec="seconds") + "Z"


def _utcnow(now: Optional[datetime]) -> datetime:
    if now is None:
        return datetime.now(timezone.utc)
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc)


def _compose(date: str, time: Optional[str]) -> str:
    stamp = date.strip()
    if time and time.strip():
        stamp += f"T{time.strip()}"
    else:
        stamp += f"T{DEFAULT_TIME_OF_DAY}"

    if "Z" not in stamp and "+" not in stamp:
        stamp += "Z"
    return stamp


def _parse_utc(stamp: str) -> Optional[datetime]:
    """
    Parse `stamp` against _STAMP_FORMATS and convert it to UTC.
    Returns None when no format matches, the calendar date/time is invalid,
    or the UTC instant falls outside datetime's range.
    """
    for fmt in _STAMP_FORMATS:
        try:
            parsed = datetime.strptime(stamp, fmt)
        except ValueError:
            continue
        try:
            return parsed.astimezone(timezone.utc)
        except OverflowError:
            return None
    return None


def parse_checkpoint_time(
    date: Optional[str],
    time: Optional[str] = None,
    *,
    now: Optional[datetime] = None,
) -> CheckpointTime:
    """
    Resolve a sheet Date/Time pair into a UTC instant.

    1. no date -> now
    2. date + "T" + time, or date + "T12:00:00" when time is blank
    3. append "Z" unless the text already has "Z" or "+"
    4. unparseable -> now
    """
    if not date or not date.strip():
        return CheckpointTime(_utcnow(now), is_fallback=True)

    stamp = _compose(date, time)
    parsed = _parse_utc(stamp)
    if parsed is None:
        logger.debug("Unparseable checkpoint time %r; using now", stamp)
        return CheckpointTime(_utcnow(now), is_fallback=True)
    return CheckpointTime(parsed, is_fallback=False)


def format_date_time(
    date: Optional[str],
    time: Optional[str] = None,
    *,
    now: Optional[datetime] = None,
) -> str:
    """ISO-8601 UTC string for a sheet Date/Time pair. Never raises."""
    return parse_checkpoint_time(date, time, now=now).isoformat()


__all__ = [
    "CheckpointTime",
    "DEFAULT_TIME_OF_DAY",
    "parse_checkpoint_time",
    "format_date_time",
]
