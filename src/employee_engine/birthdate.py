from __future__ import annotations

import calendar
import logging
from datetime import UTC, datetime, timedelta

import numpy as np

from .models import AgeRange
from .random_source import random_int

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
ONE_MS = timedelta(milliseconds=1)
DEFAULT_MAX_ATTEMPTS = 1000


class BirthdateAllocationError(RuntimeError):
    """No unused birthdate could be drawn from the age window."""


def subtract_years(moment: datetime, years: int) -> datetime:
    """Calendar-aware year subtraction; 29 February rolls to 1 March in common years."""
    year = moment.year - years
    if moment.month == 2 and moment.day == 29 and not calendar.isleap(year):
        return moment.replace(year=year, month=3, day=1)
    return moment.replace(year=year)


def to_timestamp(moment: datetime) -> int:
    """Milliseconds since the Unix epoch."""
    return (moment - EPOCH) // ONE_MS


def format_timestamp(timestamp: int) -> str:
    moment = EPOCH + timedelta(milliseconds=timestamp)
    return f"{moment.year:04d}-{moment:%m-%dT%H:%M:%S}.{moment.microsecond // 1000:03d}Z"


def birthdate_window(age: AgeRange, now: datetime) -> tuple[int, int]:
    """Return the [oldest, newest) birth instants in epoch milliseconds."""
    oldest = subtract_years(now, age.max)
    newest = subtract_years(now, age.min)
    return to_timestamp(oldest), to_timestamp(newest)


def generate_unique_birthdate(
    age: AgeRange,
    used_timestamps: set[int],
    rng: np.random.Generator,
    now: datetime | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> str:
    now = now or datetime.now(UTC)
    min_time, max_time = birthdate_window(age, now)
    span = max_time - min_time
    if span <= 0:
        raise BirthdateAllocationError(f"Empty birthdate window for ages {age.min}-{age.max}")
    if len(used_timestamps) >= span:
        raise BirthdateAllocationError(f"All {span} birthdate instants for ages {age.min}-{age.max} are taken")

    for attempt in range(1, max_attempts + 1):
        timestamp = min_time + random_int(span, rng)
        if timestamp not in used_timestamps:
            used_timestamps.add(timestamp)
            return format_timestamp(timestamp)
        logger.debug("Birthdate collision on attempt %d: %d already issued", attempt, timestamp)

    raise BirthdateAllocationError(
        f"Cannot allocate a unique birthdate after {max_attempts} attempts "
        f"({len(used_timestamps)} already issued)"
    )
