from __future__ import annotations

from datetime import UTC, datetime

import numpy as np
import pytest

from employee_engine.birthdate import (
    BirthdateAllocationError,
    birthdate_window,
    format_timestamp,
    generate_unique_birthdate,
    subtract_years,
    to_timestamp,
)
from employee_engine.models import AgeRange


class ScriptedRng:
    def __init__(self, values: list[int]):
        self._values = list(values)
        self.calls: list[int] = []

    def integers(self, low: int, high: int) -> int:
        value = self._values.pop(0)
        assert low == 0 and 0 <= value < high
        self.calls.append(high)
        return value


class ConstantRng:
    def __init__(self, value: int = 0):
        self.value = value

    def integers(self, low: int, high: int) -> int:
        return self.value


NOW = datetime(2024, 6, 15, 12, 0, tzinfo=UTC)


def test_subtract_years_is_calendar_aware() -> None:
    leap_day = datetime(2024, 2, 29, 8, 30, tzinfo=UTC)
    assert subtract_years(leap_day, 4) == datetime(2020, 2, 29, 8, 30, tzinfo=UTC)
    assert subtract_years(leap_day, 1) == datetime(2023, 3, 1, 8, 30, tzinfo=UTC)
    assert subtract_years(NOW, 30) == datetime(1994, 6, 15, 12, 0, tzinfo=UTC)


def test_format_timestamp_uses_utc_milliseconds() -> None:
    assert format_timestamp(0) == "1970-01-01T00:00:00.000Z"
    assert format_timestamp(-1) == "1969-12-31T23:59:59.999Z"
    assert format_timestamp(1234567890123) == "2009-02-13T23:31:30.123Z"


def test_format_timestamp_pads_early_years() -> None:
    early = to_timestamp(datetime(919, 7, 3, 5, 39, 54, 254000, tzinfo=UTC))
    assert format_timestamp(early) == "0919-07-03T05:39:54.254Z"


def test_subtract_years_out_of_range_is_not_a_leap_day_case() -> None:
    with pytest.raises(ValueError, match="out of range"):
        subtract_years(NOW, 5000)


def test_window_runs_from_max_age_to_min_age() -> None:
    oldest, newest = birthdate_window(AgeRange(min=20, max=30), NOW)
    assert oldest == to_timestamp(datetime(1994, 6, 15, 12, 0, tzinfo=UTC))
    assert newest == to_timestamp(datetime(2004, 6, 15, 12, 0, tzinfo=UTC))


def test_collisions_are_redrawn() -> None:
    age = AgeRange(min=20, max=30)
    oldest, _ = birthdate_window(age, NOW)
    used = {oldest}
    rng = ScriptedRng([0, 0, 5])

    birthdate = generate_unique_birthdate(age, used, rng, now=NOW)

    assert birthdate == "1994-06-15T12:00:00.005Z"
    assert used == {oldest, oldest + 5}
    assert len(rng.calls) == 3


def test_exhausted_attempts_raise() -> None:
    age = AgeRange(min=20, max=30)
    oldest, _ = birthdate_window(age, NOW)
    used = {oldest}

    with pytest.raises(BirthdateAllocationError, match="after 3 attempts"):
        generate_unique_birthdate(age, used, ConstantRng(0), now=NOW, max_attempts=3)
    assert used == {oldest}


def test_empty_window_raises() -> None:
    age = AgeRange.model_construct(min=30, max=30)
    with pytest.raises(BirthdateAllocationError, match="Empty birthdate window"):
        generate_unique_birthdate(age, set(), ConstantRng(0), now=NOW)


def test_random_birthdates_stay_inside_window() -> None:
    age = AgeRange(min=18, max=65)
    rng = np.random.default_rng(5)
    used: set[int] = set()
    oldest, newest = birthdate_window(age, NOW)

    birthdates = [generate_unique_birthdate(age, used, rng, now=NOW) for _ in range(500)]

    assert len(set(birthdates)) == 500
    for value in birthdates:
        assert value.endswith("Z")
        assert oldest <= to_timestamp(datetime.fromisoformat(value)) < newest
