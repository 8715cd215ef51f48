from __future__ import annotations

from typing import Sequence, TypeVar

import numpy as np

from .models import Gender, Workload
from .random_source import random_int
from .reference_data import GENDERS, NAMES_BY_GENDER, SURNAMES_BY_GENDER, WORKLOADS

T = TypeVar("T")


def pick_with_coverage(values: Sequence[T], index: int, rng: np.random.Generator) -> T:
    # First len(values) indexes walk the list so every value shows up once.
    if index < len(values):
        return values[index]
    return values[random_int(len(values), rng)]


def select_gender(index: int, rng: np.random.Generator) -> Gender:
    return pick_with_coverage(GENDERS, index, rng)


def select_workload(index: int, rng: np.random.Generator) -> Workload:
    return pick_with_coverage(WORKLOADS, index, rng)


def select_name(index: int, gender: Gender, rng: np.random.Generator) -> str:
    return pick_with_coverage(NAMES_BY_GENDER[Gender(gender)], index, rng)


def select_surname(index: int, gender: Gender, rng: np.random.Generator) -> str:
    return pick_with_coverage(SURNAMES_BY_GENDER[Gender(gender)], index, rng)
