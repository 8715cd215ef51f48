from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any, Callable

import numpy as np
from pydantic import ValidationError

from .birthdate import DEFAULT_MAX_ATTEMPTS, generate_unique_birthdate
from .models import Employee, GenerationRequest
from .selectors import select_gender, select_name, select_surname, select_workload

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(UTC)


class EmployeeGenerator:
    def __init__(
        self,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
        clock: Callable[[], datetime] = _utc_now,
        max_birthdate_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ):
        if max_birthdate_attempts < 1:
            raise ValueError(f"max_birthdate_attempts must be positive, got {max_birthdate_attempts}")
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.clock = clock
        self.max_birthdate_attempts = max_birthdate_attempts

    @staticmethod
    def parse_request(request: Any) -> GenerationRequest | None:
        """Validate a raw request; None means the request is unusable."""
        if request is None:
            logger.debug("Rejecting request: no request given")
            return None
        if isinstance(request, GenerationRequest):
            return request
        try:
            return GenerationRequest.model_validate(request)
        except ValidationError as exc:
            logger.debug("Rejecting request: %s", exc)
            return None

    def _build_one(self, index: int, request: GenerationRequest, used_birthdates: set[int]) -> Employee:
        gender = select_gender(index, self.rng)
        workload = select_workload(index, self.rng)
        name = select_name(index, gender, self.rng)
        surname = select_surname(index, gender, self.rng)
        birthdate = generate_unique_birthdate(
            request.age,
            used_birthdates,
            self.rng,
            now=self.clock(),
            max_attempts=self.max_birthdate_attempts,
        )
        return Employee(
            gender=gender,
            birthdate=birthdate,
            name=name,
            surname=surname,
            workload=workload,
        )

    def generate(self, request: Any) -> list[Employee]:
        parsed = self.parse_request(request)
        if parsed is None:
            return []

        logger.debug("Generating %d employees aged %d-%d", parsed.count, parsed.age.min, parsed.age.max)
        used_birthdates: set[int] = set()
        employees = [self._build_one(i, parsed, used_birthdates) for i in range(parsed.count)]
        logger.debug("Generated %d employees", len(employees))
        return employees


def generate(request: Any) -> list[Employee]:
    return EmployeeGenerator().generate(request)
