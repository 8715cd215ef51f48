from __future__ import annotations

from enum import IntEnum, StrEnum

from pydantic import BaseModel, Field, StrictInt, model_validator

# Oldest age a request may ask for.
MAX_AGE = 150


class Gender(StrEnum):
    MALE = "male"
    FEMALE = "female"


class Workload(IntEnum):
    """Weekly hours."""

    TEN = 10
    TWENTY = 20
    THIRTY = 30
    FORTY = 40


class AgeRange(BaseModel):
    min: int = Field(ge=0, le=MAX_AGE)
    max: int = Field(ge=0, le=MAX_AGE)

    @model_validator(mode="after")
    def _validate_window(self) -> AgeRange:
        if self.min >= self.max:
            raise ValueError(f"age.min must be lower than age.max, got {self.min} and {self.max}")
        return self


class GenerationRequest(BaseModel):
    count: StrictInt = Field(ge=0)
    age: AgeRange


class Employee(BaseModel):
    gender: Gender
    birthdate: str
    name: str
    surname: str
    workload: Workload
