from .birthdate import BirthdateAllocationError
from .generator import EmployeeGenerator, generate
from .models import AgeRange, Employee, Gender, GenerationRequest, Workload

__all__ = [
    "EmployeeGenerator",
    "generate",
    "Employee",
    "GenerationRequest",
    "AgeRange",
    "Gender",
    "Workload",
    "BirthdateAllocationError",
]
