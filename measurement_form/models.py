"""Data models for the customer measurements form."""

from dataclasses import asdict, dataclass
from datetime import date
from typing import Any, Optional


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of running a field rule against a raw value."""
    valid: bool
    normalized: Any = None
    error: Optional[str] = None

    @staticmethod
    def ok(normalized: Any = None) -> "ValidationResult":
        return ValidationResult(True, normalized, None)

    @staticmethod
    def failed(error: str) -> "ValidationResult":
        return ValidationResult(False, None, error)


@dataclass
class FieldState:
    """Live state of one form field.

    The error is recomputed on every change; it only becomes visible once
    the field has been touched (blurred) or a submit was attempted.
    """
    raw_value: Any = ""
    parsed_value: Any = None
    touched: bool = False
    error: Optional[str] = None

    @property
    def valid(self) -> bool:
        return self.error is None

    @property
    def visible_error(self) -> Optional[str]:
        return self.error if self.touched else None

    def apply(self, raw_value: Any, result: ValidationResult) -> None:
        """Store a raw value together with its validation result."""
        self.raw_value = raw_value
        self.parsed_value = result.normalized if result.valid else None
        self.error = result.error


@dataclass(frozen=True)
class HeightValues:
    """Both representations of a height, as the raw strings shown in the inputs."""
    cm: str = ""
    ft: str = ""
    inches: str = ""


@dataclass(frozen=True)
class WeightValues:
    """Both representations of a weight, as the raw strings shown in the inputs."""
    kg: str = ""
    lbs: str = ""


@dataclass(frozen=True)
class FormSnapshot:
    """Immutable copy of the form taken at a successful submit."""
    full_name: str
    mobile_number: str
    email: str
    date_of_birth: date
    height_cm: str
    height_ft: str
    height_in: str
    weight_kg: str
    weight_lbs: str
    height_unit: str
    weight_unit: str

    @property
    def height(self) -> str:
        """Height as tracked by the form for the selected unit."""
        if self.height_unit == "ft":
            return f"{self.height_ft}.{self.height_in}"
        return self.height_cm

    @property
    def weight(self) -> str:
        """Weight as tracked by the form for the selected unit."""
        if self.weight_unit == "lbs":
            return self.weight_lbs
        return self.weight_kg

    def as_dict(self) -> dict:
        """Field values and unit tags."""
        return asdict(self)
