"""Field rules for the customer measurements form.

Each rule is a pure function of the raw input value returning a
ValidationResult; rules never raise. Checks run in order and the first
failing check supplies the error message.
"""

import re
from datetime import date, datetime
from typing import Optional

from measurement_form.config import MESSAGES, MOBILE_NUMBER_LENGTH
from measurement_form.models import ValidationResult

# Digits, an optional single decimal point, digits. Empty and "." pass.
NUMERIC_TEXT_PATTERN = re.compile(r"[0-9]*\.?[0-9]*")
DIGITS_PATTERN = re.compile(r"[0-9]+")
EMAIL_PATTERN = re.compile(
    r"[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+)*"
    r"@(?:[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?\.)+[A-Za-z]{2,}"
)


def is_numeric_text(raw: str) -> bool:
    """Character-level check used for height and weight inputs."""
    return isinstance(raw, str) and NUMERIC_TEXT_PATTERN.fullmatch(raw) is not None


def _to_float(raw: str) -> Optional[float]:
    if not raw or raw == ".":
        return None
    return float(raw)


def validate_full_name(raw) -> ValidationResult:
    if not isinstance(raw, str) or len(raw) < 1:
        return ValidationResult.failed(MESSAGES["full_name_required"])
    return ValidationResult.ok(raw)


def validate_mobile_number(raw) -> ValidationResult:
    raw = raw if isinstance(raw, str) else ""
    if len(raw) != MOBILE_NUMBER_LENGTH:
        return ValidationResult.failed(MESSAGES["mobile_length"])
    if DIGITS_PATTERN.fullmatch(raw) is None:
        return ValidationResult.failed(MESSAGES["mobile_digits"])
    return ValidationResult.ok(raw)


def validate_email(raw) -> ValidationResult:
    """Email is optional: None and the empty string are both 'absent'."""
    if raw is None or raw == "":
        return ValidationResult.ok(None)
    if not isinstance(raw, str) or EMAIL_PATTERN.fullmatch(raw) is None:
        return ValidationResult.failed(MESSAGES["email_invalid"])
    return ValidationResult.ok(raw)


def validate_date_of_birth(raw) -> ValidationResult:
    """Any concrete date is accepted; there is no range check."""
    if isinstance(raw, datetime):
        return ValidationResult.ok(raw.date())
    if isinstance(raw, date):
        return ValidationResult.ok(raw)
    if raw is None or raw == "":
        return ValidationResult.failed(MESSAGES["dob_required"])
    if isinstance(raw, str):
        try:
            return ValidationResult.ok(date.fromisoformat(raw))
        except ValueError:
            return ValidationResult.failed(MESSAGES["dob_invalid"])
    return ValidationResult.failed(MESSAGES["dob_invalid"])


def validate_height(raw, context: Optional[dict] = None) -> ValidationResult:
    """Validate the tracked height value.

    In ft mode the value is the "<ft>.<in>" merge of the two sub-inputs; it
    passes the same character check but normalizes to a (feet, inches) pair
    because the merge is not a decimal number of feet.
    """
    if not is_numeric_text(raw):
        return ValidationResult.failed(MESSAGES["height_numeric"])
    if context and context.get("height_unit") == "ft":
        feet, _, inches = raw.partition(".")
        if not feet and not inches:
            return ValidationResult.ok(None)
        return ValidationResult.ok((_to_float(feet) or 0.0, _to_float(inches) or 0.0))
    return ValidationResult.ok(_to_float(raw))


def validate_weight(raw, context: Optional[dict] = None) -> ValidationResult:
    if not is_numeric_text(raw):
        return ValidationResult.failed(MESSAGES["weight_numeric"])
    return ValidationResult.ok(_to_float(raw))


_RULES = {
    "full_name": validate_full_name,
    "mobile_number": validate_mobile_number,
    "email": validate_email,
    "date_of_birth": validate_date_of_birth,
    "height": validate_height,
    "weight": validate_weight,
}


def validate(field_name: str, raw_value, context: Optional[dict] = None) -> ValidationResult:
    """Run the rule for a field by name."""
    rule = _RULES.get(field_name)
    if rule is None:
        return ValidationResult.failed(MESSAGES["unknown_field"])
    if field_name in ("height", "weight"):
        return rule(raw_value, context)
    return rule(raw_value)
