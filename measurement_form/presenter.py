"""Read-only summaries of submitted form data."""

from datetime import date

from measurement_form.config import EMAIL_NOT_PROVIDED, FIELD_LABELS
from measurement_form.models import FormSnapshot


def format_date(value: date) -> str:
    """Day/month/year without padding, e.g. 1/5/1990."""
    return f"{value.day}/{value.month}/{value.year}"


def snapshot_rows(snapshot: FormSnapshot) -> list:
    """Ordered (label, value) pairs describing a snapshot."""
    return [
        (FIELD_LABELS["full_name"], snapshot.full_name),
        (FIELD_LABELS["mobile_number"], snapshot.mobile_number),
        (FIELD_LABELS["email"], snapshot.email or EMAIL_NOT_PROVIDED),
        (FIELD_LABELS["date_of_birth"], format_date(snapshot.date_of_birth)),
        (FIELD_LABELS["height"], f"{snapshot.height} {snapshot.height_unit}"),
        (FIELD_LABELS["weight"], f"{snapshot.weight} {snapshot.weight_unit}"),
    ]


def format_snapshot(snapshot: FormSnapshot) -> str:
    """Format a snapshot for display."""
    lines = ["Submitted Form Data", "=" * 30]
    lines.extend(f"{label}: {value}" for label, value in snapshot_rows(snapshot))
    return "\n".join(lines)


def format_form_state(is_valid: bool, errors: dict) -> str:
    """Format the validity flag and per-field errors for display."""
    lines = [
        "Form State",
        "=" * 30,
        f"Is Form Valid: {'Yes' if is_valid else 'No'}",
        "Errors:",
    ]
    if errors:
        lines.extend(f"  {name}: {message}" for name, message in errors.items())
    else:
        lines.append("  None")
    return "\n".join(lines)
