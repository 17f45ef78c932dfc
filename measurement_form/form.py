"""Form state for the customer measurements form.

MeasurementForm owns every field's state and the two unit selections. Each
edit runs to completion before the next one: validate the raw value,
recompute the paired unit representation, then the aggregate validity is
read off the resulting state. Submitting freezes the current values into a
FormSnapshot handed to whoever registered with on_submit().
"""

import logging
from dataclasses import replace
from typing import Callable, Optional

from measurement_form.config import (
    DEFAULT_HEIGHT_UNIT,
    DEFAULT_WEIGHT_UNIT,
    FORM_FIELDS,
    HEIGHT_UNITS,
    MOBILE_NUMBER_LENGTH,
    OPTIONAL_FIELDS,
    UNIT_INPUTS,
    WEIGHT_UNITS,
)
from measurement_form.converter import (
    derive_height,
    derive_weight,
    height_cm,
    height_composite,
    split_feet_inches,
    weight_composite,
    weight_kg,
)
from measurement_form.models import FieldState, FormSnapshot, HeightValues, WeightValues
from measurement_form.rules import validate

logger = logging.getLogger(__name__)

_UNITS = {"height": HEIGHT_UNITS, "weight": WEIGHT_UNITS}

# Unit-level input -> attribute on HeightValues / WeightValues
_VALUE_ATTRS = {
    "height_cm": "cm",
    "height_ft": "ft",
    "height_in": "inches",
    "weight_kg": "kg",
    "weight_lbs": "lbs",
}


def _check_unit(dimension: str, unit: str) -> None:
    if dimension not in _UNITS:
        raise ValueError(f"Unknown dimension: {dimension}")
    if unit not in _UNITS[dimension]:
        raise ValueError(f"Invalid {dimension} unit {unit!r}. Choose from: {', '.join(_UNITS[dimension])}")


def compute_validity(fields: dict, height: HeightValues, weight: WeightValues) -> bool:
    """Aggregate validity over the full field-state mapping.

    Every field must pass its rule and every required field must hold a
    value. Height and weight also need a usable canonical (cm/kg) value,
    since their character rule alone accepts "" and ".".
    """
    for name, state in fields.items():
        if state.error is not None:
            return False
        if name not in OPTIONAL_FIELDS and state.parsed_value is None:
            return False
    return height_cm(height) is not None and weight_kg(weight) is not None


class MeasurementForm:
    """Editable form state with a single submit gate."""

    def __init__(self, height_unit: str = DEFAULT_HEIGHT_UNIT, weight_unit: str = DEFAULT_WEIGHT_UNIT):
        _check_unit("height", height_unit)
        _check_unit("weight", weight_unit)
        self._height_unit = height_unit
        self._weight_unit = weight_unit
        self._listeners = []
        self._last_snapshot = None
        self.reset()

    def reset(self) -> None:
        """Clear all values, keeping unit selections and listeners."""
        self._height = HeightValues()
        self._weight = WeightValues()
        self._fields = {}
        for name in FORM_FIELDS:
            raw = None if name == "date_of_birth" else ""
            state = FieldState()
            state.apply(raw, self._validate(name, raw))
            self._fields[name] = state

    # --- Read access ---

    @property
    def height_unit(self) -> str:
        return self._height_unit

    @property
    def weight_unit(self) -> str:
        return self._weight_unit

    @property
    def height(self) -> HeightValues:
        return self._height

    @property
    def weight(self) -> WeightValues:
        return self._weight

    @property
    def last_snapshot(self) -> Optional[FormSnapshot]:
        return self._last_snapshot

    def unit(self, dimension: str) -> str:
        if dimension == "height":
            return self._height_unit
        if dimension == "weight":
            return self._weight_unit
        raise ValueError(f"Unknown dimension: {dimension}")

    def field(self, name: str) -> FieldState:
        """A copy of a field's current state."""
        return replace(self._fields[self._field_name(name)])

    @property
    def is_valid(self) -> bool:
        return compute_validity(self._fields, self._height, self._weight)

    @property
    def errors(self) -> dict:
        """Current error per field, touched or not."""
        return {name: s.error for name, s in self._fields.items() if s.error is not None}

    @property
    def visible_errors(self) -> dict:
        """Errors of fields the user has already left."""
        return {name: s.visible_error for name, s in self._fields.items() if s.visible_error}

    def mobile_characters_left(self) -> int:
        return MOBILE_NUMBER_LENGTH - len(self._fields["mobile_number"].raw_value or "")

    # --- Events ---

    def set_field(self, name: str, raw_value) -> FieldState:
        """Handle a change event for a field or a unit-level input.

        Returns a copy of the updated state of the tracked field.
        """
        if name in UNIT_INPUTS:
            dimension, unit = UNIT_INPUTS[name]
            if unit != self.unit(dimension):
                # The representation the user touched becomes authoritative
                self.set_unit(dimension, unit)
            self._store(dimension, **{_VALUE_ATTRS[name]: _text(raw_value)})
            return self._reconcile(dimension)

        if name == "height":
            raw = _text(raw_value)
            if self._height_unit == "ft":
                feet, inches = split_feet_inches(raw)
                self._store("height", ft=feet, inches=inches)
            else:
                self._store("height", cm=raw)
            return self._reconcile("height")

        if name == "weight":
            self._store("weight", **{self._weight_unit: _text(raw_value)})
            return self._reconcile("weight")

        if name not in self._fields:
            raise KeyError(name)
        state = self._fields[name]
        state.apply(raw_value, self._validate(name, raw_value))
        return replace(state)

    def blur_field(self, name: str) -> None:
        self._fields[self._field_name(name)].touched = True

    def set_unit(self, dimension: str, unit: str) -> None:
        """Select the authoritative unit system for a dimension.

        When the newly selected system already holds values, the other
        system is recomputed from it; otherwise values are left as they are
        and only the tracked composite value is re-read for the new unit.
        """
        _check_unit(dimension, unit)
        if unit == self.unit(dimension):
            return
        logger.debug("%s unit -> %s", dimension.capitalize(), unit)
        if dimension == "height":
            self._height_unit = unit
            if unit == "ft":
                has_values = bool(self._height.ft or self._height.inches)
            else:
                has_values = bool(self._height.cm)
        else:
            self._weight_unit = unit
            has_values = bool(getattr(self._weight, unit))
        if has_values:
            self._reconcile(dimension)
            return
        if dimension == "height":
            raw = height_composite(self._height, unit)
        else:
            raw = weight_composite(self._weight, unit)
        self._fields[dimension].apply(raw, self._validate(dimension, raw))

    def on_submit(self, callback: Callable[[FormSnapshot], None]) -> None:
        """Register a collaborator to receive each accepted snapshot."""
        self._listeners.append(callback)

    def submit(self) -> Optional[FormSnapshot]:
        """Freeze the current values into a snapshot.

        Returns None and leaves the previous snapshot in place when the form
        is invalid; every field is then marked touched so its error shows.
        """
        if not self.is_valid:
            for state in self._fields.values():
                state.touched = True
            logger.info("Submission rejected, invalid fields: %s", ", ".join(self.errors) or "none (missing values)")
            return None

        fields = self._fields
        snapshot = FormSnapshot(
            full_name=fields["full_name"].raw_value,
            mobile_number=fields["mobile_number"].raw_value,
            email=fields["email"].raw_value or "",
            date_of_birth=fields["date_of_birth"].parsed_value,
            height_cm=self._height.cm,
            height_ft=self._height.ft,
            height_in=self._height.inches,
            weight_kg=self._weight.kg,
            weight_lbs=self._weight.lbs,
            height_unit=self._height_unit,
            weight_unit=self._weight_unit,
        )
        self._last_snapshot = snapshot
        logger.info("Submission accepted (height in %s, weight in %s)", snapshot.height_unit, snapshot.weight_unit)
        for callback in list(self._listeners):
            callback(snapshot)
        return snapshot

    # --- Internals ---

    def _field_name(self, name: str) -> str:
        if name in UNIT_INPUTS:
            return UNIT_INPUTS[name][0]
        if name not in self._fields:
            raise KeyError(name)
        return name

    def _validate(self, name: str, raw):
        context = {"height_unit": self._height_unit, "weight_unit": self._weight_unit}
        return validate(name, raw, context)

    def _store(self, dimension: str, **values) -> None:
        if dimension == "height":
            self._height = replace(self._height, **values)
        else:
            self._weight = replace(self._weight, **values)

    def _reconcile(self, dimension: str) -> FieldState:
        """Derive the other unit system from the selected one, then validate."""
        if dimension == "height":
            self._height = derive_height(self._height, self._height_unit)
            raw = height_composite(self._height, self._height_unit)
        else:
            self._weight = derive_weight(self._weight, self._weight_unit)
            raw = weight_composite(self._weight, self._weight_unit)
        state = self._fields[dimension]
        state.apply(raw, self._validate(dimension, raw))
        return replace(state)


def _text(value) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)
