"""Tests for data models."""

import unittest
from datetime import date

from measurement_form.models import FieldState, FormSnapshot, ValidationResult


def _snapshot(**overrides):
    values = dict(
        full_name="Asha Rao", mobile_number="9876543210", email="",
        date_of_birth=date(1990, 5, 1), height_cm="170", height_ft="5",
        height_in="7", weight_kg="65", weight_lbs="143.3",
        height_unit="cm", weight_unit="kg",
    )
    values.update(overrides)
    return FormSnapshot(**values)


class TestFieldState(unittest.TestCase):
    def test_apply_valid(self):
        state = FieldState()
        state.apply("170", ValidationResult.ok(170.0))
        self.assertEqual(state.raw_value, "170")
        self.assertEqual(state.parsed_value, 170.0)
        self.assertTrue(state.valid)

    def test_apply_invalid_clears_parsed_value(self):
        state = FieldState("170", 170.0)
        state.apply("17o", ValidationResult.failed("Height should be numeric"))
        self.assertIsNone(state.parsed_value)
        self.assertFalse(state.valid)

    def test_visible_error(self):
        state = FieldState("", None, error="Full name is required")
        self.assertIsNone(state.visible_error)
        state.touched = True
        self.assertEqual(state.visible_error, "Full name is required")


class TestFormSnapshot(unittest.TestCase):
    def test_height_and_weight_follow_units(self):
        snapshot = _snapshot()
        self.assertEqual(snapshot.height, "170")
        self.assertEqual(snapshot.weight, "65")
        snapshot = _snapshot(height_unit="ft", weight_unit="lbs")
        self.assertEqual(snapshot.height, "5.7")
        self.assertEqual(snapshot.weight, "143.3")

    def test_as_dict_has_exactly_fields_and_units(self):
        data = _snapshot().as_dict()
        self.assertEqual(set(data), {
            "full_name", "mobile_number", "email", "date_of_birth",
            "height_cm", "height_ft", "height_in", "weight_kg", "weight_lbs",
            "height_unit", "weight_unit",
        })
        self.assertEqual(data["height_unit"], "cm")

    def test_equal_values_make_equal_snapshots(self):
        self.assertEqual(_snapshot(), _snapshot())


if __name__ == "__main__":
    unittest.main()
