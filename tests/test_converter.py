"""Tests for the unit conversion engine."""

import unittest

from measurement_form.converter import (
    cm_to_ft_in,
    derive_height,
    derive_weight,
    format_number,
    ft_in_to_cm,
    height_composite,
    kg_to_lbs,
    lbs_to_kg,
    merge_feet_inches,
    parse_number,
    round_half_up,
    split_feet_inches,
    weight_composite,
)
from measurement_form.models import HeightValues, WeightValues


class TestNumberHelpers(unittest.TestCase):
    def test_parse_number(self):
        self.assertEqual(parse_number("170"), 170.0)
        self.assertEqual(parse_number(".5"), 0.5)
        self.assertEqual(parse_number("5."), 5.0)
        for raw in ["", ".", "abc", "1.2.3", None, "inf", "nan", "1e3"]:
            self.assertIsNone(parse_number(raw), raw)

    def test_parse_number_too_large(self):
        self.assertIsNone(parse_number("9" * 400))
        self.assertIsNotNone(parse_number("9" * 300))

    def test_format_number(self):
        self.assertEqual(format_number(170.0), "170")
        self.assertEqual(format_number(0), "0")
        self.assertEqual(format_number(143.3), "143.3")

    def test_round_half_up(self):
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(0.5), 1)
        self.assertEqual(round_half_up(2.4), 2)
        self.assertAlmostEqual(round_half_up(1.25, 1), 1.3)


class TestHeightConversion(unittest.TestCase):
    def test_cm_to_ft_in(self):
        self.assertEqual(cm_to_ft_in(170), (5, 7))
        self.assertEqual(cm_to_ft_in(180), (5, 11))
        self.assertEqual(cm_to_ft_in(0), (0, 0))

    def test_inches_rounding_to_twelve_carries_into_feet(self):
        # 182.5 cm = 71.85 in -> 5 ft 11.85 in, which rounds to 6 ft 0 in
        self.assertEqual(cm_to_ft_in(182.5), (6, 0))
        # 152 cm = 59.84 in -> 4 ft 11.84 in
        self.assertEqual(cm_to_ft_in(152), (5, 0))

    def test_ft_in_to_cm(self):
        self.assertEqual(ft_in_to_cm(5, 7), 170)
        self.assertEqual(ft_in_to_cm(6, 0), 183)
        self.assertEqual(ft_in_to_cm(0, 0), 0)

    def test_round_trip_within_one_inch(self):
        for cm in range(30, 251):
            feet, inches = cm_to_ft_in(cm)
            self.assertLessEqual(abs(ft_in_to_cm(feet, inches) - cm), 2.54, f"Failed for cm={cm}")
            self.assertLess(inches, 12, f"Failed for cm={cm}")

    def test_merge_and_split(self):
        self.assertEqual(merge_feet_inches("5", "7"), "5.7")
        self.assertEqual(merge_feet_inches("5", ""), "5.")
        self.assertEqual(merge_feet_inches("", ""), ".")
        self.assertEqual(split_feet_inches("5.7"), ("5", "7"))
        self.assertEqual(split_feet_inches("6"), ("6", ""))
        self.assertEqual(split_feet_inches(""), ("", ""))


class TestDeriveHeight(unittest.TestCase):
    def test_from_cm(self):
        result = derive_height(HeightValues(cm="170"), "cm")
        self.assertEqual(result, HeightValues(cm="170", ft="5", inches="7"))

    def test_zero_cm(self):
        result = derive_height(HeightValues(cm="0"), "cm")
        self.assertEqual((result.ft, result.inches), ("0", "0"))

    def test_empty_cm_blanks_feet_and_inches(self):
        result = derive_height(HeightValues(cm="", ft="5", inches="7"), "cm")
        self.assertEqual((result.ft, result.inches), ("", ""))

    def test_non_numeric_cm_blanks_feet_and_inches(self):
        for raw in [".", "17a"]:
            result = derive_height(HeightValues(cm=raw, ft="5", inches="7"), "cm")
            self.assertEqual((result.ft, result.inches), ("", ""), raw)
            self.assertEqual(result.cm, raw)

    def test_out_of_range_source_blanks_derived(self):
        result = derive_height(HeightValues(cm="9" * 400, ft="5", inches="7"), "cm")
        self.assertEqual((result.ft, result.inches), ("", ""))
        self.assertEqual(derive_height(HeightValues(cm="170", ft="9" * 400), "ft").cm, "")
        self.assertEqual(derive_height(HeightValues(cm="170", ft="9" * 307), "ft").cm, "")

    def test_from_feet_and_inches(self):
        result = derive_height(HeightValues(ft="5", inches="7"), "ft")
        self.assertEqual(result.cm, "170")
        self.assertEqual((result.ft, result.inches), ("5", "7"))

    def test_missing_part_counts_as_zero(self):
        self.assertEqual(derive_height(HeightValues(ft="5"), "ft").cm, "152")
        self.assertEqual(derive_height(HeightValues(inches="10"), "ft").cm, "25")
        self.assertEqual(derive_height(HeightValues(ft="5", inches="x"), "ft").cm, "152")

    def test_no_feet_or_inches_blanks_cm(self):
        self.assertEqual(derive_height(HeightValues(cm="170"), "ft").cm, "")

    def test_composite(self):
        values = HeightValues(cm="170", ft="5", inches="7")
        self.assertEqual(height_composite(values, "cm"), "170")
        self.assertEqual(height_composite(values, "ft"), "5.7")


class TestWeightConversion(unittest.TestCase):
    def test_kg_to_lbs(self):
        self.assertAlmostEqual(kg_to_lbs(65), 143.3)
        self.assertAlmostEqual(kg_to_lbs(1), 2.2)

    def test_lbs_to_kg(self):
        self.assertAlmostEqual(lbs_to_kg(143.3), 65.0)
        self.assertAlmostEqual(lbs_to_kg(165), 74.8)

    def test_round_trip_within_tenth_of_kg(self):
        for kg in range(1, 301):
            self.assertLessEqual(abs(lbs_to_kg(kg_to_lbs(kg)) - kg), 0.1 + 1e-9, f"Failed for kg={kg}")

    def test_derive_from_kg(self):
        self.assertEqual(derive_weight(WeightValues(kg="65"), "kg"), WeightValues(kg="65", lbs="143.3"))

    def test_derive_from_lbs(self):
        self.assertEqual(derive_weight(WeightValues(lbs="143.3"), "lbs"), WeightValues(kg="65", lbs="143.3"))

    def test_out_of_range_source_blanks_derived(self):
        self.assertEqual(derive_weight(WeightValues(kg="9" * 400, lbs="1"), "kg").lbs, "")
        self.assertEqual(derive_weight(WeightValues(kg="9" * 308), "kg").lbs, "")
        self.assertEqual(derive_weight(WeightValues(kg="1", lbs="9" * 400), "lbs").kg, "")

    def test_empty_source_blanks_derived(self):
        self.assertEqual(derive_weight(WeightValues(kg="", lbs="143.3"), "kg").lbs, "")
        self.assertEqual(derive_weight(WeightValues(kg="65", lbs="."), "lbs").kg, "")

    def test_composite(self):
        values = WeightValues(kg="65", lbs="143.3")
        self.assertEqual(weight_composite(values, "kg"), "65")
        self.assertEqual(weight_composite(values, "lbs"), "143.3")


if __name__ == "__main__":
    unittest.main()
