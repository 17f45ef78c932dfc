"""Unit conversion for height and weight inputs.

Centimeters and kilograms are the canonical units; feet/inches and pounds
are the alternative representations shown side by side in the form.

The form keeps both representations as the raw strings displayed in the
inputs. Derivation always runs from the selected unit system to the other
one and never back, so a derived write cannot trigger another derivation.
A source that is empty or not a number blanks the derived side.
"""

import logging
import math
from dataclasses import replace
from typing import Optional

from measurement_form.config import CM_PER_INCH, INCHES_PER_FOOT, LBS_PER_KG, WEIGHT_DECIMALS
from measurement_form.models import HeightValues, WeightValues
from measurement_form.rules import is_numeric_text

logger = logging.getLogger(__name__)


def parse_number(raw) -> Optional[float]:
    """Parse an input string as a non-negative decimal, or None if it isn't one."""
    if not is_numeric_text(raw) or raw in ("", "."):
        return None
    value = float(raw)
    # Hundreds of digits parse to inf
    if not math.isfinite(value):
        return None
    return value


def format_number(value: float) -> str:
    """Format a number for an input box: 170.0 -> "170", 143.3 -> "143.3"."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves going up (2.5 -> 3), unlike the builtin round()."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


# --- Height ---

def cm_to_ft_in(cm: float) -> tuple:
    """Convert centimeters to (feet, inches).

    Inches are rounded on their own, so a remainder of 11.5 or more rounds to
    12; that is carried into the feet.
    """
    total_inches = cm / CM_PER_INCH
    feet = int(total_inches // INCHES_PER_FOOT)
    inches = int(round_half_up(total_inches % INCHES_PER_FOOT))
    if inches == INCHES_PER_FOOT:
        feet += 1
        inches = 0
    return feet, inches


def ft_in_to_cm(feet: float, inches: float) -> int:
    """Convert feet and inches to whole centimeters."""
    return int(round_half_up((feet * INCHES_PER_FOOT + inches) * CM_PER_INCH))


def merge_feet_inches(feet: str, inches: str) -> str:
    """Merge the two height sub-inputs into the single tracked height value.

    The result is "<ft>.<in>" ("5.7" for 5'7"), not a decimal number of feet.
    """
    return f"{feet}.{inches}"


def split_feet_inches(text: str) -> tuple:
    """Inverse of merge_feet_inches: "5.7" -> ("5", "7"), "6" -> ("6", "")."""
    feet, _, inches = (text or "").partition(".")
    return feet, inches


def derive_height(values: HeightValues, unit: str) -> HeightValues:
    """Recompute the representation that is not selected from the one that is."""
    if unit == "cm":
        cm = parse_number(values.cm)
        if cm is None:
            return replace(values, ft="", inches="")
        try:
            feet, inches = cm_to_ft_in(cm)
        except OverflowError:
            logger.debug("Height %s cm out of range, conversion skipped", values.cm)
            return replace(values, ft="", inches="")
        logger.debug("Height %s cm -> %s ft %s in", values.cm, feet, inches)
        return replace(values, ft=str(feet), inches=str(inches))

    feet = parse_number(values.ft)
    inches = parse_number(values.inches)
    if feet is None and inches is None:
        return replace(values, cm="")
    try:
        cm = ft_in_to_cm(feet or 0, inches or 0)
    except OverflowError:
        logger.debug("Height %s ft %s in out of range, conversion skipped", values.ft, values.inches)
        return replace(values, cm="")
    logger.debug("Height %s ft %s in -> %s cm", values.ft, values.inches, cm)
    return replace(values, cm=str(cm))


def height_composite(values: HeightValues, unit: str) -> str:
    """The single height value the form validates for the selected unit."""
    if unit == "ft":
        return merge_feet_inches(values.ft, values.inches)
    return values.cm


def height_cm(values: HeightValues) -> Optional[float]:
    """Canonical height, or None when no usable value is present."""
    return parse_number(values.cm)


# --- Weight ---

def kg_to_lbs(kg: float) -> float:
    """Convert kilograms to pounds, to one decimal place."""
    return round_half_up(kg * LBS_PER_KG, WEIGHT_DECIMALS)


def lbs_to_kg(lbs: float) -> float:
    """Convert pounds to kilograms, to one decimal place."""
    return round_half_up(lbs / LBS_PER_KG, WEIGHT_DECIMALS)


def derive_weight(values: WeightValues, unit: str) -> WeightValues:
    """Recompute the representation that is not selected from the one that is."""
    if unit == "kg":
        kg = parse_number(values.kg)
        if kg is None:
            return replace(values, lbs="")
        try:
            lbs = format_number(kg_to_lbs(kg))
        except OverflowError:
            logger.debug("Weight %s kg out of range, conversion skipped", values.kg)
            return replace(values, lbs="")
        logger.debug("Weight %s kg -> %s lbs", values.kg, lbs)
        return replace(values, lbs=lbs)

    lbs = parse_number(values.lbs)
    if lbs is None:
        return replace(values, kg="")
    try:
        kg = format_number(lbs_to_kg(lbs))
    except OverflowError:
        logger.debug("Weight %s lbs out of range, conversion skipped", values.lbs)
        return replace(values, kg="")
    logger.debug("Weight %s lbs -> %s kg", values.lbs, kg)
    return replace(values, kg=kg)


def weight_composite(values: WeightValues, unit: str) -> str:
    """The single weight value the form validates for the selected unit."""
    if unit == "lbs":
        return values.lbs
    return values.kg


def weight_kg(values: WeightValues) -> Optional[float]:
    """Canonical weight, or None when no usable value is present."""
    return parse_number(values.kg)
