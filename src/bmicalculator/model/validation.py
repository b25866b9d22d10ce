"""
Field Validation
================
Turns the raw text of the two input fields into a user-facing error message.

Rules are checked in order and the first match wins:
    1. empty text            -> "<Field> is required"
    2. not a positive number -> "Please enter a valid <field>"
    3. outside the bounds    -> "<Field> seems too low/high (min/max ...)"
"""
from __future__ import annotations

import math
import re
from enum import StrEnum
from typing import Optional

from bmicalculator.config import HEIGHT_RANGE_CM, WEIGHT_RANGE_KG

# Plain ASCII decimal, optionally signed, with an optional exponent
_NUMBER_RE = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")


class Field(StrEnum):
    """The two user-editable inputs."""
    HEIGHT = "height"
    WEIGHT = "weight"

    @property
    def unit(self) -> str:
        return "cm" if self is Field.HEIGHT else "kg"

    @property
    def bounds(self) -> tuple[float, float]:
        return HEIGHT_RANGE_CM if self is Field.HEIGHT else WEIGHT_RANGE_KG


def _fmt(value: float) -> str:
    return f"{value:g}"


def parse_number(text: str) -> Optional[float]:
    """
    Parse user text into a finite float.

    Returns None for anything that is not a plain finite number, including
    'nan', 'inf', trailing garbage like '12abc', digit separators
    ('1_70') and non-ASCII digits.
    """
    text = text.strip()
    if not _NUMBER_RE.fullmatch(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value


def validate_field(field: Field, text: str) -> Optional[str]:
    """
    Validate the raw text of a single field.

    Args:
        field: Which input the text belongs to.
        text: Untrusted user input.

    Returns:
        The error message, or None when the value is acceptable.
    """
    if not text.strip():
        return f"{field.value.capitalize()} is required"

    value = parse_number(text)
    if value is None or value <= 0:
        return f"Please enter a valid {field.value}"

    low, high = field.bounds
    if value < low:
        return f"{field.value.capitalize()} seems too low (min {_fmt(low)}{field.unit})"
    if value > high:
        return f"{field.value.capitalize()} seems too high (max {_fmt(high)}{field.unit})"

    return None
