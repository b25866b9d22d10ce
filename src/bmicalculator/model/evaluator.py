"""
BMI Evaluation
==============
Computes the body-mass index from validated inputs and classifies it.

Order of operations matters: the category is decided on the raw score and
only then is the score rounded for display. A raw 24.96 is therefore shown
as 25.0 while still being classified as Normal.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import StrEnum

from bmicalculator.config import CATEGORY_THRESHOLDS

logger = logging.getLogger(__name__)


class ComputationError(Exception):
    """Raised when the BMI formula does not produce a finite number."""


class Category(StrEnum):
    """BMI bands, ordered from lowest to highest score."""
    UNDERWEIGHT = "underweight"
    NORMAL = "normal"
    OVERWEIGHT = "overweight"
    OBESE = "obese"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def short_label(self) -> str:
        return _SHORT_LABELS[self]

    @property
    def range_text(self) -> str:
        """Human readable score range, e.g. '18.5 - 24.9'."""
        normal, over, obese = CATEGORY_THRESHOLDS
        match self:
            case Category.UNDERWEIGHT:
                return f"< {normal:g}"
            case Category.NORMAL:
                return f"{normal:g} - {over - 0.1:g}"
            case Category.OVERWEIGHT:
                return f"{over:g} - {obese - 0.1:g}"
            case _:
                return f"≥ {obese:g}"


_LABELS = {
    Category.UNDERWEIGHT: "Underweight",
    Category.NORMAL: "Normal weight",
    Category.OVERWEIGHT: "Overweight",
    Category.OBESE: "Obese",
}

_SHORT_LABELS = {
    Category.UNDERWEIGHT: "Under",
    Category.NORMAL: "Normal",
    Category.OVERWEIGHT: "Over",
    Category.OBESE: "Obese",
}


@dataclass(frozen=True)
class EvaluationResult:
    """A successfully computed BMI (rounded to one decimal) and its band."""
    score: float
    category: Category


def classify(score: float) -> Category:
    """Map a score onto its band. Upper bounds are strict except for the last band."""
    normal, over, obese = CATEGORY_THRESHOLDS
    if score < normal:
        return Category.UNDERWEIGHT
    if score < over:
        return Category.NORMAL
    if score < obese:
        return Category.OVERWEIGHT
    return Category.OBESE


def round_score(score: float) -> float:
    """Round to one decimal place, halves away from zero."""
    return float(Decimal(repr(score)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def evaluate(height_cm: float, weight_kg: float) -> EvaluationResult:
    """
    Compute BMI = weight [kg] / height [m]^2.

    Args:
        height_cm: Height in centimeters.
        weight_kg: Weight in kilograms.

    Returns:
        The rounded score together with the category of the unrounded score.

    Raises:
        ComputationError: If the result is not a finite number.
    """
    height_m = height_cm / 100

    try:
        raw = weight_kg / (height_m * height_m)
    except ZeroDivisionError as e:
        raise ComputationError("Calculation resulted in an invalid value") from e

    if not math.isfinite(raw):
        raise ComputationError("Calculation resulted in an invalid value")

    category = classify(raw)
    score = round_score(raw)
    logger.debug(f"BMI for {height_cm} cm / {weight_kg} kg: raw={raw:.4f}, shown={score}, {category.label}")
    return EvaluationResult(score=score, category=category)
