"""
Configuration & Constants
=========================
This module serves as the central registry for the numeric limits and
display constants of the calculator.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (bounds, thresholds, colors)
   scattered throughout the model and the view.
2. Consistency: The validator, the evaluator, the scale and the legend all
   read the same values, so they can never disagree.

Exports:
    HEIGHT_RANGE_CM (tuple): Accepted height range in centimeters.
    WEIGHT_RANGE_KG (tuple): Accepted weight range in kilograms.
    CATEGORY_THRESHOLDS (tuple): Lower bounds of Normal, Overweight, Obese.
    SCALE_RANGE (tuple): Score range covered by the visual scale.
    HIGHLIGHT_DURATION_MS (int): Duration of the result highlight.
"""
# Input bounds (inclusive)
HEIGHT_RANGE_CM: tuple[float, float] = (50.0, 250.0)
WEIGHT_RANGE_KG: tuple[float, float] = (20.0, 500.0)

# Lower bounds of Normal / Overweight / Obese
CATEGORY_THRESHOLDS: tuple[float, float, float] = (18.5, 25.0, 30.0)

# Visual scale
SCALE_RANGE: tuple[float, float] = (10.0, 40.0)
SCALE_SEGMENTS: int = 4

# Result card "pop" after every successful calculation
HIGHLIGHT_DURATION_MS: int = 500

# Category colors (fill, text)
CATEGORY_COLORS: dict[str, tuple[str, str]] = {
    "underweight": ("#2563eb", "#1d4ed8"),
    "normal": ("#10b981", "#059669"),
    "overweight": ("#f59e0b", "#d97706"),
    "obese": ("#ef4444", "#dc2626"),
}
NEUTRAL_COLORS: tuple[str, str] = ("#e5e7eb", "#6b7280")
ERROR_COLOR: str = "#dc2626"
