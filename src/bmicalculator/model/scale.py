"""Mapping of a score onto the bounded visual scale (0 - 100 %)."""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from bmicalculator.config import SCALE_RANGE, SCALE_SEGMENTS
from bmicalculator.model.evaluator import Category


@dataclass(frozen=True)
class ScaleSegment:
    """One colored section of the scale, in percent of its width."""
    category: Category
    start: float
    end: float

    @property
    def width(self) -> float:
        return self.end - self.start


def scale_position(score: float) -> float:
    """
    Position of the indicator on the scale in percent.

    The score is clamped to SCALE_RANGE (10 - 40) and mapped linearly,
    10 -> 0 % and 40 -> 100 %.
    """
    low, high = SCALE_RANGE
    clamped = float(np.clip(score, low, high))
    return (clamped - low) / (high - low) * 100.0


def scale_segments() -> list[ScaleSegment]:
    """Equal-width sections of the scale, one per category."""
    edges = np.linspace(0.0, 100.0, SCALE_SEGMENTS + 1)
    return [
        ScaleSegment(category=category, start=float(start), end=float(end))
        for category, start, end in zip(Category, edges[:-1], edges[1:])
    ]
