"""Metric primitives shared by every aggregator."""

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

GRADE_LETTERS = ("A", "B", "C", "D", "F")

ATTENDED_STATUSES = frozenset({"present", "late", "excused"})
COMPLETED_SUBMISSION_STATUSES = frozenset({"graded", "returned"})

# (lower bound, letter), checked top-down
_GRADE_THRESHOLDS = ((90, "A"), (80, "B"), (70, "C"), (60, "D"))


def safe_divide(numerator: float, denominator: float) -> float:
    if denominator == 0:
        return 0.0
    return numerator / denominator


def percent_of(numerator: float, denominator: float) -> float:
    """Return numerator as a percentage of denominator; 0 for an empty denominator."""
    if denominator == 0:
        return 0.0
    return numerator / denominator * 100


def round2(value: float) -> float:
    """Round to 2 decimal places, half-up, on the value's decimal representation."""
    return float(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def letter_grade(percentage: float) -> str:
    for lower_bound, letter in _GRADE_THRESHOLDS:
        if percentage >= lower_bound:
            return letter
    return "F"


def average(values: Iterable[float]) -> float:
    values = list(values)
    if not values:
        return 0.0
    return round2(sum(values) / len(values))
