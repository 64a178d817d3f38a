from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Sequence

from gpacalc.domain.logic.grading import grade_point, parse_units
from gpacalc.domain.models.entities import GPAResult, Record

TIERS: list[tuple[float, str, str, bool]] = [
    (4.5, "First Class", "Congratulations! You are the GOAT. First Class!", True),
    (4.0, "Second Class Upper", "Great job! You earned a Second Class Upper.", False),
    (3.5, "Second Class Lower", "Well done! You earned a Second Class Lower.", False),
    (3.0, "Third Class", "Good effort! You earned a Third Class. You can do better.", False),
]

PASS_TIER: tuple[str, str, bool] = (
    "Pass",
    "You passed, keep working hard! Never give up.",
    False,
)


class GPAValidationError(ValueError):
    pass


class IncompleteRecordsError(GPAValidationError):
    def __init__(self) -> None:
        super().__init__("Please fill in all course units and grades before calculating GPA!")


class EmptyRecordsError(GPAValidationError):
    def __init__(self) -> None:
        super().__init__("Add at least one course before calculating GPA.")


class InvalidUnitsError(GPAValidationError):
    def __init__(self, positions: Sequence[int]) -> None:
        self.positions = tuple(positions)
        courses = ", ".join(str(p) for p in self.positions)
        super().__init__(f"Course units must be positive numbers (check course {courses}).")


class UnitsTooLargeError(GPAValidationError):
    def __init__(self) -> None:
        super().__init__("Course units are too large to average.")


def round_2dp(value: float) -> float:
    return float(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def classify(gpa: float) -> tuple[str, str, bool]:
    for lower, tier, message, celebrate in TIERS:
        if gpa >= lower:
            return tier, message, celebrate
    return PASS_TIER


def calc_gpa(records: Iterable[Record]) -> GPAResult:
    """
    GPA = Σ(units * grade_point) / Σ(units), rounded half-up to 2 dp.

    Refuses incomplete, empty or non-numeric input instead of producing a
    non-numeric average.
    """
    records = list(records)
    if not all(r.is_filled for r in records):
        raise IncompleteRecordsError()
    if not records:
        raise EmptyRecordsError()

    parsed = [parse_units(r.units) for r in records]
    bad = [i + 1 for i, units in enumerate(parsed) if units is None]
    if bad:
        raise InvalidUnitsError(bad)

    total_units = 0.0
    total_points = 0.0
    for record, units in zip(records, parsed):
        total_units += units
        total_points += units * grade_point(record.grade)
    if not (math.isfinite(total_units) and math.isfinite(total_points)):
        raise UnitsTooLargeError()

    gpa = round_2dp(total_points / total_units)
    tier, message, celebrate = classify(gpa)
    return GPAResult(
        gpa=gpa,
        tier=tier,
        message=message,
        celebrate=celebrate,
        total_units=total_units,
        total_points=total_points,
    )
