from __future__ import annotations

import math

GRADE_LETTERS: tuple[str, ...] = ("A", "B", "C", "D", "E", "F")

GRADE_POINTS: dict[str, int] = {
    "A": 5,
    "B": 4,
    "C": 3,
    "D": 2,
    "E": 1,
    "F": 0,
}


def grade_point(letter: str) -> int:
    # Anything outside the closed set scores like an F.
    return GRADE_POINTS.get(letter.strip().upper(), 0)


def parse_units(text: str) -> float | None:
    """Return the course units as a positive float, or None if unusable."""
    try:
        value = float(text.strip())
    except (AttributeError, ValueError):
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value
