from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Record:
    units: str = ""
    grade: str = ""

    @property
    def is_filled(self) -> bool:
        return self.units != "" and self.grade != ""


@dataclass(frozen=True)
class GPAResult:
    gpa: float
    tier: str
    message: str
    celebrate: bool
    total_units: float
    total_points: float
