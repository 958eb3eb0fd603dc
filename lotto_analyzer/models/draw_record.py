"""One completed 6/45 draw.

Fields:
- draw_no (round number, increases by one per weekly draw)
- draw_date
- numbers (six main numbers, sorted ascending)
- bonus_number
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable

from lotto_analyzer.errors import InvalidRecordError

MIN_NUMBER = 1
MAX_NUMBER = 45
NUMBERS_PER_DRAW = 6


@dataclass(frozen=True)
class DrawRecord:
    """A single completed draw (6 main numbers + bonus)."""

    draw_no: int
    draw_date: date
    numbers: tuple[int, ...]
    bonus_number: int

    def __post_init__(self) -> None:
        numbers = self._normalize(self.numbers)
        object.__setattr__(self, "numbers", numbers)

        if int(self.draw_no) < 1:
            raise InvalidRecordError(
                message="Invalid draw_no",
                details={"draw_no": ["Must be a positive integer"]},
            )
        if len(numbers) != NUMBERS_PER_DRAW or len(set(numbers)) != NUMBERS_PER_DRAW:
            raise InvalidRecordError(
                message=f"Invalid numbers for draw {self.draw_no}",
                details={"numbers": ["Must be 6 unique numbers"]},
            )
        if any(n < MIN_NUMBER or n > MAX_NUMBER for n in numbers):
            raise InvalidRecordError(
                message=f"Invalid numbers for draw {self.draw_no}",
                details={"numbers": ["All numbers must be within 1..45"]},
            )
        if not (MIN_NUMBER <= int(self.bonus_number) <= MAX_NUMBER):
            raise InvalidRecordError(
                message=f"Invalid bonus_number for draw {self.draw_no}",
                details={"bonus_number": ["Must be within 1..45"]},
            )

    @staticmethod
    def _normalize(numbers: Iterable[int]) -> tuple[int, ...]:
        return tuple(sorted(int(n) for n in numbers))

    @property
    def total(self) -> int:
        """Sum of the six main numbers."""

        return sum(self.numbers)
