"""One recorded 6/49 draw.

Fields:
- date
- numbers (six main numbers, entry order)
- bonus
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

MIN_NUMBER = 1
MAX_NUMBER = 49
PICK_COUNT = 6


@dataclass(frozen=True)
class Draw:
    """Six main numbers + bonus. Duplicates among the main numbers are kept as entered."""

    date: datetime
    numbers: tuple[int, int, int, int, int, int]
    bonus: int
