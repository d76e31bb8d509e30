# salon_forecast/seasons.py
"""
Calendar-month season buckets used as part of the baseline revenue lookup key.
"""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Tuple


class SeasonCategory(str, Enum):
    """Season buckets that baseline revenue standards are defined for."""

    NORMAL = "normal"
    SLOW = "slow"
    BUSY = "busy"
    SUPER_BUSY = "super_busy"


@dataclass(frozen=True)
class SeasonDefinition:
    """A season bucket and the months it covers.

    ``rate`` is the reference index shown next to the season (normal = 100).
    It is informational only; revenue is never multiplied by it.
    """

    category: SeasonCategory
    label: str
    months: FrozenSet[int]
    rate: int


SEASON_DEFINITIONS: Tuple[SeasonDefinition, ...] = (
    SeasonDefinition(SeasonCategory.NORMAL, "Normal", frozenset({1, 3, 4, 9, 10, 11}), 100),
    SeasonDefinition(SeasonCategory.SLOW, "Slow", frozenset({2, 5, 6}), 98),
    SeasonDefinition(SeasonCategory.BUSY, "Busy", frozenset({7, 8}), 106),
    SeasonDefinition(SeasonCategory.SUPER_BUSY, "Super busy", frozenset({12}), 110),
)

_DEFAULT_SEASON = SEASON_DEFINITIONS[0]


def season_definition(month: int) -> SeasonDefinition:
    """Return the season definition covering ``month`` (normal if none does)."""
    for definition in SEASON_DEFINITIONS:
        if month in definition.months:
            return definition
    return _DEFAULT_SEASON


def classify(month: int) -> SeasonCategory:
    """Map a calendar month (1-12) to its season category."""
    return season_definition(month).category


def season_label(month: int) -> str:
    return season_definition(month).label


__all__ = [
    "SeasonCategory",
    "SeasonDefinition",
    "SEASON_DEFINITIONS",
    "classify",
    "season_definition",
    "season_label",
]
