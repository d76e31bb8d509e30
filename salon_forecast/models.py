# salon_forecast/models.py
"""
Input records consumed by the forecast engine.

Records are plain frozen dataclasses; whoever owns storage (files, a database,
an API) is expected to assemble them and hand them over as in-memory sequences.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from salon_forecast.seasons import SeasonCategory


class Role(str, Enum):
    """Service specialization of an employee."""

    EYELIST = "eyelist"
    NAILIST = "nailist"


class Rank(str, Enum):
    """Seniority tiers, declared from most junior to most senior."""

    J1 = "J-1"
    J2 = "J-2"
    J3 = "J-3"
    S1 = "S-1"
    S2 = "S-2"
    S3 = "S-3"
    M = "M"

    @property
    def order(self) -> int:
        return list(Rank).index(self)


@dataclass(frozen=True)
class Location:
    id: str
    name: str


@dataclass(frozen=True)
class Employee:
    """A member of staff and the location that owns their revenue.

    Args:
        id: Unique identifier
        name: Display name
        location_id: Identifier of the owning (home) location
        role: Service specialization; plain strings are coerced to Role
        rank: Seniority tier; plain strings are coerced to Rank
    """

    id: str
    name: str
    location_id: str
    role: Role
    rank: Rank

    def __post_init__(self):
        object.__setattr__(self, "role", Role(self.role))
        object.__setattr__(self, "rank", Rank(self.rank))


StandardKey = Tuple[Role, Rank, SeasonCategory]


@dataclass(frozen=True)
class BaselineRevenueStandard:
    """Expected monthly revenue of a fully active employee for a role/rank/season."""

    role: Role
    rank: Rank
    season: SeasonCategory
    treatment: int
    retail: int

    def __post_init__(self):
        object.__setattr__(self, "role", Role(self.role))
        object.__setattr__(self, "rank", Rank(self.rank))
        object.__setattr__(self, "season", SeasonCategory(self.season))

    @property
    def key(self) -> StandardKey:
        return (self.role, self.rank, self.season)

    @property
    def total(self) -> int:
        return self.treatment + self.retail


@dataclass(frozen=True)
class LeaveRecord:
    """Reduced activity of an employee for one month.

    Under the binary leave model the mere presence of a record means full
    leave. Under the fractional model ``activity_ratio`` (0 = full leave,
    1 = fully active) scales baseline revenue.
    """

    employee_id: str
    year: int
    month: int
    activity_ratio: float = 0.0

    @property
    def period(self) -> Tuple[int, int]:
        return (self.year, self.month)


@dataclass(frozen=True)
class AttendanceRecord:
    """Days worked by an employee in one month."""

    employee_id: str
    year: int
    month: int
    working_days: float

    @property
    def period(self) -> Tuple[int, int]:
        return (self.year, self.month)


@dataclass(frozen=True)
class HelpRecord:
    """An employee lending part of their month to another location.

    ``deduction_percent`` is removed from the home location's credited revenue,
    ``addition_percent`` is credited to the receiving location. The two are
    independent of each other.
    """

    employee_id: str
    year: int
    month: int
    from_location_id: str
    to_location_id: str
    deduction_percent: float
    addition_percent: float

    @property
    def period(self) -> Tuple[int, int]:
        return (self.year, self.month)


__all__ = [
    "Role",
    "Rank",
    "Location",
    "Employee",
    "BaselineRevenueStandard",
    "StandardKey",
    "LeaveRecord",
    "AttendanceRecord",
    "HelpRecord",
]
