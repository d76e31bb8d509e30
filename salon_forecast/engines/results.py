# salon_forecast/engines/results.py
"""
Output structures of a forecast run.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from salon_forecast.models import Rank, Role
from salon_forecast.seasons import SeasonCategory


@dataclass(frozen=True)
class Amounts:
    """Treatment and retail revenue, in whole currency units."""

    treatment: int = 0
    retail: int = 0

    @property
    def total(self) -> int:
        return self.treatment + self.retail

    def __add__(self, other: "Amounts") -> "Amounts":
        if not isinstance(other, Amounts):
            return NotImplemented
        return Amounts(self.treatment + other.treatment, self.retail + other.retail)


ZERO = Amounts()


@dataclass(frozen=True)
class EmployeeForecast:
    """Forecast for one employee at their home location.

    Args:
        employee_id: Employee identifier
        employee_name: Display name
        role: Service specialization
        rank: Seniority tier
        baseline: Activity-scaled baseline before help deductions
        adjusted: Amount credited to the home location after help deductions
        deduction_percent: Sum of deduction percentages over the month's help records
        activity_ratio: Ratio the baseline was scaled by (0 when on leave)
        on_leave: True when the employee was fully excluded for the month
    """

    employee_id: str
    employee_name: str
    role: Role
    rank: Rank
    baseline: Amounts
    adjusted: Amounts
    deduction_percent: float = 0.0
    activity_ratio: float = 1.0
    on_leave: bool = False


@dataclass(frozen=True)
class LocationForecast:
    """Forecast for one location.

    ``pre_help`` sums the adjusted amounts of the location's own employees,
    ``help_received`` is what other locations' employees credited to it.
    """

    location_id: str
    location_name: str
    employees: List[EmployeeForecast]
    pre_help: Amounts
    help_received: Amounts = ZERO

    @property
    def final(self) -> Amounts:
        return self.pre_help + self.help_received


@dataclass
class ForecastDiagnostics:
    """Non-fatal observations collected while forecasting."""

    missing_standards: List[str] = field(default_factory=list)
    on_leave: List[str] = field(default_factory=list)
    deduction_overflows: List[str] = field(default_factory=list)
    unknown_receivers: List[str] = field(default_factory=list)

    @property
    def skipped_count(self) -> int:
        return len(self.missing_standards)


@dataclass(frozen=True)
class ForecastRun:
    """A complete forecast for one month across every requested location."""

    year: int
    month: int
    season: SeasonCategory
    locations: List[LocationForecast]
    diagnostics: ForecastDiagnostics
    promo_period: bool = False

    def location(self, location_id: str) -> Optional[LocationForecast]:
        for location in self.locations:
            if location.location_id == location_id:
                return location
        return None
