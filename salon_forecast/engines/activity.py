# salon_forecast/engines/activity.py
"""
Activity policies: how much of a month an employee actually works.

A policy turns the month's leave or attendance records into a ratio in
[0, 1] that the baseline revenue is scaled by. A ratio of 0 excludes the
employee from the month entirely. Policies hold configuration only; the
records are passed in per run, so one instance can serve many forecasts.
"""

import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any, Dict, Iterable, Optional

from salon_forecast.utils.rounding import ONE, to_decimal

logger = logging.getLogger(__name__)

ZERO_RATIO = Decimal("0")
FULL_ACTIVITY = ONE

DEFAULT_STANDARD_WORKING_DAYS = 22


def _clamp_ratio(ratio: Decimal, employee_id: str) -> Decimal:
    if ratio < ZERO_RATIO or ratio > ONE:
        logger.warning(
            f"Activity ratio {ratio} for employee {employee_id} is outside [0, 1]; clamping."
        )
        return min(max(ratio, ZERO_RATIO), ONE)
    return ratio


class ActivityPolicy(ABC):
    """Base class for activity policies."""

    name = "abstract"
    # Whether the promotional retail doubling may be combined with this policy
    supports_promo_period = True

    def index_records(self, records: Iterable[Any], year: int, month: int) -> Dict[str, Any]:
        """Map employee id to that employee's record for the period.

        Records outside (year, month) are ignored. If an employee has more than
        one record the first one wins.
        """
        indexed: Dict[str, Any] = {}
        for record in records:
            if (record.year, record.month) != (year, month):
                continue
            if record.employee_id in indexed:
                logger.warning(
                    f"Duplicate {self.name} record for employee {record.employee_id} "
                    f"in {year}-{month:02d}; keeping the first."
                )
                continue
            indexed[record.employee_id] = record
        return indexed

    def activity_ratio(self, record: Optional[Any]) -> Decimal:
        """Ratio for an employee given their record (None means no record)."""
        if record is None:
            return FULL_ACTIVITY
        return self.ratio_from_record(record)

    @abstractmethod
    def ratio_from_record(self, record: Any) -> Decimal:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class BinaryLeavePolicy(ActivityPolicy):
    """Any leave record in the month means the employee is fully on leave."""

    name = "binary_leave"

    def ratio_from_record(self, record: Any) -> Decimal:
        return ZERO_RATIO


class LeaveRatioPolicy(ActivityPolicy):
    """Leave records carry the fraction of the month the employee is active."""

    name = "leave_ratio"
    supports_promo_period = False

    def ratio_from_record(self, record: Any) -> Decimal:
        return _clamp_ratio(to_decimal(record.activity_ratio), record.employee_id)


class WorkingDaysPolicy(ActivityPolicy):
    """Attendance records give days worked out of a standard month.

    Args:
        standard_working_days: Days a fully active employee works in a month
    """

    name = "working_days"

    def __init__(self, standard_working_days: float = DEFAULT_STANDARD_WORKING_DAYS):
        if standard_working_days <= 0:
            raise ValueError("standard_working_days must be positive")
        self.standard_working_days = standard_working_days

    def ratio_from_record(self, record: Any) -> Decimal:
        ratio = to_decimal(record.working_days) / to_decimal(self.standard_working_days)
        return _clamp_ratio(ratio, record.employee_id)

    def __repr__(self) -> str:
        return f"WorkingDaysPolicy(standard_working_days={self.standard_working_days})"


ACTIVITY_POLICIES = {
    BinaryLeavePolicy.name: BinaryLeavePolicy,
    LeaveRatioPolicy.name: LeaveRatioPolicy,
    WorkingDaysPolicy.name: WorkingDaysPolicy,
}


def build_activity_policy(name: str, **kwargs) -> ActivityPolicy:
    """Instantiate a policy by its configured name."""
    try:
        policy_cls = ACTIVITY_POLICIES[name]
    except KeyError:
        raise ValueError(
            f"Unknown activity policy '{name}'. Expected one of {sorted(ACTIVITY_POLICIES)}"
        ) from None
    if policy_cls is WorkingDaysPolicy:
        return policy_cls(**kwargs)
    return policy_cls()
