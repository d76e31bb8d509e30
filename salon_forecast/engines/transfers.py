# salon_forecast/engines/transfers.py
"""
Help transfer accounting between locations.

Employees on loan credit part of their baseline revenue to the receiving
location. Credits are collected from every location first and only then read
back, so the ledger is sealed between the two phases and refuses to be read
while it is still open.
"""

from collections import defaultdict
from decimal import Decimal
from enum import Enum
from typing import DefaultDict, Dict, Iterable, List

from salon_forecast.engines.results import Amounts, ZERO
from salon_forecast.models import HelpRecord
from salon_forecast.utils.rounding import HUNDRED, to_decimal


class DeductionOverflowPolicy(str, Enum):
    """What to do when an employee's help deductions add up to more than 100%."""

    ALLOW = "allow"    # apply as-is; home revenue goes negative
    CLAMP = "clamp"    # cap the applied deduction at 100%
    REJECT = "reject"  # raise DeductionOverflowError


class DeductionOverflowError(ValueError):
    """Raised under the reject policy when deductions exceed 100%."""

    def __init__(self, employee_id: str, total_percent: float):
        self.employee_id = employee_id
        self.total_percent = total_percent
        super().__init__(
            f"Help deductions for employee {employee_id} total {total_percent}%, above 100%"
        )


class LedgerStateError(RuntimeError):
    """Raised when the ledger is read before sealing or written after it."""


def index_help_records(
    help_records: Iterable[HelpRecord], year: int, month: int
) -> Dict[str, List[HelpRecord]]:
    """Group the period's help records by employee, keeping input order."""
    grouped: DefaultDict[str, List[HelpRecord]] = defaultdict(list)
    for record in help_records:
        if (record.year, record.month) == (year, month):
            grouped[record.employee_id].append(record)
    return dict(grouped)


def total_deduction(records: Iterable[HelpRecord]) -> Decimal:
    """Sum of deduction percentages, summed exactly."""
    return sum((to_decimal(record.deduction_percent) for record in records), Decimal("0"))


def applied_deduction(
    employee_id: str, total_percent: Decimal, policy: DeductionOverflowPolicy
) -> Decimal:
    """Deduction percentage actually applied to home revenue under ``policy``."""
    if total_percent <= HUNDRED:
        return total_percent
    if policy is DeductionOverflowPolicy.REJECT:
        raise DeductionOverflowError(employee_id, float(total_percent))
    if policy is DeductionOverflowPolicy.CLAMP:
        return HUNDRED
    return total_percent


class HelpTransferLedger:
    """Accumulates help credits per receiving location."""

    def __init__(self):
        self._credits: Dict[str, Amounts] = {}
        self._sealed = False

    @property
    def sealed(self) -> bool:
        return self._sealed

    def credit(self, location_id: str, amounts: Amounts) -> None:
        if self._sealed:
            raise LedgerStateError("Cannot credit a sealed help ledger")
        self._credits[location_id] = self._credits.get(location_id, ZERO) + amounts

    def seal(self) -> None:
        self._sealed = True

    def received(self, location_id: str) -> Amounts:
        if not self._sealed:
            raise LedgerStateError("Help ledger must be sealed before it is read")
        return self._credits.get(location_id, ZERO)

    def receiving_locations(self) -> List[str]:
        return list(self._credits)
