# salon_forecast/engines/forecast.py
"""
Monthly revenue forecast per location.

The computation runs in two phases:

1. Every location's own employees are forecast. Each employee's baseline is
   looked up by (role, rank, season), scaled by the activity policy and
   reduced by the help deductions of the month. Help additions are credited
   to a ledger keyed by receiving location while this happens.
2. Once all locations are done the ledger is sealed and each location's
   received help is added to its own total.

The engine is pure: no I/O, no state shared between calls.
"""

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from salon_forecast.engines.activity import ZERO_RATIO, ActivityPolicy, BinaryLeavePolicy
from salon_forecast.engines.results import (
    ZERO,
    Amounts,
    EmployeeForecast,
    ForecastDiagnostics,
    ForecastRun,
    LocationForecast,
)
from salon_forecast.engines.transfers import (
    DeductionOverflowPolicy,
    HelpTransferLedger,
    applied_deduction,
    index_help_records,
    total_deduction,
)
from salon_forecast.models import (
    BaselineRevenueStandard,
    Employee,
    HelpRecord,
    Location,
    StandardKey,
)
from salon_forecast.seasons import SeasonCategory, classify
from salon_forecast.utils.rounding import HUNDRED, percent_of, remaining_after, scale_amount

logger = logging.getLogger(__name__)
debug_logger = logging.getLogger("salon_forecast.debug")


class ForecastConfigError(ValueError):
    """Raised when forecast options cannot be combined."""


def index_standards(
    standards: Iterable[BaselineRevenueStandard],
) -> Dict[StandardKey, BaselineRevenueStandard]:
    """Build the (role, rank, season) lookup table. The first standard per key wins."""
    table: Dict[StandardKey, BaselineRevenueStandard] = {}
    for standard in standards:
        if standard.key in table:
            logger.warning(
                f"Duplicate baseline standard for {standard.role.value}/{standard.rank.value}/"
                f"{standard.season.value}; keeping the first."
            )
            continue
        table[standard.key] = standard
    return table


@dataclass(frozen=True)
class _RunContext:
    season: SeasonCategory
    standards: Dict[StandardKey, BaselineRevenueStandard]
    activity_policy: ActivityPolicy
    activity_records: Dict[str, Any]
    help_records: Dict[str, List[HelpRecord]]
    promo_period: bool
    deduction_overflow: DeductionOverflowPolicy


def _on_leave_entry(employee: Employee) -> EmployeeForecast:
    return EmployeeForecast(
        employee_id=employee.id,
        employee_name=employee.name,
        role=employee.role,
        rank=employee.rank,
        baseline=ZERO,
        adjusted=ZERO,
        deduction_percent=0.0,
        activity_ratio=0.0,
        on_leave=True,
    )


def _forecast_employee(
    employee: Employee,
    ctx: _RunContext,
    ledger: HelpTransferLedger,
    diagnostics: ForecastDiagnostics,
) -> Optional[EmployeeForecast]:
    ratio = ctx.activity_policy.activity_ratio(ctx.activity_records.get(employee.id))
    if ratio == ZERO_RATIO:
        debug_logger.debug(f"Employee {employee.id} on leave for the month")
        diagnostics.on_leave.append(employee.id)
        return _on_leave_entry(employee)

    standard = ctx.standards.get((employee.role, employee.rank, ctx.season))
    if standard is None:
        diagnostics.missing_standards.append(employee.id)
        logger.warning(
            f"No baseline standard for employee {employee.id} ({employee.role.value}/"
            f"{employee.rank.value}/{ctx.season.value}); excluded from forecast."
        )
        return None

    # Promotional months double retail before any scaling
    retail = standard.retail * 2 if ctx.promo_period else standard.retail
    baseline = Amounts(
        treatment=scale_amount(standard.treatment, ratio),
        retail=scale_amount(retail, ratio),
    )

    helps = ctx.help_records.get(employee.id, [])
    for help_record in helps:
        # Additions come off the baseline, never off what is left after deductions
        ledger.credit(
            help_record.to_location_id,
            Amounts(
                treatment=percent_of(baseline.treatment, help_record.addition_percent),
                retail=percent_of(baseline.retail, help_record.addition_percent),
            ),
        )

    deduction = total_deduction(helps)
    if deduction > HUNDRED:
        diagnostics.deduction_overflows.append(employee.id)
        logger.warning(
            f"Help deductions for employee {employee.id} total {deduction}% "
            f"(policy: {ctx.deduction_overflow.value})."
        )
    applied = applied_deduction(employee.id, deduction, ctx.deduction_overflow)
    adjusted = Amounts(
        treatment=remaining_after(baseline.treatment, applied),
        retail=remaining_after(baseline.retail, applied),
    )
    debug_logger.debug(
        f"Employee {employee.id}: ratio={ratio}, baseline={baseline}, "
        f"deduction={deduction}% ({len(helps)} help records), adjusted={adjusted}"
    )

    return EmployeeForecast(
        employee_id=employee.id,
        employee_name=employee.name,
        role=employee.role,
        rank=employee.rank,
        baseline=baseline,
        adjusted=adjusted,
        deduction_percent=float(deduction),
        activity_ratio=float(ratio),
        on_leave=False,
    )


def _forecast_location(
    location: Location,
    employees: Sequence[Employee],
    ctx: _RunContext,
    ledger: HelpTransferLedger,
    diagnostics: ForecastDiagnostics,
) -> LocationForecast:
    entries: List[EmployeeForecast] = []
    pre_help = ZERO
    for employee in employees:
        if employee.location_id != location.id:
            continue
        entry = _forecast_employee(employee, ctx, ledger, diagnostics)
        if entry is None:
            continue
        entries.append(entry)
        pre_help = pre_help + entry.adjusted
    return LocationForecast(
        location_id=location.id,
        location_name=location.name,
        employees=entries,
        pre_help=pre_help,
    )


def run_forecast(
    locations: Iterable[Location],
    employees: Iterable[Employee],
    standards: Iterable[BaselineRevenueStandard],
    help_records: Iterable[HelpRecord],
    leave_records: Iterable[Any],
    year: int,
    month: int,
    promo_period: bool = False,
    activity_policy: Optional[ActivityPolicy] = None,
    deduction_overflow: Union[DeductionOverflowPolicy, str] = DeductionOverflowPolicy.ALLOW,
) -> ForecastRun:
    """
    Forecast revenue for every location for one month.

    Args:
        locations: Locations to report on; output keeps this order
        employees: All employees; each is forecast at its owning location
        standards: Baseline revenue standards keyed by (role, rank, season)
        help_records: Help records; records outside (year, month) are ignored
        leave_records: Leave or attendance records, read by ``activity_policy``
        year: Target year
        month: Target month (1-12)
        promo_period: Double retail baselines for a promotional month
        activity_policy: Activity policy; binary leave when omitted
        deduction_overflow: Handling of help deductions above 100%

    Returns:
        ForecastRun with one LocationForecast per input location and the
        diagnostics collected along the way.

    Raises:
        ForecastConfigError: If promo_period is combined with a policy that
            does not support it.
        DeductionOverflowError: Under the reject overflow policy.
    """
    if activity_policy is None:
        activity_policy = BinaryLeavePolicy()
    deduction_overflow = DeductionOverflowPolicy(deduction_overflow)
    if promo_period and not activity_policy.supports_promo_period:
        raise ForecastConfigError(
            f"The promotional period cannot be combined with the {activity_policy.name} policy"
        )

    ctx = _RunContext(
        season=classify(month),
        standards=index_standards(standards),
        activity_policy=activity_policy,
        activity_records=activity_policy.index_records(leave_records, year, month),
        help_records=index_help_records(help_records, year, month),
        promo_period=promo_period,
        deduction_overflow=deduction_overflow,
    )
    employees = list(employees)
    diagnostics = ForecastDiagnostics()
    ledger = HelpTransferLedger()

    logger.info(
        f"Forecasting {year}-{month:02d} ({ctx.season.value}) for {len(employees)} employees "
        f"with {activity_policy!r}, promo_period={promo_period}"
    )

    # Phase 1: home locations, collecting help credits
    staged = [
        _forecast_location(location, employees, ctx, ledger, diagnostics)
        for location in locations
    ]
    ledger.seal()

    known_locations = {forecast.location_id for forecast in staged}
    for location_id in ledger.receiving_locations():
        if location_id not in known_locations:
            diagnostics.unknown_receivers.append(location_id)
            logger.warning(f"Help credited to location {location_id}, which is not being forecast.")

    # Phase 2: fold received help into each location
    results = [
        replace(forecast, help_received=ledger.received(forecast.location_id))
        for forecast in staged
    ]

    if diagnostics.skipped_count:
        logger.warning(
            f"{diagnostics.skipped_count} employee(s) skipped for missing baseline standards"
        )
    logger.info(f"Forecast complete for {len(results)} locations")

    return ForecastRun(
        year=year,
        month=month,
        season=ctx.season,
        locations=results,
        diagnostics=diagnostics,
        promo_period=promo_period,
    )


def compute_forecast(
    locations: Iterable[Location],
    employees: Iterable[Employee],
    standards: Iterable[BaselineRevenueStandard],
    help_records: Iterable[HelpRecord],
    leave_records: Iterable[Any],
    year: int,
    month: int,
    promo_period: bool = False,
    activity_policy: Optional[ActivityPolicy] = None,
    deduction_overflow: Union[DeductionOverflowPolicy, str] = DeductionOverflowPolicy.ALLOW,
) -> List[LocationForecast]:
    """Same as :func:`run_forecast` but returns only the per-location results."""
    return run_forecast(
        locations,
        employees,
        standards,
        help_records,
        leave_records,
        year,
        month,
        promo_period=promo_period,
        activity_policy=activity_policy,
        deduction_overflow=deduction_overflow,
    ).locations
