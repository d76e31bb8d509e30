# salon_forecast/reporting/summary.py
"""
Functions to lay forecast results and help records out as DataFrames.
"""

import logging
from typing import Iterable, List, Optional, Sequence

import pandas as pd

from salon_forecast.engines.results import ZERO, Amounts, ForecastRun, LocationForecast
from salon_forecast.models import Employee, HelpRecord, Location
from salon_forecast.schema.columns import ReportColumns as C

logger = logging.getLogger(__name__)

UNKNOWN_NAME = "unknown"

LOCATION_SUMMARY_COLUMNS = [
    C.YEAR, C.MONTH, C.LOCATION_ID, C.LOCATION_NAME,
    C.PRE_HELP_TREATMENT, C.PRE_HELP_RETAIL, C.PRE_HELP_TOTAL,
    C.HELP_RECEIVED_TREATMENT, C.HELP_RECEIVED_RETAIL, C.HELP_RECEIVED_TOTAL,
    C.FINAL_TREATMENT, C.FINAL_RETAIL, C.FINAL_TOTAL,
]

EMPLOYEE_DETAIL_COLUMNS = [
    C.YEAR, C.MONTH, C.LOCATION_ID, C.LOCATION_NAME,
    C.EMPLOYEE_ID, C.EMPLOYEE_NAME, C.ROLE, C.RANK,
    C.ON_LEAVE, C.ACTIVITY_RATIO, C.DEDUCTION_PERCENT,
    C.BASELINE_TREATMENT, C.BASELINE_RETAIL, C.BASELINE_TOTAL,
    C.ADJUSTED_TREATMENT, C.ADJUSTED_RETAIL, C.ADJUSTED_TOTAL,
]

HELP_TRANSFER_COLUMNS = [
    C.YEAR, C.MONTH, C.EMPLOYEE_ID, C.EMPLOYEE_NAME,
    C.FROM_LOCATION_ID, C.FROM_LOCATION_NAME,
    C.TO_LOCATION_ID, C.TO_LOCATION_NAME,
    C.DEDUCTION_PERCENT, C.ADDITION_PERCENT,
]


def _names(columns: Sequence[C]) -> List[str]:
    return [c.value for c in columns]


def grand_total(locations: Iterable[LocationForecast]) -> Amounts:
    """Sum of final amounts across locations."""
    total = ZERO
    for location in locations:
        total = total + location.final
    return total


def location_summary_frame(run: ForecastRun) -> pd.DataFrame:
    """One row per location: pre-help, received help and final amounts."""
    rows = []
    for loc in run.locations:
        final = loc.final
        rows.append({
            C.YEAR.value: run.year,
            C.MONTH.value: run.month,
            C.LOCATION_ID.value: loc.location_id,
            C.LOCATION_NAME.value: loc.location_name,
            C.PRE_HELP_TREATMENT.value: loc.pre_help.treatment,
            C.PRE_HELP_RETAIL.value: loc.pre_help.retail,
            C.PRE_HELP_TOTAL.value: loc.pre_help.total,
            C.HELP_RECEIVED_TREATMENT.value: loc.help_received.treatment,
            C.HELP_RECEIVED_RETAIL.value: loc.help_received.retail,
            C.HELP_RECEIVED_TOTAL.value: loc.help_received.total,
            C.FINAL_TREATMENT.value: final.treatment,
            C.FINAL_RETAIL.value: final.retail,
            C.FINAL_TOTAL.value: final.total,
        })
    return pd.DataFrame(rows, columns=_names(LOCATION_SUMMARY_COLUMNS))


def employee_detail_frame(run: ForecastRun) -> pd.DataFrame:
    """One row per employee entry, grouped by location in forecast order."""
    rows = []
    for loc in run.locations:
        for emp in loc.employees:
            rows.append({
                C.YEAR.value: run.year,
                C.MONTH.value: run.month,
                C.LOCATION_ID.value: loc.location_id,
                C.LOCATION_NAME.value: loc.location_name,
                C.EMPLOYEE_ID.value: emp.employee_id,
                C.EMPLOYEE_NAME.value: emp.employee_name,
                C.ROLE.value: emp.role.value,
                C.RANK.value: emp.rank.value,
                C.ON_LEAVE.value: emp.on_leave,
                C.ACTIVITY_RATIO.value: emp.activity_ratio,
                C.DEDUCTION_PERCENT.value: emp.deduction_percent,
                C.BASELINE_TREATMENT.value: emp.baseline.treatment,
                C.BASELINE_RETAIL.value: emp.baseline.retail,
                C.BASELINE_TOTAL.value: emp.baseline.total,
                C.ADJUSTED_TREATMENT.value: emp.adjusted.treatment,
                C.ADJUSTED_RETAIL.value: emp.adjusted.retail,
                C.ADJUSTED_TOTAL.value: emp.adjusted.total,
            })
    return pd.DataFrame(rows, columns=_names(EMPLOYEE_DETAIL_COLUMNS))


def help_transfer_frame(
    help_records: Iterable[HelpRecord],
    employees: Iterable[Employee],
    locations: Iterable[Location],
    from_location_id: Optional[str] = None,
    to_location_id: Optional[str] = None,
) -> pd.DataFrame:
    """
    Help records with employee and location names, sorted by home location name.

    Args:
        help_records: Help records to list (usually one month's)
        employees: Employees used to resolve names
        locations: Locations used to resolve names
        from_location_id: Only keep records leaving this location
        to_location_id: Only keep records arriving at this location

    Returns:
        DataFrame with HELP_TRANSFER_COLUMNS. Names that cannot be resolved
        are shown as "unknown".
    """
    employee_names = {e.id: e.name for e in employees}
    location_names = {loc.id: loc.name for loc in locations}

    rows = []
    for record in help_records:
        if from_location_id and record.from_location_id != from_location_id:
            continue
        if to_location_id and record.to_location_id != to_location_id:
            continue
        rows.append({
            C.YEAR.value: record.year,
            C.MONTH.value: record.month,
            C.EMPLOYEE_ID.value: record.employee_id,
            C.EMPLOYEE_NAME.value: employee_names.get(record.employee_id, UNKNOWN_NAME),
            C.FROM_LOCATION_ID.value: record.from_location_id,
            C.FROM_LOCATION_NAME.value: location_names.get(record.from_location_id, UNKNOWN_NAME),
            C.TO_LOCATION_ID.value: record.to_location_id,
            C.TO_LOCATION_NAME.value: location_names.get(record.to_location_id, UNKNOWN_NAME),
            C.DEDUCTION_PERCENT.value: record.deduction_percent,
            C.ADDITION_PERCENT.value: record.addition_percent,
        })

    df = pd.DataFrame(rows, columns=_names(HELP_TRANSFER_COLUMNS))
    if not df.empty:
        df = df.sort_values(C.FROM_LOCATION_NAME.value, kind="stable").reset_index(drop=True)
    logger.debug(f"Help transfer list has {len(df)} rows")
    return df
