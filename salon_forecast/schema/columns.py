"""
Centralized column definitions for the record files and report frames.

Input tables use the record field names as their column names, so a row
maps directly onto the matching dataclass in ``salon_forecast.models``.
"""

from enum import Enum
from typing import Dict, List, Type


class LocationColumns(str, Enum):
    ID = "id"
    NAME = "name"


class EmployeeColumns(str, Enum):
    ID = "id"
    NAME = "name"
    LOCATION_ID = "location_id"
    ROLE = "role"
    RANK = "rank"


class StandardColumns(str, Enum):
    ROLE = "role"
    RANK = "rank"
    SEASON = "season"
    TREATMENT = "treatment"
    RETAIL = "retail"


class HelpColumns(str, Enum):
    EMPLOYEE_ID = "employee_id"
    YEAR = "year"
    MONTH = "month"
    FROM_LOCATION_ID = "from_location_id"
    TO_LOCATION_ID = "to_location_id"
    DEDUCTION_PERCENT = "deduction_percent"
    ADDITION_PERCENT = "addition_percent"


class LeaveColumns(str, Enum):
    EMPLOYEE_ID = "employee_id"
    YEAR = "year"
    MONTH = "month"
    ACTIVITY_RATIO = "activity_ratio"


class AttendanceColumns(str, Enum):
    EMPLOYEE_ID = "employee_id"
    YEAR = "year"
    MONTH = "month"
    WORKING_DAYS = "working_days"


class ReportColumns(str, Enum):
    """Columns of the report frames built by ``salon_forecast.reporting``."""

    YEAR = "year"
    MONTH = "month"
    LOCATION_ID = "location_id"
    LOCATION_NAME = "location_name"
    EMPLOYEE_ID = "employee_id"
    EMPLOYEE_NAME = "employee_name"
    ROLE = "role"
    RANK = "rank"
    ON_LEAVE = "on_leave"
    ACTIVITY_RATIO = "activity_ratio"
    DEDUCTION_PERCENT = "deduction_percent"
    ADDITION_PERCENT = "addition_percent"
    BASELINE_TREATMENT = "baseline_treatment"
    BASELINE_RETAIL = "baseline_retail"
    BASELINE_TOTAL = "baseline_total"
    ADJUSTED_TREATMENT = "adjusted_treatment"
    ADJUSTED_RETAIL = "adjusted_retail"
    ADJUSTED_TOTAL = "adjusted_total"
    PRE_HELP_TREATMENT = "pre_help_treatment"
    PRE_HELP_RETAIL = "pre_help_retail"
    PRE_HELP_TOTAL = "pre_help_total"
    HELP_RECEIVED_TREATMENT = "help_received_treatment"
    HELP_RECEIVED_RETAIL = "help_received_retail"
    HELP_RECEIVED_TOTAL = "help_received_total"
    FINAL_TREATMENT = "final_treatment"
    FINAL_RETAIL = "final_retail"
    FINAL_TOTAL = "final_total"
    FROM_LOCATION_ID = "from_location_id"
    FROM_LOCATION_NAME = "from_location_name"
    TO_LOCATION_ID = "to_location_id"
    TO_LOCATION_NAME = "to_location_name"


# Columns that must be present in each input table; the rest are optional
REQUIRED_COLUMNS: Dict[Type[Enum], List[str]] = {
    LocationColumns: [c.value for c in LocationColumns],
    EmployeeColumns: [c.value for c in EmployeeColumns],
    StandardColumns: [c.value for c in StandardColumns],
    HelpColumns: [c.value for c in HelpColumns],
    LeaveColumns: [
        LeaveColumns.EMPLOYEE_ID.value,
        LeaveColumns.YEAR.value,
        LeaveColumns.MONTH.value,
    ],
    AttendanceColumns: [c.value for c in AttendanceColumns],
}


def required_columns(table: Type[Enum]) -> List[str]:
    return list(REQUIRED_COLUMNS[table])


__all__ = [
    "LocationColumns",
    "EmployeeColumns",
    "StandardColumns",
    "HelpColumns",
    "LeaveColumns",
    "AttendanceColumns",
    "ReportColumns",
    "REQUIRED_COLUMNS",
    "required_columns",
]
