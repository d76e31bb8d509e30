"""
Column definitions for the record files read by ``salon_forecast.data`` and
the frames produced by ``salon_forecast.reporting``.

Example Usage:
    >>> from salon_forecast.schema import HelpColumns
    >>> HelpColumns.DEDUCTION_PERCENT.value
    'deduction_percent'
"""

from .columns import (
    REQUIRED_COLUMNS,
    AttendanceColumns,
    EmployeeColumns,
    HelpColumns,
    LeaveColumns,
    LocationColumns,
    ReportColumns,
    StandardColumns,
    required_columns,
)

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
