"""
Monthly revenue forecasting for a multi-location salon chain.

Quick start::

    from salon_forecast import compute_forecast
    results = compute_forecast(locations, employees, standards,
                               help_records, leave_records, year=2026, month=7)
"""

from salon_forecast.engines.forecast import compute_forecast, run_forecast
from salon_forecast.models import (
    AttendanceRecord,
    BaselineRevenueStandard,
    Employee,
    HelpRecord,
    LeaveRecord,
    Location,
    Rank,
    Role,
)
from salon_forecast.seasons import SeasonCategory, classify

__version__ = "0.1.0"

__all__ = [
    "compute_forecast",
    "run_forecast",
    "classify",
    "SeasonCategory",
    "Role",
    "Rank",
    "Location",
    "Employee",
    "BaselineRevenueStandard",
    "LeaveRecord",
    "AttendanceRecord",
    "HelpRecord",
]
