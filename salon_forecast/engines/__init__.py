"""
Forecast engines: activity policies, help transfer accounting and the
two-phase monthly forecast.
"""

from .activity import (
    ActivityPolicy,
    BinaryLeavePolicy,
    LeaveRatioPolicy,
    WorkingDaysPolicy,
    build_activity_policy,
)
from .forecast import ForecastConfigError, compute_forecast, index_standards, run_forecast
from .results import (
    Amounts,
    EmployeeForecast,
    ForecastDiagnostics,
    ForecastRun,
    LocationForecast,
)
from .transfers import (
    DeductionOverflowError,
    DeductionOverflowPolicy,
    HelpTransferLedger,
    LedgerStateError,
)

__all__ = [
    "ActivityPolicy",
    "BinaryLeavePolicy",
    "LeaveRatioPolicy",
    "WorkingDaysPolicy",
    "build_activity_policy",
    "ForecastConfigError",
    "compute_forecast",
    "run_forecast",
    "index_standards",
    "Amounts",
    "EmployeeForecast",
    "ForecastDiagnostics",
    "ForecastRun",
    "LocationForecast",
    "DeductionOverflowError",
    "DeductionOverflowPolicy",
    "HelpTransferLedger",
    "LedgerStateError",
]
