"""
Report frames built from forecast results.
"""

from .summary import (
    employee_detail_frame,
    grand_total,
    help_transfer_frame,
    location_summary_frame,
)

__all__ = [
    "employee_detail_frame",
    "grand_total",
    "help_transfer_frame",
    "location_summary_frame",
]
