# salon_forecast/config/models.py
"""
Pydantic models for validating forecast settings loaded from YAML files
(e.g., settings.yaml).
"""

import logging
from typing import List, Literal

from pydantic import BaseModel, Field, model_validator

from salon_forecast.engines.activity import (
    DEFAULT_STANDARD_WORKING_DAYS,
    ActivityPolicy,
    build_activity_policy,
)
from salon_forecast.engines.transfers import DeductionOverflowPolicy
from salon_forecast.models import BaselineRevenueStandard, Rank, Role
from salon_forecast.seasons import SeasonCategory

logger = logging.getLogger(__name__)

ActivityPolicyName = Literal["binary_leave", "leave_ratio", "working_days"]


class StandardEntry(BaseModel):
    """One baseline revenue standard given inline in the settings file."""

    role: Role
    rank: Rank
    season: SeasonCategory
    treatment: int = Field(..., ge=0, description="Monthly treatment revenue baseline")
    retail: int = Field(..., ge=0, description="Monthly retail revenue baseline")

    def to_record(self) -> BaselineRevenueStandard:
        return BaselineRevenueStandard(
            role=self.role,
            rank=self.rank,
            season=self.season,
            treatment=self.treatment,
            retail=self.retail,
        )


class ForecastSettings(BaseModel):
    activity_policy: ActivityPolicyName = Field(
        "binary_leave", description="How leave/attendance scales baseline revenue"
    )
    standard_working_days: float = Field(
        DEFAULT_STANDARD_WORKING_DAYS,
        ge=1,
        description="Days in a fully worked month (working_days policy only)",
    )
    promo_period: bool = Field(
        False, description="Double retail baselines for a promotional month"
    )
    deduction_overflow: DeductionOverflowPolicy = Field(
        DeductionOverflowPolicy.ALLOW,
        description="Handling of help deductions that add up to more than 100%",
    )
    standards: List[StandardEntry] = Field(
        default_factory=list,
        description="Inline baseline standards, used when no standards file is supplied",
    )

    @model_validator(mode="after")
    def check_promo_period_policy(self) -> "ForecastSettings":
        """Retail doubling and fractional leave ratios are alternative configurations."""
        if self.promo_period and self.activity_policy == "leave_ratio":
            raise ValueError(
                "promo_period cannot be enabled together with the leave_ratio activity policy"
            )
        return self

    @model_validator(mode="after")
    def check_unique_standards(self) -> "ForecastSettings":
        seen = set()
        for entry in self.standards:
            key = (entry.role, entry.rank, entry.season)
            if key in seen:
                raise ValueError(
                    f"Duplicate standard for {entry.role.value}/{entry.rank.value}/{entry.season.value}"
                )
            seen.add(key)
        return self

    def build_activity_policy(self) -> ActivityPolicy:
        if self.activity_policy == "working_days":
            return build_activity_policy(
                self.activity_policy, standard_working_days=self.standard_working_days
            )
        return build_activity_policy(self.activity_policy)

    def baseline_standards(self) -> List[BaselineRevenueStandard]:
        return [entry.to_record() for entry in self.standards]
