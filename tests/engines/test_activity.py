from decimal import Decimal

import pytest

from salon_forecast.engines.activity import (
    FULL_ACTIVITY,
    ZERO_RATIO,
    BinaryLeavePolicy,
    LeaveRatioPolicy,
    WorkingDaysPolicy,
    build_activity_policy,
)
from salon_forecast.models import AttendanceRecord, LeaveRecord

pytestmark = pytest.mark.engines


def test_no_record_means_fully_active():
    for policy in (BinaryLeavePolicy(), LeaveRatioPolicy(), WorkingDaysPolicy()):
        assert policy.activity_ratio(None) == FULL_ACTIVITY


def test_binary_policy_ignores_ratio_field():
    record = LeaveRecord("E1", 2026, 1, activity_ratio=0.8)
    assert BinaryLeavePolicy().activity_ratio(record) == ZERO_RATIO


def test_leave_ratio_policy_reads_ratio():
    record = LeaveRecord("E1", 2026, 1, activity_ratio=0.25)
    assert LeaveRatioPolicy().activity_ratio(record) == Decimal("0.25")


@pytest.mark.parametrize("raw, expected", [(-0.5, Decimal("0")), (1.5, Decimal("1"))])
def test_out_of_range_ratio_is_clamped(raw, expected, caplog):
    record = LeaveRecord("E1", 2026, 1, activity_ratio=raw)
    assert LeaveRatioPolicy().activity_ratio(record) == expected
    assert "clamping" in caplog.text


def test_working_days_ratio():
    policy = WorkingDaysPolicy(20)
    record = AttendanceRecord("E1", 2026, 1, working_days=15)
    assert policy.activity_ratio(record) == Decimal("0.75")


def test_working_days_above_standard_is_capped():
    record = AttendanceRecord("E1", 2026, 1, working_days=25)
    assert WorkingDaysPolicy(22).activity_ratio(record) == FULL_ACTIVITY


@pytest.mark.parametrize("days", [0, -3])
def test_working_days_requires_positive_standard(days):
    with pytest.raises(ValueError):
        WorkingDaysPolicy(days)


def test_index_records_filters_period_and_keeps_first():
    records = [
        LeaveRecord("E1", 2026, 1, activity_ratio=0.3),
        LeaveRecord("E1", 2026, 1, activity_ratio=0.9),
        LeaveRecord("E2", 2026, 2, activity_ratio=0.5),
    ]
    indexed = LeaveRatioPolicy().index_records(records, 2026, 1)

    assert list(indexed) == ["E1"]
    assert indexed["E1"].activity_ratio == 0.3


def test_only_leave_ratio_rejects_promo_period():
    assert BinaryLeavePolicy.supports_promo_period
    assert WorkingDaysPolicy.supports_promo_period
    assert not LeaveRatioPolicy.supports_promo_period


def test_build_activity_policy():
    assert isinstance(build_activity_policy("binary_leave"), BinaryLeavePolicy)
    assert isinstance(build_activity_policy("leave_ratio"), LeaveRatioPolicy)

    policy = build_activity_policy("working_days", standard_working_days=20)
    assert isinstance(policy, WorkingDaysPolicy)
    assert policy.standard_working_days == 20
    assert repr(policy) == "WorkingDaysPolicy(standard_working_days=20)"


def test_build_unknown_policy():
    with pytest.raises(ValueError, match="Unknown activity policy"):
        build_activity_policy("part_time")
