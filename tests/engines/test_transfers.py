from decimal import Decimal

import pytest

from salon_forecast.engines.results import ZERO, Amounts
from salon_forecast.engines.transfers import (
    DeductionOverflowError,
    DeductionOverflowPolicy,
    HelpTransferLedger,
    LedgerStateError,
    applied_deduction,
    index_help_records,
    total_deduction,
)

pytestmark = pytest.mark.engines


def test_ledger_accumulates_credits_per_location():
    ledger = HelpTransferLedger()
    ledger.credit("B", Amounts(100, 10))
    ledger.credit("C", Amounts(5, 0))
    ledger.credit("B", Amounts(50, 5))
    ledger.seal()

    assert ledger.sealed
    assert ledger.received("B") == Amounts(150, 15)
    assert ledger.received("C") == Amounts(5, 0)
    assert ledger.received("A") == ZERO
    assert ledger.receiving_locations() == ["B", "C"]


def test_ledger_cannot_be_read_while_open():
    ledger = HelpTransferLedger()
    ledger.credit("B", Amounts(1, 1))

    with pytest.raises(LedgerStateError):
        ledger.received("B")


def test_ledger_cannot_be_credited_after_sealing():
    ledger = HelpTransferLedger()
    ledger.seal()

    with pytest.raises(LedgerStateError):
        ledger.credit("B", Amounts(1, 1))


def test_index_help_records_groups_by_employee(make_help):
    records = [
        make_help("E1", to_id="B"),
        make_help("E2", from_id="B", to_id="A"),
        make_help("E1", to_id="C"),
        make_help("E1", to_id="D", month=2),
    ]
    grouped = index_help_records(records, 2026, 1)

    assert sorted(grouped) == ["E1", "E2"]
    assert [r.to_location_id for r in grouped["E1"]] == ["B", "C"]


def test_total_deduction_is_exact(make_help):
    records = [make_help(deduction=0.1), make_help(deduction=0.2)]
    assert total_deduction(records) == Decimal("0.3")
    assert total_deduction([]) == Decimal("0")


@pytest.mark.parametrize(
    "policy, expected",
    [
        (DeductionOverflowPolicy.ALLOW, Decimal("130")),
        (DeductionOverflowPolicy.CLAMP, Decimal("100")),
    ],
)
def test_applied_deduction_above_hundred(policy, expected):
    assert applied_deduction("E1", Decimal("130"), policy) == expected


def test_applied_deduction_reject():
    with pytest.raises(DeductionOverflowError, match="E1"):
        applied_deduction("E1", Decimal("100.5"), DeductionOverflowPolicy.REJECT)


def test_applied_deduction_within_limit_is_unchanged():
    for policy in DeductionOverflowPolicy:
        assert applied_deduction("E1", Decimal("100"), policy) == Decimal("100")


def test_overflow_policy_from_string():
    assert DeductionOverflowPolicy("clamp") is DeductionOverflowPolicy.CLAMP
