import pytest

from salon_forecast.models import (
    BaselineRevenueStandard,
    Employee,
    HelpRecord,
    Location,
    Rank,
    Role,
)
from salon_forecast.seasons import SeasonCategory

YEAR = 2026
# January is a normal-season month
MONTH = 1


# Define pytest markers for test categories
def pytest_configure(config):
    """
    Register custom markers to avoid pytest warnings.
    """
    config.addinivalue_line("markers", "unit: mark a test as a unit test")
    config.addinivalue_line("markers", "integration: mark a test as an integration test")
    config.addinivalue_line("markers", "engines: mark a test as an engines test")
    config.addinivalue_line("markers", "config: mark a test as a config test")
    config.addinivalue_line("markers", "data: mark a test as a data reading/writing test")
    config.addinivalue_line("markers", "reporting: mark a test as a reporting test")


def _make_help(employee_id="E1", from_id="A", to_id="B", deduction=10.0, addition=10.0,
               year=YEAR, month=MONTH):
    return HelpRecord(
        employee_id=employee_id,
        year=year,
        month=month,
        from_location_id=from_id,
        to_location_id=to_id,
        deduction_percent=deduction,
        addition_percent=addition,
    )


@pytest.fixture
def make_help():
    """Factory for help records in the default period."""
    return _make_help


@pytest.fixture
def locations():
    return [Location("A", "Aoyama"), Location("B", "Shibuya")]


@pytest.fixture
def e1():
    return Employee("E1", "Emi", "A", Role.EYELIST, Rank.J1)


@pytest.fixture
def standards():
    return [
        BaselineRevenueStandard(Role.EYELIST, Rank.J1, SeasonCategory.NORMAL, 500_000, 30_000),
        BaselineRevenueStandard(Role.NAILIST, Rank.S2, SeasonCategory.NORMAL, 400_000, 20_000),
    ]
