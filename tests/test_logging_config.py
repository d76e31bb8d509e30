import logging

import pytest

import logging_config
from logging_config import DEBUG_LOGGER, FORECAST_LOGGER, reset_logging, setup_logging
from salon_forecast.engines.forecast import run_forecast

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def clean_logging():
    reset_logging()
    yield
    reset_logging()


def _flush():
    for name in (None, FORECAST_LOGGER):
        for handler in logging.getLogger(name).handlers:
            handler.flush()


def test_setup_creates_log_files(tmp_path):
    setup_logging(tmp_path)

    logging.getLogger("salon_forecast.engines.forecast").info("forecast event")
    logging.getLogger("other").warning("something odd")
    _flush()

    events = (tmp_path / "forecast_events.log").read_text(encoding="utf-8")
    combined = (tmp_path / "combined.log").read_text(encoding="utf-8")
    warnings = (tmp_path / "warnings_errors.log").read_text(encoding="utf-8")

    assert "forecast event" in events
    assert "something odd" not in events
    assert "forecast event" in combined and "something odd" in combined
    assert "something odd" in warnings and "forecast event" not in warnings
    assert not (tmp_path / "debug_detail.log").exists()


def test_debug_adds_debug_log(tmp_path):
    setup_logging(tmp_path, debug=True)

    assert (tmp_path / "debug_detail.log").exists()
    assert logging.getLogger().level == logging.DEBUG


def test_engine_trace_lands_in_debug_log(tmp_path, locations, e1, standards, make_help):
    setup_logging(tmp_path, debug=True)
    run_forecast(locations, [e1], standards, [make_help()], [], 2026, 1)
    for handler in logging.getLogger(DEBUG_LOGGER).handlers:
        handler.flush()

    detail = (tmp_path / "debug_detail.log").read_text(encoding="utf-8")
    assert "Employee E1: ratio=1" in detail
    assert "adjusted=Amounts(treatment=450000, retail=27000)" in detail


def test_engine_trace_dropped_without_debug(tmp_path, locations, e1, standards):
    setup_logging(tmp_path)
    run_forecast(locations, [e1], standards, [], [], 2026, 1)
    _flush()

    assert "Employee E1: ratio" not in (tmp_path / "combined.log").read_text(encoding="utf-8")


def test_setup_is_idempotent(tmp_path):
    setup_logging(tmp_path)
    handler_count = len(logging.getLogger().handlers)

    setup_logging(tmp_path / "elsewhere")
    assert len(logging.getLogger().handlers) == handler_count
    assert not (tmp_path / "elsewhere").exists()


def test_clear_existing_removes_old_logs(tmp_path):
    stale = tmp_path / "combined.log"
    stale.write_text("old run\n", encoding="utf-8")

    setup_logging(tmp_path, clear_existing=True)
    _flush()
    assert "old run" not in stale.read_text(encoding="utf-8")


def test_reset_allows_reconfiguration(tmp_path):
    setup_logging(tmp_path / "first")
    reset_logging()

    assert logging_config._LOGGING_CONFIGURED is False
    setup_logging(tmp_path / "second")
    assert (tmp_path / "second" / "combined.log").exists()
