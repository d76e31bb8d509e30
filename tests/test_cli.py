import logging
import textwrap

import pandas as pd
import pytest

from logging_config import DEBUG_LOGGER, reset_logging
from salon_forecast.cli import main, parse_arguments
from salon_forecast.config.loaders import SETTINGS_ENV_VAR

pytestmark = pytest.mark.integration


@pytest.fixture(autouse=True)
def clean_logging(monkeypatch):
    monkeypatch.delenv(SETTINGS_ENV_VAR, raising=False)
    reset_logging()
    yield
    reset_logging()


def write_csv(path, text):
    path.write_text(textwrap.dedent(text).lstrip(), encoding="utf-8")


@pytest.fixture
def data_dir(tmp_path):
    data = tmp_path / "data"
    data.mkdir()
    write_csv(data / "locations.csv", """
        id,name
        A,Aoyama
        B,Shibuya
    """)
    write_csv(data / "employees.csv", """
        id,name,location_id,role,rank
        E1,Emi,A,eyelist,J-1
        E2,Nao,B,nailist,S-2
    """)
    write_csv(data / "standards.csv", """
        role,rank,season,treatment,retail
        eyelist,J-1,normal,500000,30000
    """)
    write_csv(data / "help_records.csv", """
        employee_id,year,month,from_location_id,to_location_id,deduction_percent,addition_percent
        E1,2026,1,A,B,10,10
    """)
    return data


def base_args(data_dir, tmp_path, *extra):
    return [
        "--data-dir", str(data_dir),
        "--year", "2026",
        "--month", "1",
        "--log-dir", str(tmp_path / "logs"),
        *extra,
    ]


def test_parse_arguments_defaults():
    args = parse_arguments(["--data-dir", "d", "--year", "2026", "--month", "7"])
    assert args.month == 7
    assert args.format == "csv"
    assert args.output_dir is None
    assert not args.promo


def test_parse_arguments_rejects_bad_month():
    with pytest.raises(SystemExit):
        parse_arguments(["--data-dir", "d", "--year", "2026", "--month", "13"])


def test_main_prints_summary(data_dir, tmp_path, capsys):
    assert main(base_args(data_dir, tmp_path)) == 0

    out = capsys.readouterr().out
    assert "Forecast 2026-01 (Normal)" in out
    assert "Aoyama: 477,000" in out
    assert "Shibuya: 53,000" in out
    assert "Total: 530,000" in out
    # E2 has no standard for the normal season
    assert "Skipped (no baseline standard): 1" in out
    assert (tmp_path / "logs" / "combined.log").exists()


def test_main_debug_writes_debug_log(data_dir, tmp_path):
    assert main(base_args(data_dir, tmp_path, "--debug")) == 0
    for handler in logging.getLogger(DEBUG_LOGGER).handlers:
        handler.flush()

    detail = (tmp_path / "logs" / "debug_detail.log").read_text(encoding="utf-8")
    assert "Debug logging enabled" in detail
    assert "Employee E1: ratio=1" in detail


def test_main_writes_reports(data_dir, tmp_path):
    out_dir = tmp_path / "out"
    assert main(base_args(data_dir, tmp_path, "--output-dir", str(out_dir))) == 0

    summary = pd.read_csv(out_dir / "forecast_2026_01_locations.csv")
    assert summary["final_total"].tolist() == [477_000, 53_000]
    assert (out_dir / "forecast_2026_01_employees.csv").exists()
    transfers = pd.read_csv(out_dir / "forecast_2026_01_help_transfers.csv")
    assert transfers["to_location_name"].tolist() == ["Shibuya"]


def test_main_promo_flag(data_dir, tmp_path, capsys):
    assert main(base_args(data_dir, tmp_path, "--promo")) == 0
    # retail doubled: A = 450000 + 54000, B = 50000 + 6000
    assert "Aoyama: 504,000" in capsys.readouterr().out


def test_main_uses_inline_standards(data_dir, tmp_path, capsys):
    (data_dir / "standards.csv").unlink()
    config = tmp_path / "settings.yaml"
    config.write_text(
        textwrap.dedent("""
            standards:
              - {role: eyelist, rank: J-1, season: normal, treatment: 100000, retail: 0}
        """),
        encoding="utf-8",
    )

    assert main(base_args(data_dir, tmp_path, "--config", str(config))) == 0
    assert "Aoyama: 90,000" in capsys.readouterr().out


def test_main_promo_with_leave_ratio_fails(data_dir, tmp_path):
    config = tmp_path / "settings.yaml"
    config.write_text("activity_policy: leave_ratio\n", encoding="utf-8")

    assert main(base_args(data_dir, tmp_path, "--config", str(config), "--promo")) == 1


def test_main_reject_overflow_fails(data_dir, tmp_path):
    write_csv(data_dir / "help_records.csv", """
        employee_id,year,month,from_location_id,to_location_id,deduction_percent,addition_percent
        E1,2026,1,A,B,70,10
        E1,2026,1,A,B,40,10
    """)
    config = tmp_path / "settings.yaml"
    config.write_text("deduction_overflow: reject\n", encoding="utf-8")

    assert main(base_args(data_dir, tmp_path, "--config", str(config))) == 1


def test_main_missing_data_dir(tmp_path):
    assert main(base_args(tmp_path / "missing", tmp_path)) == 1


def test_main_missing_config(data_dir, tmp_path):
    assert main(base_args(data_dir, tmp_path, "--config", str(tmp_path / "nope.yaml"))) == 1
