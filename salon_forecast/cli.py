# salon_forecast/cli.py
# Command-line interface entry point (argparse)
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import pandas as pd
from pydantic import ValidationError

from logging_config import DEBUG_LOGGER, DEFAULT_LOG_DIR, setup_logging
from salon_forecast.config.loaders import ConfigLoadError, load_settings
from salon_forecast.config.models import ForecastSettings
from salon_forecast.data.readers import DataReadError, load_forecast_inputs
from salon_forecast.data.writers import SUPPORTED_FORMATS, DataWriteError, write_reports
from salon_forecast.engines.forecast import ForecastConfigError, run_forecast
from salon_forecast.engines.results import ForecastRun
from salon_forecast.engines.transfers import DeductionOverflowError
from salon_forecast.reporting.summary import grand_total, help_transfer_frame
from salon_forecast.seasons import season_label

# Get logger for this module
logger = logging.getLogger(__name__)


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Forecast monthly salon revenue per location.")

    # Required arguments
    parser.add_argument(
        "--data-dir",
        type=str,
        required=True,
        help="Directory holding locations, employees, standards and help_records tables.",
    )
    parser.add_argument("--year", type=int, required=True, help="Target year.")
    parser.add_argument(
        "--month",
        type=int,
        required=True,
        choices=range(1, 13),
        metavar="MONTH",
        help="Target month (1-12).",
    )

    # Optional arguments
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a YAML settings file (default: $SALON_FORECAST_CONFIG or built-in defaults).",
    )
    parser.add_argument(
        "--promo",
        action="store_true",
        help="Treat the month as a promotional period (retail baselines doubled).",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Directory to write report files to. Nothing is written if omitted.",
    )
    parser.add_argument(
        "--format",
        choices=SUPPORTED_FORMATS,
        default="csv",
        help="Report file format (default: csv).",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--log-dir",
        type=str,
        default=str(DEFAULT_LOG_DIR),
        help=f"Directory to store log files (default: {DEFAULT_LOG_DIR})",
    )

    return parser.parse_args(argv)


def initialize_logging(debug: bool = False, log_dir: Path = DEFAULT_LOG_DIR) -> None:
    """Initialize the logging configuration.

    Args:
        debug: Whether to enable debug logging
        log_dir: Directory to store log files
    """
    setup_logging(log_dir=log_dir, debug=debug)
    logger.info("Starting salon revenue forecast")
    logger.info(f"Command line arguments: {sys.argv}")
    logger.info(f"Pandas version: {pd.__version__}")
    logging.getLogger(DEBUG_LOGGER).debug("Debug logging enabled")


def _print_summary(run: ForecastRun) -> None:
    print(f"Forecast {run.year}-{run.month:02d} ({season_label(run.month)})")
    for loc in run.locations:
        print(
            f"  {loc.location_name}: {loc.final.total:,} "
            f"(own {loc.pre_help.total:,}, help received {loc.help_received.total:,})"
        )
    print(f"  Total: {grand_total(run.locations).total:,}")
    if run.diagnostics.skipped_count:
        print(f"  Skipped (no baseline standard): {run.diagnostics.skipped_count}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the forecast CLI. Returns the process exit code."""
    args = parse_arguments(argv)
    initialize_logging(debug=args.debug, log_dir=Path(args.log_dir))

    try:
        settings = load_settings(args.config)
        if args.promo:
            settings = ForecastSettings.model_validate(
                {**settings.model_dump(), "promo_period": True}
            )

        inputs = load_forecast_inputs(
            args.data_dir, args.year, args.month, require_standards=not settings.standards
        )
        standards = inputs.standards or settings.baseline_standards()
        policy = settings.build_activity_policy()
        activity_records = (
            inputs.attendance_records if policy.name == "working_days" else inputs.leave_records
        )

        run = run_forecast(
            inputs.locations,
            inputs.employees,
            standards,
            inputs.help_records,
            activity_records,
            args.year,
            args.month,
            promo_period=settings.promo_period,
            activity_policy=policy,
            deduction_overflow=settings.deduction_overflow,
        )

        if args.output_dir:
            help_df = help_transfer_frame(inputs.help_records, inputs.employees, inputs.locations)
            written = write_reports(
                run, args.output_dir, fmt=args.format, extra_frames={"help_transfers": help_df}
            )
            for name, path in written.items():
                logger.info(f"Report '{name}' written to {path}")
    except (ConfigLoadError, ValidationError, ForecastConfigError) as e:
        logger.error(f"Configuration error: {e}")
        return 1
    except (DataReadError, DataWriteError) as e:
        logger.error(f"Data error: {e}")
        return 1
    except DeductionOverflowError as e:
        logger.error(f"Forecast rejected: {e}")
        return 1

    _print_summary(run)
    return 0


if __name__ == "__main__":
    sys.exit(main())
