# salon_forecast/data/writers.py
"""
Functions for writing forecast reports (location summary, employee detail).
"""

import logging
from pathlib import Path
from typing import Dict, Optional, Union

import pandas as pd

from salon_forecast.engines.results import ForecastRun
from salon_forecast.reporting.summary import employee_detail_frame, location_summary_frame

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("csv", "parquet")


class DataWriteError(Exception):
    """Custom exception for errors during data writing."""

    pass


def write_frame(df: pd.DataFrame, out_path: Path, fmt: str) -> Path:
    """Write ``df`` as CSV or Parquet.

    Raises:
        DataWriteError: If the format is unsupported or writing fails.
    """
    if fmt not in SUPPORTED_FORMATS:
        raise DataWriteError(f"Unsupported output format: {fmt}")
    try:
        if fmt == "parquet":
            df.to_parquet(out_path, index=False)
        else:
            df.to_csv(out_path, index=False)
    except Exception as e:
        logger.exception(f"Failed to write {out_path}")
        raise DataWriteError(f"Failed to write {out_path}") from e
    logger.info(f"Wrote {len(df)} rows to {out_path}")
    return out_path


def write_reports(
    run: ForecastRun,
    output_dir: Union[str, Path],
    file_prefix: str = "forecast",
    fmt: str = "csv",
    extra_frames: Optional[Dict[str, pd.DataFrame]] = None,
) -> Dict[str, Path]:
    """
    Writes the location summary and employee detail of a forecast run.

    Files are named ``<prefix>_<YYYY>_<MM>_locations.<fmt>`` and
    ``<prefix>_<YYYY>_<MM>_employees.<fmt>``.

    Args:
        run: Forecast to write.
        output_dir: Directory for the files (created if missing).
        file_prefix: Prefix for the output filenames.
        fmt: "csv" or "parquet".
        extra_frames: Further frames to write under the same naming scheme,
            keyed by report name (e.g. "help_transfers").

    Returns:
        Mapping of report name ("locations", "employees" and any extra frame
        names) to written path.

    Raises:
        DataWriteError: If writing fails.
    """
    output_dir = Path(output_dir)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DataWriteError(f"Could not create output directory {output_dir}") from e

    stem = f"{file_prefix}_{run.year:04d}_{run.month:02d}"
    frames = {
        "locations": location_summary_frame(run),
        "employees": employee_detail_frame(run),
    }
    if extra_frames:
        frames.update(extra_frames)
    written: Dict[str, Path] = {}
    for name, df in frames.items():
        written[name] = write_frame(df, output_dir / f"{stem}_{name}.{fmt}", fmt)
    return written
