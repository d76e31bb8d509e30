# salon_forecast/data/readers.py
"""
Functions for reading record files (locations, employees, standards, help,
leave and attendance) into the in-memory records the engine consumes.

Each table is a CSV or Parquet file named after the table, e.g.
``employees.csv`` or ``employees.parquet``, inside one data directory.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar, Union

import pandas as pd

from salon_forecast.models import (
    AttendanceRecord,
    BaselineRevenueStandard,
    Employee,
    HelpRecord,
    LeaveRecord,
    Location,
)
from salon_forecast.schema.columns import (
    AttendanceColumns,
    EmployeeColumns,
    HelpColumns,
    LeaveColumns,
    LocationColumns,
    StandardColumns,
    required_columns,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

SUPPORTED_SUFFIXES = (".csv", ".parquet")

# Identifier columns are read as text so "001" stays "001"
ID_COLUMNS = (
    "id",
    "location_id",
    "employee_id",
    "from_location_id",
    "to_location_id",
)


class DataReadError(Exception):
    """Custom exception for errors during data reading."""

    pass


def read_table(file_path: Union[str, Path], table: Type[Enum]) -> pd.DataFrame:
    """
    Reads one record table from a CSV or Parquet file.

    Args:
        file_path: Path to the file.
        table: Column enum of the table, used to check required columns.

    Returns:
        DataFrame with identifier columns as strings. May be empty.

    Raises:
        DataReadError: If the file is missing, unreadable, of an unsupported
            type or lacks required columns.
    """
    if not isinstance(file_path, Path):
        file_path = Path(file_path)

    logger.debug(f"Attempting to read {table.__name__} from: {file_path}")

    if not file_path.exists():
        logger.error(f"Data file not found: {file_path}")
        raise DataReadError(f"Data file not found: {file_path}")

    suffix = file_path.suffix.lower()
    try:
        if suffix == ".csv":
            header = pd.read_csv(file_path, nrows=0).columns.tolist()
            dtypes = {col: str for col in ID_COLUMNS if col in header}
            df = pd.read_csv(file_path, dtype=dtypes)
        elif suffix == ".parquet":
            df = pd.read_parquet(file_path)
        else:
            logger.error(f"Unsupported data file format: {file_path}. Please use .csv or .parquet.")
            raise DataReadError(f"Unsupported data file format: {file_path.suffix}")
    except DataReadError:
        raise
    except Exception as e:
        logger.error(f"Error reading data file {file_path}: {e}")
        raise DataReadError(f"Error reading data file {file_path}") from e

    missing = [col for col in required_columns(table) if col not in df.columns]
    if missing:
        logger.error(f"{file_path} is missing required columns: {missing}")
        raise DataReadError(f"{file_path} is missing required columns: {missing}")

    for col in ID_COLUMNS:
        if col in df.columns:
            df[col] = df[col].astype(str)

    logger.info(f"Loaded {len(df)} rows from {file_path}")
    return df


def filter_period(df: pd.DataFrame, year: Optional[int], month: Optional[int]) -> pd.DataFrame:
    """Keep only rows of the given year/month (no filtering when both are None)."""
    if year is not None:
        df = df[df["year"] == year]
    if month is not None:
        df = df[df["month"] == month]
    return df


def _build_records(
    df: pd.DataFrame, file_label: str, build: Callable[[Dict[str, Any]], T]
) -> List[T]:
    records: List[T] = []
    for position, row in enumerate(df.to_dict("records")):
        try:
            records.append(build(row))
        except (TypeError, ValueError) as e:
            raise DataReadError(f"Invalid row {position} in {file_label}: {e}") from e
    return records


def read_locations(file_path: Union[str, Path]) -> List[Location]:
    df = read_table(file_path, LocationColumns)
    return _build_records(
        df,
        str(file_path),
        lambda row: Location(id=row["id"], name=str(row["name"])),
    )


def read_employees(file_path: Union[str, Path]) -> List[Employee]:
    df = read_table(file_path, EmployeeColumns)
    return _build_records(
        df,
        str(file_path),
        lambda row: Employee(
            id=row["id"],
            name=str(row["name"]),
            location_id=row["location_id"],
            role=row["role"],
            rank=row["rank"],
        ),
    )


def read_standards(file_path: Union[str, Path]) -> List[BaselineRevenueStandard]:
    df = read_table(file_path, StandardColumns)
    return _build_records(
        df,
        str(file_path),
        lambda row: BaselineRevenueStandard(
            role=row["role"],
            rank=row["rank"],
            season=row["season"],
            treatment=int(row["treatment"]),
            retail=int(row["retail"]),
        ),
    )


def read_help_records(
    file_path: Union[str, Path], year: Optional[int] = None, month: Optional[int] = None
) -> List[HelpRecord]:
    df = filter_period(read_table(file_path, HelpColumns), year, month)
    return _build_records(
        df,
        str(file_path),
        lambda row: HelpRecord(
            employee_id=row["employee_id"],
            year=int(row["year"]),
            month=int(row["month"]),
            from_location_id=row["from_location_id"],
            to_location_id=row["to_location_id"],
            deduction_percent=float(row["deduction_percent"]),
            addition_percent=float(row["addition_percent"]),
        ),
    )


def _leave_record(row: Dict[str, Any]) -> LeaveRecord:
    ratio = row.get(LeaveColumns.ACTIVITY_RATIO.value)
    return LeaveRecord(
        employee_id=row["employee_id"],
        year=int(row["year"]),
        month=int(row["month"]),
        # A bare leave row means full leave
        activity_ratio=0.0 if ratio is None or pd.isna(ratio) else float(ratio),
    )


def read_leave_records(
    file_path: Union[str, Path], year: Optional[int] = None, month: Optional[int] = None
) -> List[LeaveRecord]:
    df = filter_period(read_table(file_path, LeaveColumns), year, month)
    return _build_records(df, str(file_path), _leave_record)


def read_attendance_records(
    file_path: Union[str, Path], year: Optional[int] = None, month: Optional[int] = None
) -> List[AttendanceRecord]:
    df = filter_period(read_table(file_path, AttendanceColumns), year, month)
    return _build_records(
        df,
        str(file_path),
        lambda row: AttendanceRecord(
            employee_id=row["employee_id"],
            year=int(row["year"]),
            month=int(row["month"]),
            working_days=float(row["working_days"]),
        ),
    )


def find_table(data_dir: Path, stem: str) -> Optional[Path]:
    """Return ``<data_dir>/<stem>.csv`` or ``.parquet``, whichever exists first."""
    for suffix in SUPPORTED_SUFFIXES:
        candidate = data_dir / f"{stem}{suffix}"
        if candidate.exists():
            return candidate
    return None


@dataclass
class ForecastInputs:
    """Everything the engine needs for one month, read from a data directory."""

    locations: List[Location]
    employees: List[Employee]
    standards: List[BaselineRevenueStandard]
    help_records: List[HelpRecord]
    leave_records: List[LeaveRecord] = field(default_factory=list)
    attendance_records: List[AttendanceRecord] = field(default_factory=list)


def load_forecast_inputs(
    data_dir: Union[str, Path], year: int, month: int, require_standards: bool = True
) -> ForecastInputs:
    """
    Read all record tables for one month from ``data_dir``.

    locations, employees and help_records are required; standards are
    required unless ``require_standards`` is False (settings may carry them
    inline); leave_records and attendance are optional.

    Raises:
        DataReadError: If a required table is missing or any table is invalid.
    """
    data_dir = Path(data_dir)
    if not data_dir.is_dir():
        raise DataReadError(f"Data directory not found: {data_dir}")

    def required(stem: str) -> Path:
        path = find_table(data_dir, stem)
        if path is None:
            raise DataReadError(f"Required table '{stem}' not found in {data_dir}")
        return path

    standards_path = find_table(data_dir, "standards")
    if standards_path is None and require_standards:
        raise DataReadError(f"Required table 'standards' not found in {data_dir}")

    leave_path = find_table(data_dir, "leave_records")
    attendance_path = find_table(data_dir, "attendance")

    inputs = ForecastInputs(
        locations=read_locations(required("locations")),
        employees=read_employees(required("employees")),
        standards=read_standards(standards_path) if standards_path else [],
        help_records=read_help_records(required("help_records"), year, month),
        leave_records=read_leave_records(leave_path, year, month) if leave_path else [],
        attendance_records=(
            read_attendance_records(attendance_path, year, month) if attendance_path else []
        ),
    )
    logger.info(
        f"Loaded inputs for {year}-{month:02d}: {len(inputs.locations)} locations, "
        f"{len(inputs.employees)} employees, {len(inputs.help_records)} help records, "
        f"{len(inputs.leave_records)} leave records, "
        f"{len(inputs.attendance_records)} attendance records"
    )
    return inputs
