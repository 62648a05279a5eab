"""Schema validation for uploaded roster and room files."""

from dataclasses import dataclass, field
from typing import List
import pandas as pd

from config.defaults import ROSTER_REQUIRED_COLUMNS, ROOM_REQUIRED_COLUMNS


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


def _check_required_columns(df: pd.DataFrame, required: List[str], file_label: str) -> ValidationResult:
    result = ValidationResult()
    missing = [col for col in required if col not in df.columns]
    if missing:
        result.is_valid = False
        result.errors.append(f"{file_label}: Missing required columns: {', '.join(missing)}")
    if df.empty:
        result.is_valid = False
        result.errors.append(f"{file_label}: File contains no data rows.")
    return result


def validate_roster(df: pd.DataFrame) -> ValidationResult:
    result = _check_required_columns(df, ROSTER_REQUIRED_COLUMNS, "Student Roster")
    if not result.is_valid:
        return result

    ids = df["Student ID"].astype(str).str.strip()
    blank_ids = df["Student ID"].isna() | (ids == "")
    if blank_ids.any():
        result.is_valid = False
        result.errors.append(f"Student Roster: {int(blank_ids.sum())} row(s) have no Student ID.")

    dupes = ids[~blank_ids].duplicated(keep=False)
    if dupes.any():
        result.is_valid = False
        result.errors.append(
            f"Student Roster: Duplicate student IDs: {sorted(ids[~blank_ids][dupes].unique().tolist())}"
        )

    no_dept = df["Department"].isna() | (df["Department"].astype(str).str.strip() == "")
    if no_dept.any():
        result.warnings.append(
            f"Student Roster: {int(no_dept.sum())} student(s) have no Department. "
            "They will be seated without department separation."
        )

    return result


def validate_rooms(df: pd.DataFrame) -> ValidationResult:
    result = _check_required_columns(df, ROOM_REQUIRED_COLUMNS, "Room Master")
    if not result.is_valid:
        return result

    rows = pd.to_numeric(df["Rows"], errors="coerce")
    cols = pd.to_numeric(df["Columns"], errors="coerce")
    if rows.isna().any() or cols.isna().any():
        result.is_valid = False
        result.errors.append("Room Master: Rows and Columns must be numeric.")
        return result

    if (rows <= 0).any() or (cols <= 0).any():
        result.is_valid = False
        bad = df[(rows <= 0) | (cols <= 0)]["Room ID"].astype(str).tolist()
        result.errors.append(f"Room Master: Rows and Columns must be positive for rooms: {bad}")

    fractional = (rows % 1 != 0) | (cols % 1 != 0)
    if fractional.any():
        result.is_valid = False
        bad = df[fractional]["Room ID"].astype(str).tolist()
        result.errors.append(f"Room Master: Rows and Columns must be whole numbers for rooms: {bad}")

    dupes = df.duplicated(subset=["Room ID"], keep=False)
    if dupes.any():
        result.is_valid = False
        result.errors.append(f"Room Master: Duplicate room IDs: {df[dupes]['Room ID'].unique().tolist()}")

    if "Capacity" in df.columns:
        capacity = pd.to_numeric(df["Capacity"], errors="coerce")
        mismatch = capacity.notna() & (capacity != rows * cols)
        if mismatch.any():
            result.warnings.append(
                f"Room Master: Declared capacity differs from rows x columns for rooms: "
                f"{df[mismatch]['Room ID'].astype(str).tolist()}. Rows x columns will be used."
            )

    return result


def validate_supply(eligible_count: int, total_seats: int) -> ValidationResult:
    """Check that the halls can hold every eligible student."""
    result = ValidationResult()
    if eligible_count > total_seats:
        result.warnings.append(
            f"{eligible_count - total_seats} eligible student(s) exceed total hall seats "
            f"({total_seats}). The last students in roster order will not be seated."
        )
    return result
