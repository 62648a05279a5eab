"""File upload parsing — CSV/XLSX into typed roster and room lists."""

import pandas as pd
from typing import List, Tuple
from models.occupant import Occupant
from models.room import Room
from config.defaults import UNASSIGNED_GROUP, TRUTHY_VALUES


def _flag(value, default: bool) -> bool:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in TRUTHY_VALUES


def _text(row, column: str) -> str:
    value = row.get(column)
    if value is None or pd.isna(value):
        return ""
    return str(value).strip()


def parse_roster(df: pd.DataFrame) -> List[Occupant]:
    """Convert a roster DataFrame into Occupant objects."""
    occupants = []
    for _, row in df.iterrows():
        group = _text(row, "Department") or UNASSIGNED_GROUP
        occupants.append(Occupant(
            id=_text(row, "Student ID"),
            group=group,
            name=_text(row, "Name"),
            roll_number=_text(row, "Roll Number"),
            is_active=_flag(row.get("Active"), True),
            is_detained=_flag(row.get("Detained"), False),
        ))
    return occupants


def parse_rooms(df: pd.DataFrame) -> List[Room]:
    """Convert a room master DataFrame into Room objects."""
    rooms = []
    for _, row in df.iterrows():
        capacity = None
        if "Capacity" in df.columns and pd.notna(row.get("Capacity")):
            capacity = int(row["Capacity"])
        rooms.append(Room(
            room_id=str(row["Room ID"]).strip(),
            rows=int(row["Rows"]),
            columns=int(row["Columns"]),
            room_number=_text(row, "Room Number"),
            capacity=capacity,
        ))
    return rooms


def load_file(uploaded_file) -> pd.DataFrame:
    """Load an uploaded file (CSV or XLSX) into a DataFrame."""
    name = uploaded_file.name.lower()
    if name.endswith(".csv"):
        return pd.read_csv(uploaded_file)
    elif name.endswith(".xlsx") or name.endswith(".xls"):
        return pd.read_excel(uploaded_file, engine="openpyxl")
    else:
        raise ValueError(f"Unsupported file format: {name}. Use CSV or XLSX.")


# Expected sheet names for a two-tab Excel workbook (case-insensitive matching)
SHEET_ALIASES = {
    "roster": ["roster", "students", "student roster", "student master", "enrollment"],
    "rooms": ["rooms", "room", "room master", "halls", "exam halls"],
}


def _match_sheet(sheet_names: List[str], category: str) -> str:
    """Find a sheet name matching the given category. Returns the matched name or raises."""
    aliases = SHEET_ALIASES[category]
    lower_map = {s.lower().strip(): s for s in sheet_names}
    for alias in aliases:
        if alias in lower_map:
            return lower_map[alias]
    raise ValueError(
        f"Could not find a sheet for '{category}'. "
        f"Expected one of: {aliases}. "
        f"Found sheets: {sheet_names}"
    )


def load_multi_sheet_excel(uploaded_file) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """Load a single Excel file with 2 tabs: Roster, Rooms.

    Sheet names are matched case-insensitively. Accepted names include:
    - Roster: 'Roster', 'Students', 'Enrollment', etc.
    - Rooms: 'Rooms', 'Room Master', 'Halls', etc.

    Returns (roster_df, rooms_df).
    """
    xl = pd.ExcelFile(uploaded_file, engine="openpyxl")
    sheet_names = xl.sheet_names

    roster_sheet = _match_sheet(sheet_names, "roster")
    rooms_sheet = _match_sheet(sheet_names, "rooms")

    roster_df = pd.read_excel(xl, sheet_name=roster_sheet)
    rooms_df = pd.read_excel(xl, sheet_name=rooms_sheet)

    return roster_df, rooms_df
