"""Generate synthetic roster and room datasets for the Exam Seating Planner."""

import pandas as pd
import random
import os


DEPARTMENTS = [("CS", 48), ("ME", 40), ("EE", 36), ("CE", 24), ("IT", 20)]


def generate_roster_df() -> pd.DataFrame:
    """Generate a student roster: 5 departments, a few detained or inactive students."""
    random.seed(42)
    rows = []
    serial = 1
    for dept, count in DEPARTMENTS:
        for i in range(1, count + 1):
            rows.append({
                "Student ID": f"S{serial:04d}",
                "Name": f"Student {serial}",
                "Roll Number": f"{dept}23{i:03d}",
                "Department": dept,
                "Active": random.random() > 0.03,
                "Detained": random.random() < 0.05,
            })
            serial += 1
    random.shuffle(rows)
    return pd.DataFrame(rows)


def generate_rooms_df() -> pd.DataFrame:
    """Generate room master data: 4 exam halls of varying shape."""
    rooms = [
        {"Room ID": "R101", "Room Number": "A-101", "Rows": 6, "Columns": 8, "Capacity": 48},
        {"Room ID": "R102", "Room Number": "A-102", "Rows": 5, "Columns": 6, "Capacity": 30},
        {"Room ID": "R201", "Room Number": "B-201", "Rows": 8, "Columns": 8, "Capacity": 64},
        {"Room ID": "R202", "Room Number": "B-202", "Rows": 4, "Columns": 5, "Capacity": 24},
    ]
    return pd.DataFrame(rooms)


def generate_sample_csvs(output_dir: str):
    """Write sample CSV files to the given directory."""
    os.makedirs(output_dir, exist_ok=True)
    generate_roster_df().to_csv(os.path.join(output_dir, "roster.csv"), index=False)
    generate_rooms_df().to_csv(os.path.join(output_dir, "rooms.csv"), index=False)


def generate_sample_excel(output_dir: str):
    """Write a single two-tab Excel file with both datasets."""
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, "sample_data.xlsx")
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        generate_roster_df().to_excel(writer, sheet_name="Roster", index=False)
        generate_rooms_df().to_excel(writer, sheet_name="Rooms", index=False)


if __name__ == "__main__":
    out = os.path.join(os.path.dirname(__file__), "..", "sample_files")
    generate_sample_csvs(out)
    generate_sample_excel(out)
    print("Sample CSV and Excel files generated in sample_files/")
