"""Default configuration constants for the Exam Seating Planner."""

# Sentinel group for occupants with no department/cohort on record.
# Each such occupant is treated as its own singleton group during seating.
UNASSIGNED_GROUP = "UNASSIGNED"

# Placeholder shown when a persisted seat refers to a student no longer on the roster
UNKNOWN_OCCUPANT = "UNKNOWN"

# Forward-scan cap per seat is max(distinct groups, MIN_LOOKAHEAD)
MIN_LOOKAHEAD = 4

# Group ordering policies offered in the sidebar
GROUP_ORDER_POLICIES = ["first_seen", "alphabetical", "seeded"]
DEFAULT_GROUP_ORDER_POLICY = "first_seen"
DEFAULT_SEED = 42

# Roster file columns
ROSTER_REQUIRED_COLUMNS = [
    "Student ID",
    "Department",
]
ROSTER_OPTIONAL_COLUMNS = [
    "Name",
    "Roll Number",
    "Active",
    "Detained",
]

# Room file columns
ROOM_REQUIRED_COLUMNS = [
    "Room ID",
    "Rows",
    "Columns",
]
ROOM_OPTIONAL_COLUMNS = [
    "Room Number",
    "Capacity",
]

# Truthy spellings accepted for the Active / Detained roster flags
TRUTHY_VALUES = {"true", "yes", "y", "1", "t"}

# Utilization below this raises an under-filled room note
UTILIZATION_WARNING_THRESHOLD = 0.50

# Chart colours cycled per group
GROUP_COLORS = [
    "#4A90D9", "#E8734A", "#5CB85C", "#F5C542",
    "#9B59B6", "#1ABC9C", "#E74C3C", "#95A5A6",
]
EMPTY_SEAT_COLOR = "#F0F0F0"
