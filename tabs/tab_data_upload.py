"""Tab 1: Data Upload — roster and room master upload, validation, eligibility."""

import streamlit as st

from data.loader import load_file, load_multi_sheet_excel, parse_roster, parse_rooms
from data.validator import validate_roster, validate_rooms, validate_supply
from data.sample_data import generate_roster_df, generate_rooms_df
from data.session_store import (
    set_roster, set_rooms, set_data_loaded, get_roster_filter, get_rooms, is_data_loaded,
)
from engine.roster_filter import filter_eligible
from components.metrics_cards import render_metric_row


def _load_and_validate(roster_df, rooms_df):
    """Validate and store uploaded data."""
    errors = []
    warnings = []

    for r in [validate_roster(roster_df), validate_rooms(rooms_df)]:
        errors.extend(r.errors)
        warnings.extend(r.warnings)

    if errors:
        for e in errors:
            st.error(e)
        return False

    roster = parse_roster(roster_df)
    rooms = parse_rooms(rooms_df)
    filtered = filter_eligible(roster)

    total_seats = sum(r.seatable_count for r in rooms)
    warnings.extend(validate_supply(len(filtered.eligible), total_seats).warnings)
    for w in warnings:
        st.warning(w)

    set_roster(roster, filtered)
    set_rooms(rooms)
    set_data_loaded(True)

    st.success(f"Data loaded: {len(roster)} students, {len(rooms)} exam halls")
    return True


def _render_eligibility():
    result = get_roster_filter()
    if result is None:
        return
    rooms = get_rooms()
    st.subheader("Eligibility")
    render_metric_row([
        {"label": "Total Students", "value": result.total},
        {"label": "Eligible", "value": len(result.eligible)},
        {"label": "Detained (Excluded)", "value": len(result.detained)},
        {"label": "Inactive", "value": len(result.inactive)},
        {"label": "Hall Seats", "value": sum(r.seatable_count for r in rooms)},
    ])


def render(sidebar_state):
    """Render the Data Upload tab."""
    st.header("Data Upload")

    upload_mode = st.radio(
        "Upload mode",
        ["Single Excel file (2 tabs)", "Two separate files"],
        horizontal=True,
        key="upload_mode",
    )

    if upload_mode == "Single Excel file (2 tabs)":
        st.caption(
            "Upload one `.xlsx` file with two sheets named: **Roster**, **Rooms** "
            "(also accepts aliases like 'Students', 'Halls', etc.)"
        )
        single_file = st.file_uploader("Excel workbook with 2 tabs", type=["xlsx"], key="upload_single")
        ready = single_file is not None
    else:
        col1, col2 = st.columns(2)
        with col1:
            roster_file = st.file_uploader("Student Roster", type=["csv", "xlsx"], key="upload_roster")
        with col2:
            rooms_file = st.file_uploader("Room Master", type=["csv", "xlsx"], key="upload_rooms")
        ready = roster_file is not None and rooms_file is not None

    col_upload, col_sample = st.columns(2)
    with col_upload:
        if st.button("Upload & Validate", type="primary", key="btn_upload"):
            if not ready:
                st.warning("Please upload the required file(s).")
            else:
                try:
                    if upload_mode == "Single Excel file (2 tabs)":
                        roster_df, rooms_df = load_multi_sheet_excel(single_file)
                    else:
                        roster_df = load_file(roster_file)
                        rooms_df = load_file(rooms_file)
                    _load_and_validate(roster_df, rooms_df)
                except ValueError as e:
                    st.error(f"Error loading file: {e}")

    with col_sample:
        if st.button("Load Sample Data", key="btn_sample"):
            _load_and_validate(generate_roster_df(), generate_rooms_df())

    if is_data_loaded():
        st.divider()
        _render_eligibility()
