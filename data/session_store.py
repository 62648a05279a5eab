"""Typed wrapper around st.session_state for application data."""

import streamlit as st
from typing import Dict, List, Optional, Tuple
from models.occupant import Occupant
from models.room import Room
from models.seating import SeatingPlan
from engine.roster_filter import RosterFilterResult
from config.defaults import DEFAULT_GROUP_ORDER_POLICY, DEFAULT_SEED

PlanKey = Tuple[str, str]  # (exam_id, room_id)


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    defaults = {
        "roster": [],
        "rooms": [],
        "roster_filter": None,
        "seating_plans": {},
        "unseated": [],
        "data_loaded": False,
        "sidebar_state": {
            "exam_id": "EXAM-1",
            "group_order_policy": DEFAULT_GROUP_ORDER_POLICY,
            "seed": DEFAULT_SEED,
        },
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


# --- Getters ---

def get_roster() -> List[Occupant]:
    return st.session_state.get("roster", [])


def get_rooms() -> List[Room]:
    return st.session_state.get("rooms", [])


def get_roster_filter() -> Optional[RosterFilterResult]:
    return st.session_state.get("roster_filter")


def get_eligible() -> List[Occupant]:
    result = get_roster_filter()
    return result.eligible if result else []


def get_seating_plans() -> Dict[PlanKey, SeatingPlan]:
    return st.session_state.get("seating_plans", {})


def get_seating_plan(exam_id: str, room_id: str) -> Optional[SeatingPlan]:
    return get_seating_plans().get((exam_id, room_id))


def get_exam_plans(exam_id: str) -> Dict[str, SeatingPlan]:
    """Plans saved for one exam, keyed by room id."""
    return {room_id: plan for (exam, room_id), plan in get_seating_plans().items() if exam == exam_id}


def get_unseated() -> List[Occupant]:
    return st.session_state.get("unseated", [])


def is_data_loaded() -> bool:
    return st.session_state.get("data_loaded", False)


# --- Setters ---

def set_roster(roster: List[Occupant], filter_result: RosterFilterResult):
    st.session_state["roster"] = roster
    st.session_state["roster_filter"] = filter_result


def set_rooms(rooms: List[Room]):
    st.session_state["rooms"] = rooms


def set_data_loaded(loaded: bool):
    st.session_state["data_loaded"] = loaded
    if loaded:
        st.session_state["seating_plans"] = {}
        st.session_state["unseated"] = []


def set_unseated(unseated: List[Occupant]):
    st.session_state["unseated"] = unseated


# --- Seating plans ---

def save_seating_plan(exam_id: str, room_id: str, plan: SeatingPlan):
    """Store a plan, replacing any earlier plan for the same exam and room."""
    st.session_state["seating_plans"][(exam_id, room_id)] = plan


def clear_seating_plans(exam_id: str):
    plans = st.session_state["seating_plans"]
    for key in [k for k in plans if k[0] == exam_id]:
        plans.pop(key)
