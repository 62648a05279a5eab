"""Global sidebar controls for exam, room and group-order selection."""

import streamlit as st
from dataclasses import dataclass
from typing import List, Optional
from data.session_store import get_rooms, is_data_loaded
from models.occupant import Occupant
from config.defaults import GROUP_ORDER_POLICIES, DEFAULT_GROUP_ORDER_POLICY, DEFAULT_SEED


@dataclass
class SidebarState:
    exam_id: str
    room_id: Optional[str]
    group_order_policy: str
    seed: int

    def allocation_kwargs(self, occupants: List[Occupant]) -> dict:
        """Translate the chosen policy into allocate() keyword arguments."""
        if self.group_order_policy == "alphabetical":
            return {"group_order": sorted({o.group for o in occupants})}
        if self.group_order_policy == "seeded":
            return {"seed": self.seed}
        return {}


def render_sidebar() -> SidebarState:
    """Render the global sidebar controls and return current state."""
    with st.sidebar:
        st.title("Exam Seating Planner")
        st.divider()

        exam_id = st.text_input("Exam ID", value="EXAM-1", key="sidebar_exam").strip() or "EXAM-1"

        rooms = get_rooms()
        room_labels = {r.room_id: f"{r.label} ({r.rows}x{r.columns})" for r in rooms}
        room_id = None
        if rooms:
            room_id = st.selectbox(
                "Exam Hall",
                options=list(room_labels.keys()),
                format_func=lambda x: room_labels.get(x, x),
                key="sidebar_room",
            )

        policy = st.selectbox(
            "Department Rotation",
            options=GROUP_ORDER_POLICIES,
            index=GROUP_ORDER_POLICIES.index(DEFAULT_GROUP_ORDER_POLICY),
            format_func=lambda p: p.replace("_", " ").title(),
            key="sidebar_policy",
        )
        seed = DEFAULT_SEED
        if policy == "seeded":
            seed = int(st.number_input("Seed", min_value=0, value=DEFAULT_SEED, step=1, key="sidebar_seed"))

        st.divider()

        if is_data_loaded():
            st.success("Data loaded")
        else:
            st.warning("No data loaded. Go to the Data Upload tab")

    st.session_state["sidebar_state"] = {
        "exam_id": exam_id,
        "group_order_policy": policy,
        "seed": seed,
    }
    return SidebarState(
        exam_id=exam_id,
        room_id=room_id,
        group_order_policy=policy,
        seed=seed,
    )
