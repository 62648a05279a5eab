"""Tab 2: Seating Plan — run the allocator for a hall or all halls and inspect the grid."""

import streamlit as st

from data.session_store import (
    get_eligible, get_exam_plans, get_rooms, get_roster, get_seating_plan, get_seating_plans,
    get_unseated, save_seating_plan, clear_seating_plans, set_unseated, is_data_loaded,
)
from engine.hall_planner import plan_halls, plan_single_hall, unseated_students
from engine.seating_audit import (
    seat_utilization, find_adjacency_conflicts, explain_plan, capacity_warning,
)
from engine.grid_view import placements_to_dataframe
from components.charts import seating_grid_heatmap, group_distribution_bar, hall_fill_bar
from components.metrics_cards import render_plan_metrics, render_alert_card
from components.tables import render_conflict_table, render_styled_table
from models.errors import ConfigurationError


def _run_single(sidebar_state):
    room = next(r for r in get_rooms() if r.room_id == sidebar_state.room_id)
    eligible = get_eligible()
    others = get_exam_plans(sidebar_state.exam_id)
    others.pop(room.room_id, None)
    plan = plan_single_hall(eligible, room, others.values(), **sidebar_state.allocation_kwargs(eligible))
    save_seating_plan(sidebar_state.exam_id, room.room_id, plan)
    set_unseated(unseated_students(eligible, get_exam_plans(sidebar_state.exam_id).values()))


def _run_all(sidebar_state):
    eligible = get_eligible()
    result = plan_halls(eligible, get_rooms(), **sidebar_state.allocation_kwargs(eligible))
    clear_seating_plans(sidebar_state.exam_id)
    for room_id, plan in result.plans.items():
        save_seating_plan(sidebar_state.exam_id, room_id, plan)
    set_unseated(result.unseated)


def _render_hall_summary(exam_id: str):
    rooms = get_rooms()
    plans = get_seating_plans()
    rows = []
    for r in rooms:
        plan = plans.get((exam_id, r.room_id))
        if plan is not None:
            rows.append({"room": r.label, "capacity": plan.room.capacity, "seated": plan.seated_count})
    if len(rows) > 1:
        st.plotly_chart(hall_fill_bar(rows), use_container_width=True)


def render(sidebar_state):
    """Render the Seating Plan tab."""
    st.header("Seating Plan")

    if not is_data_loaded():
        st.info("No data loaded. Please upload data in the Data Upload tab.")
        return
    if not get_rooms() or sidebar_state.room_id is None:
        st.info("No exam halls available.")
        return

    col_one, col_all = st.columns(2)
    try:
        with col_one:
            if st.button("Allocate Selected Hall", type="primary", key="btn_alloc_one"):
                _run_single(sidebar_state)
        with col_all:
            if st.button("Allocate All Halls", key="btn_alloc_all"):
                _run_all(sidebar_state)
    except ConfigurationError as e:
        st.error(f"Invalid room configuration: {e}")
        return

    plan = get_seating_plan(sidebar_state.exam_id, sidebar_state.room_id)
    if plan is None:
        st.info("No seating plan for this hall yet. Run an allocation above.")
        return

    stats = seat_utilization(plan)
    render_plan_metrics(stats)

    warning = capacity_warning(plan)
    if warning:
        render_alert_card(warning, "warning")
    unseated = get_unseated()
    if unseated:
        render_alert_card(f"{len(unseated)} eligible student(s) currently have no seat.", "info")

    st.plotly_chart(seating_grid_heatmap(plan), use_container_width=True)
    st.caption("* seat next to a same-department neighbour")

    col1, col2 = st.columns([3, 2])
    with col1:
        st.subheader("Adjacent Same-Department Seats")
        render_conflict_table(find_adjacency_conflicts(plan))
    with col2:
        if stats["group_counts"]:
            st.plotly_chart(group_distribution_bar(stats["group_counts"]), use_container_width=True)

    with st.expander("How this plan was built"):
        for step in explain_plan(plan):
            st.markdown(f"- {step}")

    seats_df = placements_to_dataframe(plan, get_roster())
    render_styled_table(seats_df, title="Seat List", height=400)
    st.download_button(
        "Download Seat List (CSV)",
        seats_df.to_csv(index=False).encode("utf-8"),
        file_name=f"seating_{sidebar_state.exam_id}_{sidebar_state.room_id}.csv",
        mime="text/csv",
    )

    _render_hall_summary(sidebar_state.exam_id)
