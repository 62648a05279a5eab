"""KPI metric cards for seating plans."""

import streamlit as st

from config.defaults import UTILIZATION_WARNING_THRESHOLD


def render_metric_row(metrics: list[dict]):
    """Render a row of metric cards.

    Each metric dict should have: label, value, and optionally delta, delta_color.
    """
    cols = st.columns(len(metrics))
    for col, m in zip(cols, metrics):
        with col:
            st.metric(
                label=m["label"],
                value=m["value"],
                delta=m.get("delta"),
                delta_color=m.get("delta_color", "normal"),
            )


def render_plan_metrics(stats: dict):
    """Metric row for one room's seating summary (see seat_utilization)."""
    render_metric_row([
        {"label": "Seats", "value": f"{stats['capacity']:,}"},
        {"label": "Seated", "value": f"{stats['seated']:,}"},
        {
            "label": "Utilization",
            "value": f"{stats['utilization_pct']:.0%}",
            "delta": "under-filled" if stats["utilization_pct"] < UTILIZATION_WARNING_THRESHOLD else None,
            "delta_color": "off",
        },
        {
            "label": "Excluded",
            "value": stats["excluded"],
            "delta": "room too small" if stats["excluded"] else None,
            "delta_color": "inverse",
        },
        {"label": "Adjacent Conflicts", "value": stats["conflicts"]},
    ])


def render_alert_card(message: str, level: str = "warning"):
    """Render an alert card with appropriate styling."""
    if level == "error":
        st.error(message, icon="🔴")
    elif level == "warning":
        st.warning(message, icon="🟡")
    else:
        st.info(message, icon="🔵")
