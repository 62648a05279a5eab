"""Styled dataframe display helpers."""

import streamlit as st
import pandas as pd
from typing import List, Optional, Tuple


def render_styled_table(
    df: pd.DataFrame,
    title: Optional[str] = None,
    height: Optional[int] = None,
    use_container_width: bool = True,
):
    """Render a styled, non-editable dataframe."""
    if title:
        st.subheader(title)
    st.dataframe(df, height=height, use_container_width=use_container_width)


def render_conflict_table(conflicts: List[Tuple[tuple, tuple, str]]):
    """Render adjacent same-group seat pairs, highlighted."""
    if not conflicts:
        st.success("No adjacent students share a department.")
        return

    df = pd.DataFrame([
        {"Seat A": f"R{a[0] + 1}C{a[1] + 1}", "Seat B": f"R{b[0] + 1}C{b[1] + 1}", "Group": g}
        for a, b, g in conflicts
    ])

    def color_group(val):
        return "background-color: #fff3cd; color: #856404; font-weight: bold"

    st.dataframe(df.style.map(color_group, subset=["Group"]), use_container_width=True)
