"""Plotly chart builders for the Exam Seating Planner."""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd
from typing import Dict, List

from models.seating import SeatingPlan
from config.defaults import GROUP_COLORS


def _discrete_colorscale(n: int) -> List[list]:
    """Stepwise colorscale giving each of n integer levels a solid colour."""
    scale = []
    for i in range(n):
        color = GROUP_COLORS[i % len(GROUP_COLORS)]
        scale.append([i / n, color])
        scale.append([(i + 1) / n, color])
    return scale


def seating_grid_heatmap(plan: SeatingPlan, title: str = "Seating Grid") -> go.Figure:
    """Seat grid coloured by group, with occupant ids as labels."""
    groups = sorted({c.group for row in plan.grid for c in row if c.occupied})
    index = {g: i for i, g in enumerate(groups)}
    relaxed = set(plan.relaxed_seats)

    z, text, hover = [], [], []
    for r, row in enumerate(plan.grid):
        z_row, t_row, h_row = [], [], []
        for c, cell in enumerate(row):
            if cell.occupied:
                z_row.append(index[cell.group])
                t_row.append(cell.occupant_id + (" *" if (r, c) in relaxed else ""))
                h_row.append(f"Seat R{r + 1}C{c + 1}<br>{cell.occupant_id}<br>{cell.group}")
            else:
                z_row.append(None)
                t_row.append("")
                h_row.append(f"Seat R{r + 1}C{c + 1}<br>empty")
        z.append(z_row)
        text.append(t_row)
        hover.append(h_row)

    n = max(1, len(groups))
    fig = go.Figure(data=go.Heatmap(
        z=z,
        x=[f"C{c + 1}" for c in range(plan.room.columns)],
        y=[f"R{r + 1}" for r in range(plan.room.rows)],
        text=text,
        texttemplate="%{text}",
        customdata=hover,
        hovertemplate="%{customdata}<extra></extra>",
        colorscale=_discrete_colorscale(n),
        zmin=-0.5,
        zmax=n - 0.5,
        xgap=2,
        ygap=2,
        colorbar=dict(
            tickvals=list(range(len(groups))),
            ticktext=groups,
            title="Group",
        ),
        showscale=bool(groups),
    ))
    fig.update_layout(
        title=title,
        yaxis_autorange="reversed",
        height=max(300, plan.room.rows * 45),
    )
    return fig


def group_distribution_bar(group_counts: Dict[str, int], title: str = "Students Seated per Group") -> go.Figure:
    """Bar chart of seated students per group."""
    df = pd.DataFrame(
        sorted(group_counts.items()), columns=["Group", "Seated"]
    )
    fig = px.bar(
        df, x="Group", y="Seated",
        title=title,
        color="Group",
        color_discrete_sequence=GROUP_COLORS,
    )
    fig.update_layout(showlegend=False, height=350)
    return fig


def hall_fill_bar(hall_rows: List[dict], title: str = "Hall Fill") -> go.Figure:
    """Bar chart comparing capacity and seated count per hall."""
    df = pd.DataFrame(hall_rows)
    fig = px.bar(
        df, x="room", y=["capacity", "seated"],
        barmode="group",
        labels={"value": "Seats", "room": "Hall", "variable": ""},
        title=title,
        color_discrete_map={"capacity": "#4A90D9", "seated": "#E8734A"},
    )
    fig.update_layout(legend_title_text="", height=400)
    return fig
