"""Sovereignty balance radar chart."""

from typing import Mapping, Sequence

import plotly.graph_objects as go
import streamlit as st

from sovereignty_scorer.schema import MAX_SEAL_LEVEL, Objective


EU_BLUE = '#003399'
EU_GOLD = '#FFCC00'


def build_radar_figure(objectives: Sequence[Objective], scores: Mapping[str, float]) -> go.Figure:
    """Build a closed polar chart with one axis per objective.

    The first point is repeated at the end so the outline closes.
    """
    labels = [obj.id for obj in objectives]
    values = [scores.get(obj.id, 0) for obj in objectives]
    hover = [obj.name for obj in objectives]

    fig = go.Figure()
    fig.add_trace(go.Scatterpolar(
        r=values + values[:1],
        theta=labels + labels[:1],
        customdata=hover + hover[:1],
        fill='toself',
        line=dict(color=EU_BLUE),
        fillcolor='rgba(0, 51, 153, 0.25)',
        marker=dict(color=EU_GOLD, size=7),
        hovertemplate='%{customdata}<br>SEAL-%{r}<extra></extra>',
    ))
    fig.update_layout(
        polar=dict(radialaxis=dict(visible=True, range=[0, MAX_SEAL_LEVEL], dtick=1)),
        showlegend=False,
        margin=dict(l=30, r=30, t=30, b=30),
        height=340,
    )
    return fig


def render_radar_chart(objectives: Sequence[Objective], scores: Mapping[str, float]) -> None:
    st.plotly_chart(build_radar_figure(objectives, scores), use_container_width=True)
