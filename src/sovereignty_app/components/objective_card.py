"""Objective assessment cards."""

from typing import Sequence

import streamlit as st

from sovereignty_scorer.schema import MAX_SEAL_LEVEL, Objective, SealDefinition, UIStrings
from sovereignty_scorer.scorer import seal_for

from sovereignty_app.state import get_assessment
from sovereignty_app.components.advisor_panel import request_advice
from sovereignty_app.utils.sanitize import safe_html


def score_key(objective_id: str) -> str:
    return f"score_{objective_id}"


def note_key(objective_id: str) -> str:
    return f"note_{objective_id}"


def sync_widget_state(objectives: Sequence[Objective]) -> None:
    """Copy assessment values into widget keys.

    Must run before the widgets are created. The assessment is the source of
    truth: it changes outside the widgets after a language switch, an
    auto-assessment or a reset, and Streamlit drops widget keys while
    another page is shown.
    """
    assessment = get_assessment()
    for obj in objectives:
        st.session_state[score_key(obj.id)] = assessment.score(obj.id)
        st.session_state[note_key(obj.id)] = assessment.note(obj.id)


def _on_score_change(objective_id: str) -> None:
    get_assessment().set_score(objective_id, st.session_state[score_key(objective_id)])


def _on_note_change(objective_id: str) -> None:
    get_assessment().set_note(objective_id, st.session_state[note_key(objective_id)])


def render_objective_cards(
    objectives: Sequence[Objective],
    seal_definitions: Sequence[SealDefinition],
    ui: UIStrings,
) -> None:
    """Render one card per objective in a two-column grid."""
    sync_widget_state(objectives)

    cols = st.columns(2)
    for i, obj in enumerate(objectives):
        with cols[i % 2]:
            _render_objective_card(obj, seal_definitions, ui)


def _render_objective_card(obj: Objective, seal_definitions: Sequence[SealDefinition], ui: UIStrings) -> None:
    with st.container(border=True):
        st.markdown(
            f"""
            <div class="objective-header">
                <span class="objective-id">{safe_html(obj.id)}</span>
                <span class="objective-weight">{obj.weight:.0%}</span>
            </div>
            <div class="objective-name">{safe_html(obj.name)}</div>
            <div class="objective-desc">{safe_html(obj.description)}</div>
            """,
            unsafe_allow_html=True
        )

        with st.expander(ui.factors):
            for factor in obj.factors:
                st.markdown(f"- {factor}")

        st.slider(
            ui.seal_level,
            min_value=0,
            max_value=MAX_SEAL_LEVEL,
            step=1,
            key=score_key(obj.id),
            on_change=_on_score_change,
            args=(obj.id,),
        )

        seal = seal_for(get_assessment().score(obj.id), seal_definitions)
        st.caption(f"SEAL-{seal.level}: {seal.name}")

        st.text_area(
            ui.evidence,
            key=note_key(obj.id),
            placeholder=ui.evidence_placeholder,
            height=90,
            on_change=_on_note_change,
            args=(obj.id,),
        )

        if st.button(ui.ask_ai, key=f"ask_{obj.id}", use_container_width=True):
            request_advice(obj, ui)
