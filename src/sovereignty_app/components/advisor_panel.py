"""AI advisor panel and the advisory requests started from the main page."""

import asyncio

import streamlit as st

from sovereignty_advisor.gateway import AdviceResult
from sovereignty_scorer.app_logging import get_logger
from sovereignty_scorer.schema import Objective, UIStrings

from sovereignty_app.state import get_assessment, get_gateway, get_language, get_state, set_state
from sovereignty_app.utils.sanitize import safe_html, safe_multiline_html

logger = get_logger("app.advisor")


def request_advice(obj: Objective, ui: UIStrings) -> None:
    """Ask the gateway for an analysis of the evidence entered for one objective."""
    evidence = get_assessment().note(obj.id)
    with st.spinner(ui.ai_analyzing):
        outcome = asyncio.run(get_gateway().get_advice(
            obj.name,
            obj.factors,
            evidence,
            get_language().value,
        ))
    set_state('advice', AdviceResult(
        objective=obj.name,
        text=outcome.value if outcome.ok else outcome.error,
    ))


def request_auto_assessment(description: str, ui: UIStrings) -> None:
    """Score every objective from a solution description and refresh the cards."""
    with st.spinner(ui.ai_consulting):
        outcome = asyncio.run(get_gateway().auto_assess(description, get_language().value))

    if not outcome.ok:
        set_state('auto_message', ('error', outcome.error))
        return

    updated = get_assessment().apply_auto_assessment(outcome.value)
    set_state('auto_message', ('success', ui.auto_assess_done.format(count=len(updated))))
    st.rerun()


def request_image_description(image_bytes: bytes, mime_type: str, ui: UIStrings) -> None:
    """Describe an uploaded diagram and use it as the auto-assessment description."""
    with st.spinner(ui.ai_consulting):
        outcome = asyncio.run(get_gateway().describe_image(image_bytes, mime_type, get_language().value))

    if not outcome.ok:
        set_state('auto_message', ('error', outcome.error))
        return

    # Merged into the description widget on the next run, before it is created
    set_state('pending_description', outcome.value)
    st.rerun()


def render_advisor_panel(ui: UIStrings) -> None:
    """Render the latest advice, or the initial hint when there is none."""
    st.markdown(f"#### {ui.ai_advisor}")

    advice = get_state('advice')
    if advice is None:
        st.info(ui.ai_initial)
        return

    st.markdown(
        f"""
        <div class="advice-box">
            <div class="advice-objective">{safe_html(ui.objective)}: {safe_html(advice.objective)}</div>
            <div class="advice-text">{safe_multiline_html(advice.text)}</div>
        </div>
        """,
        unsafe_allow_html=True
    )
