"""Session state management for the sovereignty assessment app.

This module manages shared state across all pages in the multi-page app:
- Assessment (main page)
- Advisor Chat
"""

from typing import Any

import streamlit as st

from sovereignty_scorer.app_logging import get_logger
from sovereignty_scorer.catalog import catalog_for
from sovereignty_scorer.config import get_config
from sovereignty_scorer.schema import Language
from sovereignty_scorer.state import AssessmentState

logger = get_logger("app.state")


def initialize_state() -> None:
    """Initialize session state with defaults for all pages."""
    if 'initialized' not in st.session_state:
        st.session_state.initialized = True

        lang = get_config().ui.default_language
        objectives, _ = catalog_for(lang)

        # === Assessment page state ===
        st.session_state.lang = lang
        st.session_state.assessment = AssessmentState(objectives)
        st.session_state.advice = None
        st.session_state.auto_description = ""
        st.session_state.pending_description = None
        st.session_state.auto_message = None

        # === Chat page state ===
        st.session_state.chat_messages = []

        # Created lazily on first advisory request
        st.session_state.gateway = None


def get_state(key: str, default: Any = None) -> Any:
    """Get a value from session state."""
    return getattr(st.session_state, key, default)


def set_state(key: str, value: Any) -> None:
    """Set a value in session state."""
    setattr(st.session_state, key, value)


def get_language() -> Language:
    return get_state('lang') or get_config().ui.default_language


def get_assessment() -> AssessmentState:
    return st.session_state.assessment


def switch_language(lang: Language) -> None:
    """Change the session language.

    Scores and notes are kept for every objective id present in the new
    catalog. Advice shown in the previous language is dropped.
    """
    if lang == get_language():
        return
    objectives, _ = catalog_for(lang)
    get_assessment().rekey(objectives)
    st.session_state.lang = lang
    st.session_state.advice = None
    logger.info(f"Session language switched to {lang.value}")


def clear_state() -> None:
    """Clear the assessment for a new evaluation.

    Note: The chat transcript and language are kept.
    """
    objectives, _ = catalog_for(get_language())
    get_assessment().reset(objectives)
    st.session_state.advice = None
    st.session_state.auto_description = ""
    st.session_state.auto_message = None


def get_gateway():
    """Get or initialize the advisory gateway.

    Lazily imports the gateway so the page renders without model setup.
    """
    if st.session_state.gateway is None:
        from sovereignty_advisor.gateway import AdvisoryGateway
        st.session_state.gateway = AdvisoryGateway()
    return st.session_state.gateway
