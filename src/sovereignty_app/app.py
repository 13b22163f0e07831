"""EU Cloud Sovereignty self-assessment application."""

import sys
from pathlib import Path

import streamlit as st

# Add src to path for imports
src_path = Path(__file__).parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from sovereignty_app.state import (
    initialize_state,
    clear_state,
    get_assessment,
    get_language,
    switch_language,
)
from sovereignty_app.components import (
    render_objective_cards,
    render_radar_chart,
    render_advisor_panel,
    render_auto_assess_section,
    render_seal_guide,
    render_export_section,
)

from sovereignty_scorer.app_logging import is_configured, setup_logging_from_config
from sovereignty_scorer.catalog import catalog_for, supported_languages, ui_strings
from sovereignty_scorer.config import get_config
from sovereignty_scorer.schema import Language, MAX_SEAL_LEVEL
from sovereignty_scorer.scorer import average_maturity


LANGUAGE_LABELS = {
    Language.ES: "Español",
    Language.EN: "English",
}


def main() -> None:
    """Main entry point for the Streamlit app."""
    st.set_page_config(
        page_title="EU Cloud Sovereignty Assessment",
        page_icon=":flag-eu:",
        layout="wide",
        initial_sidebar_state="expanded"
    )

    if not is_configured():
        setup_logging_from_config(get_config().logging)

    _apply_custom_styles()

    initialize_state()

    lang = get_language()
    ui = ui_strings(lang)
    objectives, seal_definitions = catalog_for(lang)

    _render_sidebar(lang)

    st.title(ui.title)
    st.markdown(ui.subtitle)

    render_auto_assess_section(ui)

    st.markdown("---")

    left, right = st.columns([3, 2])

    with left:
        st.subheader(ui.step1)
        render_objective_cards(objectives, seal_definitions, ui)

    with right:
        snapshot = get_assessment().get_snapshot()

        st.subheader(ui.balance)
        render_radar_chart(objectives, snapshot.scores)

        maturity = average_maturity(snapshot.scores, objectives)
        st.metric(ui.avg_maturity, f"{maturity:.1f} / {MAX_SEAL_LEVEL}")
        st.progress(min(maturity / MAX_SEAL_LEVEL, 1.0))

        st.markdown("---")
        render_advisor_panel(ui)

        st.markdown("---")
        render_seal_guide(seal_definitions, ui)


def _render_sidebar(lang: Language) -> None:
    """Render language toggle, global score and exports."""
    ui = ui_strings(lang)

    with st.sidebar:
        languages = supported_languages()
        selected = st.radio(
            ui.language,
            options=languages,
            index=languages.index(lang),
            format_func=lambda option: LANGUAGE_LABELS.get(option, option.value),
            horizontal=True,
        )
        if selected != lang:
            switch_language(selected)
            st.rerun()

        st.markdown("---")

        score = get_assessment().composite_score()
        st.markdown(
            f"""
            <div class="global-score">
                <div class="global-score-label">{ui.global_score}</div>
                <div class="global-score-value">{score:.1f}%</div>
            </div>
            """,
            unsafe_allow_html=True
        )

        st.markdown("---")
        render_export_section(lang)

        st.markdown("---")
        st.button(f"🔄 {ui.reset}", use_container_width=True, on_click=clear_state)


def _apply_custom_styles() -> None:
    """Apply custom CSS for EU branding."""
    st.markdown("""
    <style>
    /* Hide Streamlit branding */
    #MainMenu {visibility: hidden;}
    footer {visibility: hidden;}

    /* Global score */
    .global-score {
        background: #003399;
        color: white;
        border-radius: 10px;
        padding: 1rem;
        text-align: center;
    }
    .global-score-label {
        font-size: 0.8rem;
        text-transform: uppercase;
        opacity: 0.85;
    }
    .global-score-value {
        font-size: 2.2rem;
        font-weight: 700;
        color: #FFCC00;
    }

    /* Objective cards */
    .objective-header {
        display: flex;
        justify-content: space-between;
        font-size: 0.75rem;
        color: #666;
    }
    .objective-id {
        font-weight: 700;
        color: #003399;
    }
    .objective-name {
        font-weight: 600;
        font-size: 1.05rem;
        margin: 0.2rem 0;
    }
    .objective-desc {
        color: #555;
        font-size: 0.85rem;
        margin-bottom: 0.5rem;
    }

    /* Advisor */
    .advice-box {
        background: #F5F7FC;
        border-left: 4px solid #003399;
        border-radius: 6px;
        padding: 0.75rem 1rem;
    }
    .advice-objective {
        font-weight: 600;
        margin-bottom: 0.5rem;
    }
    .advice-text {
        font-size: 0.9rem;
    }

    /* SEAL badges */
    .seal-badge {
        padding: 0.1rem 0.5rem;
        border-radius: 10px;
        font-size: 0.75rem;
        font-weight: 700;
    }
    </style>
    """, unsafe_allow_html=True)


if __name__ == "__main__":
    main()
