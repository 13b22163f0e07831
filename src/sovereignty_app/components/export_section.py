"""Report export section for the sidebar."""

import json

import streamlit as st

from sovereignty_scorer.catalog import catalog_for, ui_strings
from sovereignty_scorer.config import get_config
from sovereignty_scorer.pdf_report import generate_pdf_report
from sovereignty_scorer.report import ReportLabels, format_report, report_data
from sovereignty_scorer.schema import Language

from sovereignty_app.state import get_assessment
from sovereignty_app.utils.sanitize import sanitize_filename


def build_text_report(lang: Language) -> str:
    """Format the current assessment as the plain-text report."""
    objectives, seal_definitions = catalog_for(lang)
    ui = ui_strings(lang)
    snapshot = get_assessment().get_snapshot()
    return format_report(
        ui.title,
        ui.subtitle,
        get_assessment().composite_score(),
        objectives,
        snapshot.scores,
        snapshot.notes,
        seal_definitions,
        labels=ReportLabels.from_ui(ui),
        placeholder=get_config().report.empty_note_placeholder,
    )


def render_export_section(lang: Language) -> None:
    """Render text, PDF and JSON downloads plus a copyable text report."""
    ui = ui_strings(lang)
    objectives, seal_definitions = catalog_for(lang)
    snapshot = get_assessment().get_snapshot()
    stem = sanitize_filename(f"{get_config().report.file_stem}_{lang.value}")

    st.markdown(f"**{ui.export}**")

    text_report = build_text_report(lang)
    st.download_button(
        ui.export_text,
        data=text_report,
        file_name=f"{stem}.txt",
        mime="text/plain",
        use_container_width=True,
        type="primary"
    )

    try:
        pdf_bytes = generate_pdf_report(
            ui.title,
            ui.subtitle,
            objectives,
            snapshot.scores,
            snapshot.notes,
            seal_definitions,
            labels=ReportLabels.from_ui(ui),
            placeholder=get_config().report.empty_note_placeholder,
        )
        st.download_button(
            ui.export_pdf,
            data=pdf_bytes,
            file_name=f"{stem}.pdf",
            mime="application/pdf",
            use_container_width=True
        )
    except Exception as e:
        st.error(f"PDF generation error: {e}")

    json_str = json.dumps(
        report_data(lang, objectives, snapshot.scores, snapshot.notes, seal_definitions),
        indent=2,
        ensure_ascii=False,
    )
    st.download_button(
        ui.export_json,
        data=json_str,
        file_name=f"{stem}.json",
        mime="application/json",
        use_container_width=True
    )

    # st.code has a built-in copy-to-clipboard button
    with st.expander(ui.export):
        st.code(text_report, language=None)
