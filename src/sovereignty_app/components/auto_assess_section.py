"""Auto-assessment section: solution description and optional diagram."""

import streamlit as st

from sovereignty_scorer.schema import UIStrings

from sovereignty_app.state import get_state, set_state
from sovereignty_app.components.advisor_panel import request_auto_assessment, request_image_description


IMAGE_TYPES = ["png", "jpg", "jpeg", "webp"]


def _merge_pending_description() -> None:
    pending = get_state('pending_description')
    if pending:
        current = (get_state('auto_description') or "").strip()
        set_state('auto_description', f"{current}\n\n{pending}".strip())
        set_state('pending_description', None)


def render_auto_assess_section(ui: UIStrings) -> None:
    """Render the description box, diagram upload and auto-fill button."""
    with st.expander(ui.auto_assess, expanded=False):
        _merge_pending_description()

        description = st.text_area(
            ui.auto_assess,
            key='auto_description',
            placeholder=ui.auto_assess_placeholder,
            height=140,
            label_visibility="collapsed",
        )

        image = st.file_uploader(ui.image_upload, type=IMAGE_TYPES, key='auto_image')

        col1, col2 = st.columns(2)
        with col1:
            if st.button(ui.image_describe, disabled=image is None, use_container_width=True):
                request_image_description(image.getvalue(), image.type or "image/png", ui)
        with col2:
            if st.button(
                ui.auto_assess_button,
                disabled=not (description or "").strip(),
                type="primary",
                use_container_width=True,
            ):
                request_auto_assessment(description.strip(), ui)

    message = get_state('auto_message')
    if message:
        kind, text = message
        if kind == 'success':
            st.success(text)
        else:
            st.error(text)
        set_state('auto_message', None)
