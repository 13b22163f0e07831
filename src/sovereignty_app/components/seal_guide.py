"""SEAL level guide."""

from typing import Sequence

import streamlit as st

from sovereignty_scorer.schema import SealDefinition, UIStrings


# Badge colors from red (no sovereignty) to green (full sovereignty)
SEAL_COLORS = {
    0: ("#FDE7E9", "#A4262C"),
    1: ("#FFF4CE", "#8A5A00"),
    2: ("#FFF4CE", "#797673"),
    3: ("#E6F2FB", "#003399"),
    4: ("#DFF6DD", "#107C10"),
}


def render_seal_guide(seal_definitions: Sequence[SealDefinition], ui: UIStrings) -> None:
    with st.expander(ui.seal_guide, expanded=False):
        for seal in seal_definitions:
            bg, fg = SEAL_COLORS.get(seal.level, ("#E6E6E6", "#333"))
            st.markdown(
                f'<span class="seal-badge" style="background:{bg}; color:{fg};">'
                f'SEAL-{seal.level}</span> **{seal.name}**',
                unsafe_allow_html=True
            )
            if seal.description:
                st.caption(seal.description)
