"""UI components for the sovereignty assessment app."""

from sovereignty_app.components.objective_card import render_objective_cards
from sovereignty_app.components.radar_chart import render_radar_chart
from sovereignty_app.components.advisor_panel import render_advisor_panel
from sovereignty_app.components.auto_assess_section import render_auto_assess_section
from sovereignty_app.components.seal_guide import render_seal_guide
from sovereignty_app.components.export_section import render_export_section

__all__ = [
    "render_objective_cards",
    "render_radar_chart",
    "render_advisor_panel",
    "render_auto_assess_section",
    "render_seal_guide",
    "render_export_section",
]
