"""Tests for the PDF report generator."""

from sovereignty_scorer.catalog import ui_strings
from sovereignty_scorer.pdf_report import generate_pdf_report
from sovereignty_scorer.report import ReportLabels
from sovereignty_scorer.schema import Language


class TestGeneratePdfReport:

    def test_returns_pdf_bytes(self, en_objectives, en_seals):
        pdf = generate_pdf_report(
            "EU Cloud Sovereignty Assessment",
            "Framework",
            en_objectives,
            {"SOV-1": 4, "SOV-4": 4},
            {"SOV-1": "EU headquarters\nNo foreign shareholders"},
            en_seals,
        )
        assert isinstance(pdf, bytes)
        assert pdf.startswith(b"%PDF")

    def test_escapes_markup_in_notes(self, en_objectives, en_seals):
        pdf = generate_pdf_report(
            "Title <b>",
            "Subtitle & more",
            en_objectives,
            {},
            {"SOV-2": "<script>alert('x')</script> & <unclosed"},
            en_seals,
        )
        assert pdf.startswith(b"%PDF")

    def test_localized_spanish_report(self, es_catalog):
        objectives, seals = es_catalog
        ui = ui_strings(Language.ES)
        pdf = generate_pdf_report(
            ui.title,
            ui.subtitle,
            objectives,
            {obj.id: 2 for obj in objectives},
            {},
            seals,
            labels=ReportLabels.from_ui(ui),
            placeholder="---",
        )
        assert pdf.startswith(b"%PDF")
