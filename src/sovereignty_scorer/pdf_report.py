"""PDF report generator using reportlab."""

from io import BytesIO
from datetime import datetime
from typing import Mapping, Optional, Sequence
from xml.sax.saxutils import escape

from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import inch
from reportlab.lib.colors import HexColor
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle, KeepTogether

from .report import DEFAULT_PLACEHOLDER, ReportLabels
from .schema import Objective, SealDefinition
from .scorer import composite_score, score_breakdown, seal_for


# EU flag colors
EU_BLUE = HexColor('#003399')
EU_GOLD = HexColor('#FFCC00')
LIGHT_GRAY = HexColor('#F5F5F5')
DARK_GRAY = HexColor('#333333')


def generate_pdf_report(
    title: str,
    subtitle: str,
    objectives: Sequence[Objective],
    scores: Mapping[str, float],
    notes: Mapping[str, str],
    seal_definitions: Sequence[SealDefinition],
    labels: Optional[ReportLabels] = None,
    placeholder: str = DEFAULT_PLACEHOLDER,
) -> bytes:
    """Generate a PDF report of an assessment.

    Carries the same content as the text report: composite score, then per
    objective its SEAL level and evidence, plus a weighted breakdown table.

    Returns:
        PDF file as bytes
    """
    labels = labels or ReportLabels()

    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        rightMargin=0.75 * inch,
        leftMargin=0.75 * inch,
        topMargin=0.75 * inch,
        bottomMargin=0.75 * inch,
        title=title,
    )

    story = []
    styles = _get_custom_styles()

    story.append(Paragraph(escape(title), styles['ReportTitle']))
    story.append(Paragraph(escape(subtitle), styles['ReportHeading2']))
    story.append(Paragraph(
        f"{datetime.now().strftime('%Y-%m-%d %H:%M')}",
        styles['SmallText']
    ))
    story.append(Spacer(1, 0.3 * inch))

    total = composite_score(scores, objectives)
    story.append(Paragraph(f"{escape(labels.composite_score)}: {total:.1f}%", styles['ScoreLine']))
    story.append(Spacer(1, 0.2 * inch))

    story.append(_breakdown_table(objectives, scores))
    story.append(Spacer(1, 0.3 * inch))

    for obj in objectives:
        _add_objective_to_story(story, styles, obj, scores, notes, seal_definitions, labels, placeholder)

    doc.build(story)
    buffer.seek(0)
    return buffer.getvalue()


def _breakdown_table(objectives: Sequence[Objective], scores: Mapping[str, float]) -> Table:
    rows = [["", "SEAL", "%", "+"]]
    for item in score_breakdown(scores, objectives):
        rows.append([
            f"{item.objective_id} {item.name}",
            str(item.score),
            f"{item.weight:.0%}",
            f"{item.contribution:.1f}",
        ])

    table = Table(rows, colWidths=[4.2 * inch, 0.7 * inch, 0.7 * inch, 0.9 * inch])
    table.setStyle(TableStyle([
        ('BACKGROUND', (0, 0), (-1, 0), EU_BLUE),
        ('TEXTCOLOR', (0, 0), (-1, 0), HexColor('#FFFFFF')),
        ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
        ('FONTNAME', (0, 1), (-1, -1), 'Helvetica'),
        ('FONTSIZE', (0, 0), (-1, -1), 9),
        ('ALIGN', (1, 0), (-1, -1), 'CENTER'),
        ('ROWBACKGROUNDS', (0, 1), (-1, -1), [HexColor('#FFFFFF'), LIGHT_GRAY]),
        ('GRID', (0, 0), (-1, -1), 0.5, HexColor('#CCCCCC')),
        ('PADDING', (0, 0), (-1, -1), 6),
        ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
    ]))
    return table


def _get_custom_styles():
    """Create custom paragraph styles for the report."""
    styles = getSampleStyleSheet()

    # Use unique names to avoid conflicts with built-in styles
    styles.add(ParagraphStyle(
        'ReportTitle',
        parent=styles['Title'],
        textColor=EU_BLUE,
        fontSize=22,
        spaceAfter=8
    ))

    styles.add(ParagraphStyle(
        'ReportHeading2',
        parent=styles['Heading2'],
        fontSize=12,
        spaceBefore=4,
        spaceAfter=4
    ))

    styles.add(ParagraphStyle(
        'ScoreLine',
        parent=styles['Heading1'],
        textColor=EU_BLUE,
        fontSize=16,
    ))

    styles.add(ParagraphStyle(
        'ObjectiveTitle',
        parent=styles['Heading2'],
        textColor=EU_BLUE,
        fontSize=13,
        spaceBefore=10,
        spaceAfter=2
    ))

    styles.add(ParagraphStyle(
        'SealLine',
        parent=styles['Normal'],
        fontName='Helvetica-Bold',
        textColor=DARK_GRAY,
        spaceAfter=2
    ))

    styles.add(ParagraphStyle(
        'SmallText',
        parent=styles['Normal'],
        fontSize=9,
        textColor=HexColor('#666666')
    ))

    return styles


def _add_objective_to_story(
    story: list,
    styles,
    obj: Objective,
    scores: Mapping[str, float],
    notes: Mapping[str, str],
    seal_definitions: Sequence[SealDefinition],
    labels: ReportLabels,
    placeholder: str,
) -> None:
    """Add an objective section to the PDF story."""
    seal = seal_for(scores.get(obj.id, 0), seal_definitions)
    note = (notes.get(obj.id) or "").strip() or placeholder

    story.append(KeepTogether([
        Paragraph(f"[{escape(obj.id)}] {escape(obj.name)}", styles['ObjectiveTitle']),
        Paragraph(f"SEAL-{seal.level}: {escape(seal.name)}", styles['SealLine']),
        Paragraph(
            f"<b>{escape(labels.evidence)}:</b> {escape(note).replace(chr(10), '<br/>')}",
            styles['Normal']
        ),
    ]))
