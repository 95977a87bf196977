"""PDF rendering of generated legal documents."""

from io import BytesIO
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_JUSTIFY, TA_LEFT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer

from samarthaa.core.modules.document.utils import DISCLAIMER, is_heading, outline_document

MARGIN = 50


def render_pdf(content: str) -> bytes:
    """Render plain-text document content as an A4 PDF.

    The first line becomes a centred title, numbered lines become bold
    headings and everything else is justified body text.
    """
    outline = outline_document(content)
    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        "LegalTitle", parent=styles["Heading1"], fontName="Helvetica-Bold", fontSize=16, alignment=TA_CENTER, spaceAfter=24
    )
    heading_style = ParagraphStyle(
        "LegalHeading", parent=styles["Normal"], fontName="Helvetica-Bold", fontSize=11, alignment=TA_LEFT, spaceBefore=6
    )
    body_style = ParagraphStyle(
        "LegalBody", parent=styles["Normal"], fontName="Helvetica", fontSize=11, alignment=TA_JUSTIFY, leading=15, spaceBefore=3
    )
    disclaimer_style = ParagraphStyle(
        "LegalDisclaimer", parent=styles["Normal"], fontSize=8, alignment=TA_CENTER, textColor=colors.grey
    )

    # Paragraph parses inline markup, so document text is escaped
    story = [Paragraph(escape(outline.title), title_style)]
    for line in outline.lines:
        story.append(Paragraph(escape(line), heading_style if is_heading(line) else body_style))
    story.append(Spacer(1, 24))
    story.append(Paragraph(DISCLAIMER, disclaimer_style))

    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer, pagesize=A4, leftMargin=MARGIN, rightMargin=MARGIN, topMargin=MARGIN, bottomMargin=MARGIN
    )
    doc.build(story)
    return buffer.getvalue()
