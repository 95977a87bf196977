"""Word (DOCX) rendering of generated legal documents."""

from io import BytesIO

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Pt, RGBColor

from samarthaa.core.modules.document.utils import DISCLAIMER, is_heading, outline_document


def render_docx(content: str) -> bytes:
    """Render plain-text document content as a DOCX file with the same layout as the PDF."""
    outline = outline_document(content)
    doc = Document()

    title = doc.add_paragraph()
    title.alignment = WD_ALIGN_PARAGRAPH.CENTER
    title.paragraph_format.space_after = Pt(20)
    title_run = title.add_run(outline.title)
    title_run.bold = True
    title_run.font.size = Pt(16)

    for line in outline.lines:
        heading = is_heading(line)
        paragraph = doc.add_paragraph()
        paragraph.alignment = WD_ALIGN_PARAGRAPH.JUSTIFY
        paragraph.paragraph_format.space_before = Pt(10 if heading else 0)
        paragraph.paragraph_format.space_after = Pt(6)
        run = paragraph.add_run(line)
        run.bold = heading
        run.font.size = Pt(12 if heading else 11)

    disclaimer = doc.add_paragraph()
    disclaimer.paragraph_format.space_before = Pt(20)
    disclaimer_run = disclaimer.add_run(DISCLAIMER)
    disclaimer_run.italic = True
    disclaimer_run.font.size = Pt(9)
    disclaimer_run.font.color.rgb = RGBColor(0x66, 0x66, 0x66)

    buffer = BytesIO()
    doc.save(buffer)
    return buffer.getvalue()
