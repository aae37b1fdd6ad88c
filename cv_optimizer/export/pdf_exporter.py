import io
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.units import inch
from reportlab.platypus import Flowable, Paragraph, SimpleDocTemplate, Spacer

from cv_optimizer.export.base import BaseExporter
from cv_optimizer.export.exceptions import ExportError
from cv_optimizer.export.templates import ExportTemplate
from cv_optimizer.rendering.blocks import Block, BlockKind, to_blocks


class PdfExporter(BaseExporter):
    """Renders CV text to PDF with reportlab platypus."""

    media_type = "application/pdf"
    file_extension = ".pdf"

    def export(self, text: str, template: ExportTemplate) -> bytes:
        buffer = io.BytesIO()
        try:
            doc = SimpleDocTemplate(
                buffer,
                pagesize=A4,
                leftMargin=0.75 * inch,
                rightMargin=0.75 * inch,
                topMargin=0.75 * inch,
                bottomMargin=0.75 * inch,
                title=_document_title(text),
                author="",
                creator="cv-optimizer",
                invariant=1,
            )
            doc.build(self._flowables(to_blocks(text), _styles(template)) or [Spacer(1, 1)])
        except Exception as exc:
            raise ExportError(f"PDF rendering failed: {exc}") from exc
        return buffer.getvalue()

    @staticmethod
    def _flowables(blocks: list[Block], styles: dict[str, ParagraphStyle]) -> list[Flowable]:
        flowables: list[Flowable] = []
        for block in blocks:
            if block.kind is BlockKind.BLANK:
                flowables.append(Spacer(1, 6))
            elif block.kind is BlockKind.HEADING1:
                flowables.append(Paragraph(escape(block.text), styles["title"]))
            elif block.kind is BlockKind.HEADING2:
                flowables.append(Paragraph(escape(block.text), styles["section"]))
            elif block.kind is BlockKind.LIST_ITEM:
                flowables.append(
                    Paragraph(escape(block.text), styles["bullet"], bulletText="•")
                )
            else:
                flowables.append(Paragraph(escape(block.text), styles["body"]))
        return flowables


def _styles(template: ExportTemplate) -> dict[str, ParagraphStyle]:
    accent = colors.HexColor(template.accent_color)
    return {
        "title": ParagraphStyle(
            "CvTitle",
            fontName=template.heading_font,
            fontSize=18,
            leading=22,
            textColor=accent,
            spaceAfter=6,
        ),
        "section": ParagraphStyle(
            "CvSection",
            fontName=template.heading_font,
            fontSize=12,
            leading=15,
            textColor=accent,
            spaceBefore=8,
            spaceAfter=4,
        ),
        "body": ParagraphStyle(
            "CvBody",
            fontName=template.body_font,
            fontSize=10,
            leading=13,
        ),
        "bullet": ParagraphStyle(
            "CvBullet",
            fontName=template.body_font,
            fontSize=10,
            leading=13,
            leftIndent=14,
            bulletIndent=4,
        ),
    }


def _document_title(text: str) -> str:
    for block in to_blocks(text):
        if block.kind is BlockKind.HEADING1:
            return block.text
    return "CV"
