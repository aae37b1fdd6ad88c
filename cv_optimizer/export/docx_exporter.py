import io
import zipfile
from datetime import datetime, timezone

from docx import Document
from docx.shared import Pt, RGBColor
from docx.text.paragraph import Paragraph

from cv_optimizer.export.base import BaseExporter
from cv_optimizer.export.exceptions import ExportError
from cv_optimizer.export.templates import ExportTemplate
from cv_optimizer.rendering.blocks import BlockKind, to_blocks

_FIXED_TIMESTAMP = datetime(2000, 1, 1, tzinfo=timezone.utc)
_ZIP_DATE_TIME = (1980, 1, 1, 0, 0, 0)


class DocxExporter(BaseExporter):
    """Renders CV text to a Word document with python-docx.

    python-docx stamps the core properties and every ZIP entry with the
    current time; both are pinned so identical input gives identical bytes.
    """

    media_type = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
    file_extension = ".docx"

    def export(self, text: str, template: ExportTemplate) -> bytes:
        try:
            document = Document()
            self._apply_template(document, template)
            self._add_blocks(document, text, template)
            self._pin_core_properties(document)
            buffer = io.BytesIO()
            document.save(buffer)
        except Exception as exc:
            raise ExportError(f"DOCX rendering failed: {exc}") from exc
        return _pin_zip_timestamps(buffer.getvalue())

    @staticmethod
    def _apply_template(document, template: ExportTemplate) -> None:
        normal = document.styles["Normal"].font
        normal.name = template.docx_font
        normal.size = Pt(10.5)

    @staticmethod
    def _add_blocks(document, text: str, template: ExportTemplate) -> None:
        accent = RGBColor.from_string(template.accent_color.lstrip("#").upper())
        for block in to_blocks(text):
            if block.kind is BlockKind.BLANK:
                continue
            if block.kind is BlockKind.HEADING1:
                _color_runs(document.add_heading(block.text, level=1), accent)
            elif block.kind is BlockKind.HEADING2:
                _color_runs(document.add_heading(block.text, level=2), accent)
            elif block.kind is BlockKind.LIST_ITEM:
                document.add_paragraph(block.text, style="List Bullet")
            else:
                document.add_paragraph(block.text)

    @staticmethod
    def _pin_core_properties(document) -> None:
        props = document.core_properties
        props.author = ""
        props.last_modified_by = ""
        props.revision = 1
        props.created = _FIXED_TIMESTAMP
        props.modified = _FIXED_TIMESTAMP


def _color_runs(paragraph: Paragraph, color: RGBColor) -> None:
    for run in paragraph.runs:
        run.font.color.rgb = color


def _pin_zip_timestamps(data: bytes) -> bytes:
    out = io.BytesIO()
    with zipfile.ZipFile(io.BytesIO(data)) as source, zipfile.ZipFile(
        out, "w", zipfile.ZIP_DEFLATED
    ) as target:
        for info in source.infolist():
            pinned = zipfile.ZipInfo(info.filename, date_time=_ZIP_DATE_TIME)
            pinned.compress_type = zipfile.ZIP_DEFLATED
            pinned.external_attr = 0o600 << 16
            target.writestr(pinned, source.read(info.filename))
    return out.getvalue()
