import io

import docx

from cv_optimizer.extraction.base import BaseTextExtractor
from cv_optimizer.extraction.exceptions import DocxExtractionError

_HEADING_PREFIXES = {
    "Title": "# ",
    "Heading 1": "# ",
    "Heading 2": "## ",
    "Heading 3": "## ",
}


class DocxTextExtractor(BaseTextExtractor):
    """Extracts Markdown-ish text from DOCX using python-docx.

    Heading styles become ``#``/``##`` lines and list paragraphs become
    ``- `` items, so that section detection works on Word CVs the same way it
    does on plain text.
    """

    def extract(self, raw_bytes: bytes) -> str:
        try:
            document = docx.Document(io.BytesIO(raw_bytes))
        except Exception as exc:
            raise DocxExtractionError(f"python-docx extraction failed: {exc}") from exc

        lines: list[str] = []
        for paragraph in document.paragraphs:
            text = paragraph.text.strip()
            if not text:
                lines.append("")
                continue
            lines.append(self._prefix_for(paragraph.style.name if paragraph.style else "") + text)

        for table in document.tables:
            for row in table.rows:
                cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
                if cells:
                    lines.append(" | ".join(cells))

        return "\n".join(lines).strip()

    @staticmethod
    def _prefix_for(style_name: str) -> str:
        if style_name in _HEADING_PREFIXES:
            return _HEADING_PREFIXES[style_name]
        if style_name.startswith("List"):
            return "- "
        return ""
