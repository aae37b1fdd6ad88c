import io
import re

import pdfplumber
import pymupdf

from cv_optimizer.extraction.base import BaseTextExtractor
from cv_optimizer.extraction.exceptions import PdfExtractionError

_BULLET_RE = re.compile(r"^\s*[•▪●‣⁃·*]\s+")


def _normalize_pages(pages: list[str]) -> str:
    """Join page texts and turn glyph bullets into Markdown list items."""
    lines: list[str] = []
    for page in pages:
        for line in page.splitlines():
            lines.append(_BULLET_RE.sub("- ", line).rstrip())
        lines.append("")
    return "\n".join(lines).strip()


class PdfPlumberExtractor(BaseTextExtractor):
    """Extracts text from PDF using pdfplumber."""

    def extract(self, raw_bytes: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(raw_bytes)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber extraction failed: {exc}") from exc
        return _normalize_pages(pages)


class PyMuPdfExtractor(BaseTextExtractor):
    """Extracts text from PDF using PyMuPDF."""

    def extract(self, raw_bytes: bytes) -> str:
        try:
            with pymupdf.open(stream=raw_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() for page in doc]
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf extraction failed: {exc}") from exc
        return _normalize_pages(pages)
