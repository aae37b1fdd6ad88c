import io
import logging
from collections.abc import Iterator
from pathlib import Path

import docx
import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from cv_optimizer.config.settings import Settings


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep real provider keys and .env files out of every test."""
    for model in ("OPENAI", "CLAUDE", "GEMINI", "QWEN", "DEEPSEEK"):
        monkeypatch.delenv(f"{model}_API_KEY", raising=False)
    monkeypatch.delenv("USE_MOCK_ANALYZER", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(api_keys_store_path=tmp_path / "keys" / "api_keys.json")


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def cv_pdf_bytes() -> bytes:
    """A one-page CV with a name line, a section heading and glyph bullets."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Jane Smith")
    c.drawString(72, 700, "Skills")
    c.drawString(72, 680, "* Python")
    c.drawString(72, 660, "* Financial modelling")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def cv_docx_bytes() -> bytes:
    """A Word CV using heading and list styles plus a small table."""
    document = docx.Document()
    document.add_heading("Jane Smith", level=1)
    document.add_paragraph("jane@example.com")
    document.add_heading("Skills", level=2)
    document.add_paragraph("Python", style="List Bullet")
    document.add_paragraph("Climate finance", style="List Bullet")
    table = document.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Language"
    table.rows[0].cells[1].text = "French"
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def empty_docx_bytes() -> bytes:
    buf = io.BytesIO()
    docx.Document().save(buf)
    return buf.getvalue()


@pytest.fixture(autouse=True)
def _restore_logger() -> Iterator[None]:
    """Undo handlers and levels set by Log.configure during a test."""
    logger = logging.getLogger("cv_optimizer")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
