from pathlib import Path

import pytest

from cv_optimizer.config.settings import Settings
from cv_optimizer.export.service import export_document
from cv_optimizer.extraction.exceptions import UploadValidationError
from cv_optimizer.extraction.markers import SENTINELS
from cv_optimizer.extraction.models import UploadedDocument
from cv_optimizer.keys.api_key_store import ApiKeyStore
from cv_optimizer.processor.models import ProcessingRequest
from cv_optimizer.processor.processor import build_processor
from cv_optimizer.rendering.blocks import BlockKind

_SUGGESTION_SECTIONS = ["Professional Summary", "Experience", "Skills", "Education"]


@pytest.fixture()
def store(settings: Settings) -> ApiKeyStore:
    return ApiKeyStore(settings.api_keys_store_path)


@pytest.mark.integration
class TestProcessorPipeline:
    def test_plain_text_cv_without_keys_uses_offline_analysis(
        self, settings: Settings, store: ApiKeyStore
    ) -> None:
        cv = UploadedDocument(
            raw_bytes=b"Jane Doe\nEconomist\n\nPython, SQL\n",
            file_name="jane.txt",
        )
        outcome = build_processor(settings, store).process(ProcessingRequest(cv=cv))

        assert outcome.report.source == "mock"
        assert outcome.sanitized_cv.startswith("# Jane Doe\n\n")
        assert outcome.result.improved_text.startswith("# Jane Doe")
        assert "## SKILLS & CERTIFICATIONS" in outcome.result.improved_text
        assert [s.section for s in outcome.result.suggestions[:4]] == _SUGGESTION_SECTIONS
        assert outcome.result.models_used == ("openai",)
        assert outcome.preview[0].kind is BlockKind.HEADING1

    def test_docx_cv_with_tor_and_competencies(
        self, settings: Settings, store: ApiKeyStore, cv_docx_bytes: bytes
    ) -> None:
        cv = UploadedDocument(raw_bytes=cv_docx_bytes, file_name="jane.docx")
        tor = UploadedDocument(
            raw_bytes=b"Conduct financial analysis and review of climate investments.",
            file_name="tor.txt",
        )
        request = ProcessingRequest(
            cv=cv,
            tor=tor,
            competencies="Stakeholder engagement",
            models=("claude", "gemini"),
        )
        outcome = build_processor(settings, store, request.models).process(request)

        assert outcome.cv_extraction.provenance_header is not None
        assert outcome.sanitized_tor is not None
        assert outcome.sanitized_tor.startswith("# Terms of Reference\n\n")
        text = outcome.result.improved_text
        assert text.startswith("# Jane Smith")
        assert "- Stakeholder engagement" in text
        assert outcome.result.models_used == ("claude", "gemini")
        assert any(s.section == "Gemini Analysis" for s in outcome.result.suggestions)
        assert outcome.warnings == ()

    def test_scanned_pdf_cv_degrades_with_warning(
        self, settings: Settings, store: ApiKeyStore, empty_pdf_bytes: bytes
    ) -> None:
        cv = UploadedDocument(raw_bytes=empty_pdf_bytes, file_name="scan.pdf")
        outcome = build_processor(settings, store).process(ProcessingRequest(cv=cv))

        assert outcome.cv_extraction.is_opaque_marker is True
        assert "Could not extract readable text from scan.pdf" in outcome.warnings
        for sentinel in SENTINELS:
            assert sentinel not in outcome.result.improved_text
        assert outcome.result.suggestions

    def test_pdf_cv_exports_to_both_formats(
        self, settings: Settings, store: ApiKeyStore, cv_pdf_bytes: bytes
    ) -> None:
        cv = UploadedDocument(raw_bytes=cv_pdf_bytes, file_name="jane.pdf")
        outcome = build_processor(settings, store).process(ProcessingRequest(cv=cv))

        assert outcome.sanitized_cv.startswith("# Jane Smith\n\n")
        for fmt in ("pdf", "docx"):
            exported = export_document(outcome.result.improved_text, fmt)
            assert exported.ok, exported.warning

    def test_pdf_bytes_in_txt_upload_never_become_cv_text(self, tmp_path: Path) -> None:
        settings = Settings(api_keys_store_path=tmp_path / "keys.json", use_mock_analyzer=True)
        cv = UploadedDocument(
            raw_bytes=b"%PDF-1.7\n1 0 obj << /Type /Catalog >>\nendobj\n", file_name="cv.txt"
        )
        outcome = build_processor(settings, ApiKeyStore(settings.api_keys_store_path)).process(
            ProcessingRequest(cv=cv)
        )

        assert outcome.cv_extraction.is_opaque_marker is True
        assert "Could not extract readable text from cv.txt" in outcome.warnings
        assert outcome.sanitized_cv == "# CV Content"
        assert "%PDF" not in outcome.result.improved_text
        assert "Catalog" not in outcome.result.improved_text

    def test_oversized_upload_is_rejected(self, store: ApiKeyStore, tmp_path: Path) -> None:
        settings = Settings(api_keys_store_path=tmp_path / "keys.json", max_upload_size_bytes=10)
        cv = UploadedDocument(raw_bytes=b"x" * 11, file_name="big.txt")
        with pytest.raises(UploadValidationError, match="maximum limit"):
            build_processor(settings, store).process(ProcessingRequest(cv=cv))
