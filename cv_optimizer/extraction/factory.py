from cv_optimizer.config.settings import Settings
from cv_optimizer.extraction.base import BaseTextExtractor
from cv_optimizer.extraction.docx_adapter import DocxTextExtractor
from cv_optimizer.extraction.pdf_adapters import PdfPlumberExtractor, PyMuPdfExtractor
from cv_optimizer.extraction.plain_text import PlainTextExtractor


class ExtractorFactory:
    """Creates the text extractor for a file extension."""

    PDF_ENGINES: dict[str, type[BaseTextExtractor]] = {
        "pdfplumber": PdfPlumberExtractor,
        "pymupdf": PyMuPdfExtractor,
    }

    @classmethod
    def create(cls, extension: str, settings: Settings) -> BaseTextExtractor | None:
        """Return an extractor, or None for formats without a parser (``.doc``)."""
        extension = extension.lower()
        if extension == ".pdf":
            return cls.create_pdf_extractor(settings)
        if extension == ".docx":
            return DocxTextExtractor()
        if extension == ".txt":
            return PlainTextExtractor()
        return None

    @classmethod
    def create_pdf_extractor(cls, settings: Settings) -> BaseTextExtractor:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.PDF_ENGINES.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.PDF_ENGINES)}"
            )
        return adapter_cls()
