from cv_optimizer.config.settings import Settings
from cv_optimizer.extraction.exceptions import ExtractionError
from cv_optimizer.extraction.factory import ExtractorFactory
from cv_optimizer.extraction.header import format_size, parse_header, synthesize_header
from cv_optimizer.extraction.markers import PLACEHOLDER_PHRASE, is_opaque_content, sentinel_for
from cv_optimizer.extraction.models import ExtractionResult, ProvenanceHeader, UploadedDocument
from cv_optimizer.logging.logger import Log

_PDF_EXTENSION = ".pdf"
_BINARY_EXTENSIONS = frozenset({_PDF_EXTENSION, ".doc", ".docx"})


class DocumentReader:
    """Reads an upload into an ExtractionResult.

    Binary formats get a provenance header. When a parser fails or finds no
    text, the body falls back to a sentinel plus placeholder sentence instead
    of raising, so the flow always continues with something to sanitize.
    Text uploads that turn out to hold PDF or Word bytes get the same fallback.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def read(self, document: UploadedDocument) -> ExtractionResult:
        text = self.read_text(document)
        header, remainder = parse_header(text)
        result = ExtractionResult(
            provenance_header=header,
            body_text=remainder,
            is_opaque_marker=is_opaque_content(text),
        )
        Log.info(
            f"Extracted {len(remainder)} chars from {document.file_name}",
            opaque=result.is_opaque_marker,
        )
        return result

    def read_text(self, document: UploadedDocument) -> str:
        """Return the full extracted text, header included."""
        extension = document.extension
        body = self._extract_body(document)
        if extension not in _BINARY_EXTENSIONS:
            if is_opaque_content(body):
                Log.warning(f"{document.file_name} holds binary document content, not text")
                origin = _PDF_EXTENSION if body.startswith("%PDF") else extension
                return _placeholder(origin, document)
            return body
        header = ProvenanceHeader(
            file_name=document.file_name,
            file_type=document.mime_type or "application/octet-stream",
            file_size=format_size(document.declared_size),
        )
        if not body:
            body = _placeholder(extension, document)
        return synthesize_header(header) + body

    def _extract_body(self, document: UploadedDocument) -> str:
        extractor = ExtractorFactory.create(document.extension, self._settings)
        if extractor is None:
            Log.warning(f"No text extractor for {document.extension} files: {document.file_name}")
            return ""
        try:
            return extractor.extract(document.raw_bytes)
        except ExtractionError as exc:
            Log.warning(f"Could not extract text from {document.file_name}: {exc}")
            return ""


def _placeholder(extension: str, document: UploadedDocument) -> str:
    return f"{sentinel_for(extension)}\n{PLACEHOLDER_PHRASE} of {document.file_name}."
