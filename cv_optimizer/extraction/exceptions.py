class ExtractionError(Exception):
    """Base exception for document intake and text extraction."""


class UploadValidationError(ExtractionError):
    """Raised when an upload is rejected before any processing.

    The message is user-facing and is shown verbatim.
    """


class DocxExtractionError(ExtractionError):
    """Raised when a Word document cannot be parsed."""


class PdfExtractionError(ExtractionError):
    """Raised when a PDF cannot be parsed."""
