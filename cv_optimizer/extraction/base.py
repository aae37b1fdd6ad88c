from abc import ABC, abstractmethod


class BaseTextExtractor(ABC):
    """Contract for all document text extraction adapters."""

    @abstractmethod
    def extract(self, raw_bytes: bytes) -> str:
        """Extract Markdown-ish plain text from raw document bytes.

        Args:
            raw_bytes: Raw file content as uploaded.

        Returns:
            Extracted text, stripped. Empty when the document has no text layer.

        Raises:
            ExtractionError: if the bytes cannot be parsed.
        """
