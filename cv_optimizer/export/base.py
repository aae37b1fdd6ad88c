from abc import ABC, abstractmethod

from cv_optimizer.export.templates import ExportTemplate


class BaseExporter(ABC):
    """Contract for all CV export adapters."""

    media_type: str = "application/octet-stream"
    file_extension: str = ""

    @abstractmethod
    def export(self, text: str, template: ExportTemplate) -> bytes:
        """Render Markdown-like CV text to file bytes.

        Output is byte-identical for identical ``(text, template)``.

        Raises:
            ExportError: on any rendering failure.
        """
