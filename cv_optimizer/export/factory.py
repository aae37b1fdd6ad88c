from typing import ClassVar

from cv_optimizer.export.base import BaseExporter
from cv_optimizer.export.docx_exporter import DocxExporter
from cv_optimizer.export.pdf_exporter import PdfExporter


class ExporterFactory:
    """Creates the exporter for a download format."""

    ADAPTERS: ClassVar[dict[str, type[BaseExporter]]] = {
        "pdf": PdfExporter,
        "docx": DocxExporter,
    }

    @classmethod
    def create(cls, fmt: str) -> BaseExporter:
        adapter_cls = cls.ADAPTERS.get(fmt.lower())
        if adapter_cls is None:
            raise ValueError(f"Unknown export format '{fmt}'. Choose from: {list(cls.ADAPTERS)}")
        return adapter_cls()
