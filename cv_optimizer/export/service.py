from dataclasses import dataclass

from cv_optimizer.export.exceptions import ExportError, UnknownTemplateError
from cv_optimizer.export.factory import ExporterFactory
from cv_optimizer.export.templates import get_template
from cv_optimizer.logging.logger import Log

_ALTERNATIVE_FORMAT = {"pdf": "DOCX", "docx": "PDF"}


@dataclass(frozen=True)
class ExportOutcome:
    """Exported bytes, or ``None`` plus a warning telling the user what to try."""

    data: bytes | None
    media_type: str
    file_extension: str
    warning: str | None = None

    @property
    def ok(self) -> bool:
        return self.data is not None


def export_document(text: str, fmt: str, template_name: str = "eu") -> ExportOutcome:
    """Render *text* to ``pdf`` or ``docx`` without raising on rendering failures."""
    exporter = ExporterFactory.create(fmt)
    try:
        template = get_template(template_name)
        data = exporter.export(text, template)
    except UnknownTemplateError as exc:
        Log.warning(str(exc))
        return ExportOutcome(None, exporter.media_type, exporter.file_extension, str(exc))
    except ExportError as exc:
        Log.error(f"Export to {fmt} failed: {exc}")
        alternative = _ALTERNATIVE_FORMAT[fmt.lower()]
        warning = (
            f"Could not generate the {fmt.upper()} file. Try downloading as {alternative} instead."
        )
        return ExportOutcome(None, exporter.media_type, exporter.file_extension, warning)

    Log.info(f"Exported {len(data)} bytes", format=fmt, template=template.name)
    return ExportOutcome(data, exporter.media_type, exporter.file_extension)
