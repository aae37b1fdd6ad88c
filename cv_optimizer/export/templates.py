from dataclasses import dataclass

from cv_optimizer.export.exceptions import UnknownTemplateError


@dataclass(frozen=True)
class ExportTemplate:
    """Visual settings shared by the PDF and DOCX exporters."""

    name: str
    label: str
    accent_color: str
    body_font: str
    heading_font: str
    docx_font: str


TEMPLATES: dict[str, ExportTemplate] = {
    "eu": ExportTemplate(
        name="eu",
        label="EU Standard",
        accent_color="#2B6CB0",
        body_font="Helvetica",
        heading_font="Helvetica-Bold",
        docx_font="Calibri",
    ),
    "worldbank": ExportTemplate(
        name="worldbank",
        label="World Bank",
        accent_color="#1F2937",
        body_font="Times-Roman",
        heading_font="Times-Bold",
        docx_font="Times New Roman",
    ),
}


def get_template(name: str) -> ExportTemplate:
    template = TEMPLATES.get(name.strip().lower())
    if template is None:
        raise UnknownTemplateError(
            f"Unknown export template '{name}'. Choose from: {list(TEMPLATES)}"
        )
    return template
