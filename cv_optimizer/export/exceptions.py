class ExportError(Exception):
    """Raised when a CV cannot be rendered to a downloadable file."""


class UnknownTemplateError(ExportError):
    """Raised when an export template name is not recognised."""
