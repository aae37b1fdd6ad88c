from cv_optimizer.config.settings import Settings
from cv_optimizer.extraction.exceptions import UploadValidationError
from cv_optimizer.extraction.models import UploadedDocument


def validate_upload(document: UploadedDocument, settings: Settings) -> None:
    """Reject oversized files and disallowed extensions.

    Raises:
        UploadValidationError: with a message meant for the end user.
    """
    limit = settings.max_upload_size_bytes
    if document.declared_size > limit:
        raise UploadValidationError(
            f"File size exceeds the maximum limit of {_format_megabytes(limit)}MB"
        )
    allowed = [ext.lower() for ext in settings.allowed_extensions]
    if document.extension not in allowed:
        raise UploadValidationError(
            f"File type not supported. Please upload {', '.join(allowed)} files."
        )


def _format_megabytes(size_bytes: int) -> str:
    megabytes = size_bytes / (1024 * 1024)
    return f"{megabytes:g}"
