"""Parsing and rendering of the ``# Content extracted from`` header block."""

import re

from cv_optimizer.extraction.models import ProvenanceHeader

_HEADER_RE = re.compile(
    r"^[ \t]*# Content extracted from[ \t]*(?P<file_name>[^\n]*?)[ \t]*\r?\n"
    r"(?:[ \t]*\r?\n)*"
    r"[ \t]*File type:[ \t]*(?P<file_type>[^\n]*?)[ \t]*\r?\n"
    r"[ \t]*File size:[ \t]*(?P<file_size>[^\n]*?)[ \t]*"
    r"(?:\r?\n(?:[ \t]*\r?\n)?|\Z)",
    re.IGNORECASE | re.MULTILINE,
)


def parse_header(text: str) -> tuple[ProvenanceHeader | None, str]:
    """Split the first provenance header block off *text*.

    Returns ``(header, remainder)``. Without a match the header is None and the
    remainder is *text* unchanged. Only the first match is removed.
    """
    match = _HEADER_RE.search(text)
    if match is None:
        return None, text
    header = ProvenanceHeader(
        file_name=match.group("file_name").strip(),
        file_type=match.group("file_type").strip(),
        file_size=match.group("file_size").strip(),
    )
    return header, text[: match.start()] + text[match.end():]


def synthesize_header(header: ProvenanceHeader) -> str:
    return (
        f"# Content extracted from {header.file_name}\n\n"
        f"File type: {header.file_type}\n"
        f"File size: {header.file_size}\n\n"
    )


def format_size(size_bytes: int) -> str:
    """Render a byte count the way headers declare it, e.g. ``12 KB``."""
    return f"{int(size_bytes / 1024 + 0.5)} KB"
