"""Detection of stand-in text produced for binary uploads."""

PDF_SENTINEL = "%PDF-binary-content"
DOCX_SENTINEL = "PK-binary-content-docx"
SENTINELS: tuple[str, ...] = (PDF_SENTINEL, DOCX_SENTINEL)

PLACEHOLDER_PHRASE = "This is a placeholder for the binary file content"

_BINARY_MARKER = "-binary-content"
_PDF_MAGIC = "%PDF"
_ZIP_MAGIC = "PK\x03\x04"
_ZIP_SIGNATURE = "PK"
_OOXML_MANIFEST = "Content_Types"


def is_opaque_content(text: str) -> bool:
    """Return True when *text* stands in for a PDF/DOC/DOCX body.

    Signals are case-sensitive: a ``%PDF`` prefix, a ZIP local-file header
    (or ``PK`` together with the OOXML ``[Content_Types]`` manifest), or the
    ``-binary-content`` sentinel marker anywhere in the text.
    """
    if not text:
        return False
    if text.startswith(_PDF_MAGIC):
        return True
    if text.startswith(_ZIP_MAGIC):
        return True
    if _ZIP_SIGNATURE in text and _OOXML_MANIFEST in text:
        return True
    return _BINARY_MARKER in text


def sentinel_for(extension: str) -> str:
    """Pick the sentinel used when a file of this extension cannot be read."""
    return PDF_SENTINEL if extension.lower() == ".pdf" else DOCX_SENTINEL
