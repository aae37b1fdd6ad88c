from dataclasses import dataclass
from pathlib import PurePath


@dataclass(frozen=True)
class UploadedDocument:
    """A file selected for upload, read once and never modified."""

    raw_bytes: bytes
    file_name: str
    mime_type: str = ""
    size_bytes: int | None = None

    @property
    def extension(self) -> str:
        return PurePath(self.file_name).suffix.lower()

    @property
    def declared_size(self) -> int:
        return self.size_bytes if self.size_bytes is not None else len(self.raw_bytes)


@dataclass(frozen=True)
class ProvenanceHeader:
    """Describes which file a block of extracted text came from."""

    file_name: str
    file_type: str
    file_size: str


@dataclass(frozen=True)
class ExtractionResult:
    """Text extracted from an upload, split from its provenance header.

    When ``is_opaque_marker`` is set, ``body_text`` still carries a sentinel
    that the sanitizer has to strip before the text is shown as CV content.
    """

    provenance_header: ProvenanceHeader | None
    body_text: str
    is_opaque_marker: bool = False
