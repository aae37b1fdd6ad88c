from cv_optimizer.extraction.header import format_size, parse_header, synthesize_header
from cv_optimizer.extraction.models import ProvenanceHeader


class TestParseHeader:
    def test_parses_canonical_block(self) -> None:
        text = (
            "# Content extracted from cv.pdf\n\n"
            "File type: application/pdf\nFile size: 12 KB\n\nBody text"
        )
        header, remainder = parse_header(text)
        assert header == ProvenanceHeader(
            file_name="cv.pdf", file_type="application/pdf", file_size="12 KB"
        )
        assert remainder == "Body text"

    def test_no_header_returns_text_unchanged(self) -> None:
        text = "# Jane Doe\n\nFile type: not a header"
        header, remainder = parse_header(text)
        assert header is None
        assert remainder is text

    def test_is_case_insensitive(self) -> None:
        text = "# CONTENT EXTRACTED FROM a.docx\n\nfile type: x\nfile size: 1 KB\n\nrest"
        header, remainder = parse_header(text)
        assert header is not None
        assert header.file_name == "a.docx"
        assert remainder == "rest"

    def test_trims_field_values(self) -> None:
        text = "# Content extracted from   my cv.pdf  \n\nFile type:  pdf \nFile size:  3 KB \n\n"
        header, _ = parse_header(text)
        assert header == ProvenanceHeader(file_name="my cv.pdf", file_type="pdf", file_size="3 KB")

    def test_removes_only_first_block(self) -> None:
        block = "# Content extracted from a.pdf\n\nFile type: pdf\nFile size: 1 KB\n\n"
        header, remainder = parse_header(block + "middle\n" + block)
        assert header is not None
        assert remainder == "middle\n" + block

    def test_preserves_text_before_block(self) -> None:
        text = "intro\n# Content extracted from a.pdf\n\nFile type: pdf\nFile size: 1 KB\n\nbody"
        _, remainder = parse_header(text)
        assert remainder == "intro\nbody"

    def test_header_at_end_of_text(self) -> None:
        header, remainder = parse_header(
            "# Content extracted from a.pdf\n\nFile type: pdf\nFile size: 1 KB"
        )
        assert header is not None
        assert header.file_size == "1 KB"
        assert remainder == ""


class TestSynthesizeHeader:
    def test_canonical_shape(self) -> None:
        header = ProvenanceHeader(file_name="cv.pdf", file_type="application/pdf", file_size="12 KB")
        assert synthesize_header(header) == (
            "# Content extracted from cv.pdf\n\n"
            "File type: application/pdf\nFile size: 12 KB\n\n"
        )

    def test_round_trip(self) -> None:
        header = ProvenanceHeader(
            file_name="Curriculum Vitae (final).docx",
            file_type="application/vnd.openxmlformats-officedocument.wordprocessingml.document",
            file_size="245 KB",
        )
        parsed, remainder = parse_header(synthesize_header(header))
        assert parsed == header
        assert remainder == ""
        assert parsed is not None
        assert synthesize_header(parsed) == synthesize_header(header)


class TestFormatSize:
    def test_rounds_half_up(self) -> None:
        assert format_size(1536) == "2 KB"

    def test_rounds_down_below_half(self) -> None:
        assert format_size(12 * 1024 + 100) == "12 KB"

    def test_zero_bytes(self) -> None:
        assert format_size(0) == "0 KB"
