import pytest

from cv_optimizer.extraction.markers import DOCX_SENTINEL, PDF_SENTINEL, PLACEHOLDER_PHRASE
from cv_optimizer.extraction.sanitizer import sanitize, sanitize_tor


class TestSanitize:
    def test_promotes_first_line_to_title(self) -> None:
        assert sanitize("John Doe\nSkills: Go, Rust") == "# John Doe\n\nSkills: Go, Rust"

    def test_removes_sentinel_and_placeholder(self) -> None:
        text = (
            f"{PDF_SENTINEL}\n{PLACEHOLDER_PHRASE} of cv.pdf. More words.\n"
            "# Jane\n\n## Skills\n- Python"
        )
        result = sanitize(text)
        assert PDF_SENTINEL not in result
        assert PLACEHOLDER_PHRASE not in result
        assert "More words" not in result
        assert result == "# Jane\n\n## Skills\n- Python"

    def test_removes_docx_sentinel(self) -> None:
        assert DOCX_SENTINEL not in sanitize(f"# Jane\n{DOCX_SENTINEL}\nBody")

    def test_removes_sentinel_spliced_by_removal(self) -> None:
        nested = "%PDF-binary" + PDF_SENTINEL + "-content"
        assert "binary-content" not in sanitize(f"# T\n{nested}")

    def test_only_markers_becomes_generic_title(self) -> None:
        assert sanitize(f"{PDF_SENTINEL}\n{PLACEHOLDER_PHRASE} of a.pdf.") == "# CV Content"

    def test_empty_input_becomes_generic_title(self) -> None:
        assert sanitize("") == "# CV Content"

    def test_keeps_existing_heading_anywhere(self) -> None:
        text = "Jane Doe\n## Skills\n- Python"
        assert sanitize(text) == text

    def test_indented_hash_is_not_a_heading(self) -> None:
        assert sanitize("Jane Doe\n  # not a heading") == "# Jane Doe\n\n  # not a heading"

    def test_skips_leading_blank_lines_when_promoting(self) -> None:
        assert sanitize("\n\n  Jane Doe  \nEngineer") == "# Jane Doe\n\nEngineer"

    def test_trims_surrounding_whitespace(self) -> None:
        assert sanitize("  \n# Title\n\nBody\n\n ") == "# Title\n\nBody"

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "John Doe\nSkills: Go, Rust",
            f"{PDF_SENTINEL}{PLACEHOLDER_PHRASE} of x.pdf.",
            "   \n\n",
            "# Already\n\n## Clean\n- item",
            f"Name\n{DOCX_SENTINEL}\n{PLACEHOLDER_PHRASE}",
        ],
    )
    def test_is_idempotent(self, text: str) -> None:
        once = sanitize(text)
        assert sanitize(once) == once


class TestSanitizeTor:
    def test_prefixes_fixed_title(self) -> None:
        assert sanitize_tor("Scope of work\n- Review") == (
            "# Terms of Reference\n\nScope of work\n- Review"
        )

    def test_keeps_existing_heading(self) -> None:
        assert sanitize_tor("# Consultant TOR\nScope") == "# Consultant TOR\nScope"

    def test_strips_markers(self) -> None:
        result = sanitize_tor(f"{DOCX_SENTINEL}\n{PLACEHOLDER_PHRASE} of tor.docx.")
        assert result == "# Terms of Reference"

    def test_is_idempotent(self) -> None:
        once = sanitize_tor("Background\nclimate finance")
        assert sanitize_tor(once) == once
