import json
from pathlib import Path

import pytest

from cv_optimizer.main import EXIT_FAILURE, EXIT_INVALID_UPLOAD, EXIT_OK, main


@pytest.fixture()
def key_store_path(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    path = tmp_path / "store" / "api_keys.json"
    monkeypatch.setenv("API_KEYS_STORE_PATH", str(path))
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    return path


class TestAnalyzeCommand:
    def test_writes_markdown_to_stdout(
        self, key_store_path: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        cv = tmp_path / "cv.txt"
        cv.write_text("# Jane Doe\n\n## Skills\n- Python\n")
        assert main(["analyze", str(cv)]) == EXIT_OK
        out = capsys.readouterr().out
        assert out.startswith("# Jane Doe\n")
        assert "## SKILLS & CERTIFICATIONS\n- Python" in out
        assert "Suggestions (mock):" in out
        assert "- [Professional Summary]" in out

    def test_stdout_holds_only_document_and_suggestions(
        self,
        key_store_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv("LOG_LEVEL", "INFO")
        monkeypatch.setenv("USE_MOCK_ANALYZER", "true")
        cv = tmp_path / "cv.txt"
        cv.write_text("# Jane Doe\n\n## Skills\n- Python\n")
        assert main(["analyze", str(cv)]) == EXIT_OK
        captured = capsys.readouterr()
        document, _, suggestions = captured.out.partition("\nSuggestions (mock):\n")
        assert document.startswith("# Jane Doe\n")
        assert "[INFO]" not in captured.out
        assert suggestions.startswith("- [Professional Summary]")
        assert "cv_optimizer:" not in suggestions
        assert "[INFO] cv_optimizer: Mock analyzer forced by configuration" in captured.err

    def test_writes_markdown_to_file(self, key_store_path: Path, tmp_path: Path) -> None:
        cv = tmp_path / "cv.txt"
        cv.write_text("# Jane\n")
        output = tmp_path / "out.md"
        assert main(["analyze", str(cv), "--output", str(output)]) == EXIT_OK
        assert output.read_text().startswith("# Jane\n")

    def test_exports_docx_next_to_cv(self, key_store_path: Path, tmp_path: Path) -> None:
        cv = tmp_path / "cv.txt"
        cv.write_text("# Jane\n")
        assert main(["analyze", str(cv), "--format", "docx", "--template", "worldbank"]) == EXIT_OK
        assert (tmp_path / "cv_optimized.docx").read_bytes().startswith(b"PK")

    def test_invalid_upload_exits_with_2(
        self, key_store_path: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        cv = tmp_path / "cv.png"
        cv.write_bytes(b"\x89PNG")
        assert main(["analyze", str(cv)]) == EXIT_INVALID_UPLOAD
        assert "File type not supported" in capsys.readouterr().err

    def test_missing_file_fails(
        self, key_store_path: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["analyze", str(tmp_path / "nope.pdf")]) == EXIT_FAILURE
        assert "Could not read file" in capsys.readouterr().err

    def test_multiple_models_add_model_suggestions(
        self, key_store_path: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        cv = tmp_path / "cv.txt"
        cv.write_text("# Jane\n")
        main(["analyze", str(cv), "--model", "openai", "--model", "gemini"])
        assert "[Gemini Analysis]" in capsys.readouterr().out

    def test_unknown_model_is_rejected_by_parser(self, key_store_path: Path, tmp_path: Path) -> None:
        with pytest.raises(SystemExit):
            main(["analyze", str(tmp_path / "cv.txt"), "--model", "llama"])


class TestKeysCommand:
    def test_set_and_list(
        self,
        key_store_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv("GEMINI_API_KEY", "env-key")
        assert main(["keys", "set", "claude", "sk-ant"]) == EXIT_OK
        assert json.loads(key_store_path.read_text()) == {"claude": "sk-ant"}
        capsys.readouterr()

        assert main(["keys", "list"]) == EXIT_OK
        lines = capsys.readouterr().out.splitlines()
        assert "claude: user" in lines
        assert "gemini: environment" in lines
        assert "openai: not configured" in lines

    def test_remove(self, key_store_path: Path) -> None:
        main(["keys", "set", "openai", "sk"])
        assert main(["keys", "remove", "openai"]) == EXIT_OK
        assert json.loads(key_store_path.read_text()) == {}
