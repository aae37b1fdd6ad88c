import json

from cv_optimizer.analysis.exceptions import AnalysisValidationError
from cv_optimizer.analysis.models import AnalysisErr, AnalysisResponse
from cv_optimizer.analysis.validator import validate_and_build


def parse_analysis_response(raw: str) -> AnalysisResponse:
    """Turn a raw provider reply into ``AnalysisOk`` or ``AnalysisErr``.

    Markdown code fences around the JSON object are tolerated.
    """
    cleaned = strip_code_fences(raw)
    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        return AnalysisErr(reason=f"Invalid JSON response: {exc}")

    if not isinstance(parsed, dict):
        return AnalysisErr(reason="JSON response must be an object")
    try:
        return validate_and_build(parsed)
    except AnalysisValidationError as exc:
        return AnalysisErr(reason=str(exc))


def strip_code_fences(raw: str) -> str:
    cleaned = raw.strip()
    if cleaned.startswith("```"):
        lines = cleaned.splitlines()
        if lines and lines[0].startswith("```"):
            lines = lines[1:]
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        cleaned = "\n".join(lines)
    return cleaned
