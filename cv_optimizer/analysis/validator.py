"""Validates a parsed provider reply against the analysis response schema."""

from typing import Any

from cv_optimizer.analysis.exceptions import AnalysisValidationError
from cv_optimizer.analysis.models import AnalysisOk
from cv_optimizer.synthesis.models import Suggestion

_MAX_SUGGESTIONS = 50


def validate_and_build(data: dict[str, Any]) -> AnalysisOk:
    """Validate raw parsed JSON and build an AnalysisOk.

    ``torAlignment`` is accepted as an alias of ``rationale``.

    Raises:
        AnalysisValidationError: on any validation failure.
    """
    improved_text = data.get("improvedText")
    if not isinstance(improved_text, str) or not improved_text.strip():
        raise AnalysisValidationError("'improvedText' must be a non-empty string")
    suggestions = _build_suggestions(data.get("suggestions", []))
    return AnalysisOk(improved_text=improved_text, suggestions=suggestions)


def _build_suggestions(raw: Any) -> tuple[Suggestion, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise AnalysisValidationError("'suggestions' must be a list")
    if len(raw) > _MAX_SUGGESTIONS:
        raise AnalysisValidationError(
            f"Too many suggestions: {len(raw)} (max {_MAX_SUGGESTIONS})"
        )
    return tuple(_build_suggestion(item, i) for i, item in enumerate(raw))


def _build_suggestion(raw: Any, index: int) -> Suggestion:
    if not isinstance(raw, dict):
        raise AnalysisValidationError(f"Suggestion at index {index} must be an object")
    section = _required_string(raw, "section", index)
    suggestion = _required_string(raw, "suggestion", index)
    suggested_copy = _optional_string(raw, "suggestedCopy", index)
    rationale = _optional_string(raw, "rationale", index)
    if rationale is None:
        rationale = _optional_string(raw, "torAlignment", index)
    return Suggestion(
        section=section,
        suggestion=suggestion,
        suggested_copy=suggested_copy,
        rationale=rationale,
    )


def _required_string(raw: dict[str, Any], key: str, index: int) -> str:
    value = raw.get(key)
    if not isinstance(value, str) or not value.strip():
        raise AnalysisValidationError(
            f"Suggestion at index {index}: '{key}' must be a non-empty string"
        )
    return value.strip()


def _optional_string(raw: dict[str, Any], key: str, index: int) -> str | None:
    value = raw.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise AnalysisValidationError(
            f"Suggestion at index {index}: '{key}' must be a string or null"
        )
    return value.strip() or None
