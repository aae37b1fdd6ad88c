"""Offline CV synthesizer: a deterministic rule engine over keyword signals.

Stands in for a model provider. Given a sanitized CV, an optional TOR and
optional competencies it carries recognised sections through verbatim, fills
missing ones from the default templates in ``rules`` and emits ordered
suggestions. It never raises; on an internal failure it returns the templated
skeleton.
"""

import re
from collections.abc import Iterable
from pathlib import PurePath

from cv_optimizer.extraction.sanitizer import sanitize
from cv_optimizer.logging.logger import Log
from cv_optimizer.synthesis import rules, sections
from cv_optimizer.synthesis.models import CompositeInput, Suggestion, SynthesisResult
from cv_optimizer.synthesis.sections import ParsedCv, parse_cv

DEFAULT_MODEL = "openai"
DEFAULT_TITLE = "Professional CV"

DEFAULT_CV_SKELETON = f"# {DEFAULT_TITLE}"

TOR_HEADING = "## TOR Requirements"
COMPETENCIES_HEADING = "## Additional Competencies"

_SECTION_HEADINGS: tuple[tuple[str, str], ...] = (
    (sections.SUMMARY, "PROFESSIONAL SUMMARY"),
    (sections.EXPERIENCE, "PROFESSIONAL EXPERIENCE"),
    (sections.EDUCATION, "EDUCATION"),
    (sections.SKILLS, "SKILLS & CERTIFICATIONS"),
    (sections.PROJECTS, "NOTABLE PROJECTS"),
)

_LIST_MARKER_RE = re.compile(r"^\s*(?:[-*•]\s*)+")
_DOCUMENT_SUFFIXES = frozenset({".pdf", ".doc", ".docx", ".txt"})


def normalize_models(selected_models: Iterable[str]) -> tuple[str, ...]:
    """De-duplicate model ids, keeping first occurrence; default when empty."""
    models: list[str] = []
    for model in selected_models:
        model = model.strip().lower()
        if model and model not in models:
            models.append(model)
    return tuple(models) or (DEFAULT_MODEL,)


def compose_analysis_text(composite: CompositeInput) -> str:
    """Render the combined text sent to a chat-completion provider."""
    parts = [composite.cv.strip()]
    if composite.has_tor:
        parts.append(f"{TOR_HEADING}\n{(composite.tor or '').strip()}")
    if composite.has_competencies:
        parts.append(f"{COMPETENCIES_HEADING}\n{(composite.competencies or '').strip()}")
    return "\n\n".join(parts)


def synthesize(composite: CompositeInput, selected_models: Iterable[str] = ()) -> SynthesisResult:
    models = normalize_models(selected_models)
    try:
        return _synthesize(composite, models)
    except Exception as exc:
        Log.error(f"Offline synthesis failed, using the default skeleton: {exc}")
        return _synthesize(CompositeInput(cv=DEFAULT_CV_SKELETON), models)


def _synthesize(composite: CompositeInput, models: tuple[str, ...]) -> SynthesisResult:
    cv_text = composite.cv if composite.cv.strip() else DEFAULT_CV_SKELETON
    parsed = parse_cv(cv_text)
    signals = rules.detect_signals(composite)
    Log.debug(
        f"Synthesis signals: {sorted(signals.clusters)}",
        tor=signals.has_tor,
        competencies=signals.has_competencies,
    )

    improved = sanitize(_compose(parsed, signals, _competency_items(composite.competencies)))
    suggestions = _build_suggestions(signals, models)
    Log.info(f"Offline synthesis produced {len(suggestions)} suggestions", models=list(models))
    return SynthesisResult(improved_text=improved, suggestions=suggestions, models_used=models)


def _compose(parsed: ParsedCv, signals: rules.Signals, competencies: list[str]) -> str:
    head = f"# {_title(parsed)}"
    if parsed.preamble:
        head += f"\n{parsed.preamble}"
    blocks = [head]

    for key, heading in _SECTION_HEADINGS:
        body = parsed.body_of(key)
        if key == sections.SUMMARY:
            body = _with_addenda(body or rules.DEFAULT_SUMMARY, signals)
        elif not body:
            body = rules.default_section(key, signals) or ""
            if not body and key == sections.PROJECTS:
                continue
        if key == sections.SKILLS:
            body = _merge_competencies(body, competencies)
        blocks.append(f"## {heading}\n{body}")

    for extra in parsed.unmatched():
        blocks.append(f"## {extra.heading.upper()}\n{extra.body}".rstrip())

    return "\n\n".join(blocks)


def _title(parsed: ParsedCv) -> str:
    if not parsed.title:
        return DEFAULT_TITLE
    path = PurePath(parsed.title)
    if path.suffix.lower() in _DOCUMENT_SUFFIXES:
        return parsed.title[: -len(path.suffix)].strip() or DEFAULT_TITLE
    return parsed.title


def _with_addenda(summary: str, signals: rules.Signals) -> str:
    addenda = [sentence for applies, sentence in rules.SUMMARY_ADDENDA if applies(signals)]
    if not addenda:
        return summary
    return f"{summary}\n\n{' '.join(addenda)}"


def _competency_items(competencies: str | None) -> list[str]:
    if not competencies:
        return []
    items: list[str] = []
    for chunk in re.split(r"[\n;]", competencies):
        item = _LIST_MARKER_RE.sub("", chunk).strip()
        if item.startswith("#"):
            continue
        if item and item not in items:
            items.append(item)
    return items


def _merge_competencies(skills: str, competencies: list[str]) -> str:
    existing = {
        _LIST_MARKER_RE.sub("", line).strip().lower() for line in skills.split("\n")
    }
    additions = [f"- {item}" for item in competencies if item.lower() not in existing]
    if not additions:
        return skills
    return "\n".join([skills, *additions]) if skills else "\n".join(additions)


def _build_suggestions(signals: rules.Signals, models: tuple[str, ...]) -> tuple[Suggestion, ...]:
    suggestions: list[Suggestion] = []
    for section, section_rules in rules.SECTION_SUGGESTION_RULES:
        rule = next(r for r in section_rules if r.applies(signals))
        suggestions.append(
            Suggestion(
                section=section,
                suggestion=rule.suggestion,
                suggested_copy=rule.suggested_copy,
                rationale=rule.rationale,
            )
        )

    for extra in rules.EXTRA_SUGGESTION_RULES:
        if extra.applies(signals):
            suggestions.append(Suggestion(section=extra.section, suggestion=extra.suggestion))

    for model in models[1:]:
        suggestions.append(
            Suggestion(
                section=f"{model.capitalize()} Analysis",
                suggestion=rules.model_suggestion_text(model),
            )
        )
    return tuple(suggestions)
