from dataclasses import dataclass, field
from typing import Literal

from cv_optimizer.synthesis.models import Suggestion, SynthesisResult


@dataclass(frozen=True)
class AnalysisOk:
    """A provider reply that passed schema validation."""

    improved_text: str
    suggestions: tuple[Suggestion, ...] = ()


@dataclass(frozen=True)
class AnalysisErr:
    """A provider reply that could not be used, and why."""

    reason: str


AnalysisResponse = AnalysisOk | AnalysisErr

AnalysisSource = Literal["llm", "mock", "passthrough"]


@dataclass(frozen=True)
class AnalysisReport:
    """Result of one analysis request plus the fallbacks taken to produce it."""

    result: SynthesisResult
    source: AnalysisSource
    warnings: tuple[str, ...] = field(default_factory=tuple)
