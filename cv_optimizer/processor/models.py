from dataclasses import dataclass, field

from cv_optimizer.analysis.models import AnalysisReport
from cv_optimizer.extraction.models import ExtractionResult, UploadedDocument
from cv_optimizer.rendering.blocks import Block
from cv_optimizer.synthesis.models import SynthesisResult


@dataclass(frozen=True)
class ProcessingRequest:
    """One analysis request: a CV plus optional TOR, competencies and models."""

    cv: UploadedDocument
    tor: UploadedDocument | None = None
    competencies: str | None = None
    models: tuple[str, ...] = ()


@dataclass(frozen=True)
class ProcessingOutcome:
    """Everything produced for a request, including non-blocking warnings."""

    cv_extraction: ExtractionResult
    tor_extraction: ExtractionResult | None
    sanitized_cv: str
    sanitized_tor: str | None
    report: AnalysisReport
    preview: tuple[Block, ...] = ()
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def result(self) -> SynthesisResult:
        return self.report.result
