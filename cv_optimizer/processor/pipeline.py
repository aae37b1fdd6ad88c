from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from cv_optimizer.analysis.models import AnalysisReport
from cv_optimizer.extraction.models import ExtractionResult
from cv_optimizer.processor.models import ProcessingRequest
from cv_optimizer.rendering.blocks import Block
from cv_optimizer.synthesis.models import CompositeInput


@dataclass(slots=True)
class PipelineContext:
    request: ProcessingRequest
    cv_extraction: ExtractionResult | None = None
    tor_extraction: ExtractionResult | None = None
    sanitized_cv: str = ""
    sanitized_tor: str | None = None
    composite: CompositeInput | None = None
    report: AnalysisReport | None = None
    preview: list[Block] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
