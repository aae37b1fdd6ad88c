from collections.abc import Sequence

from cv_optimizer.analysis.factory import AnalyzerFactory
from cv_optimizer.config.settings import Settings
from cv_optimizer.extraction.reader import DocumentReader
from cv_optimizer.keys.api_key_store import ApiKeyStore
from cv_optimizer.logging.logger import Log
from cv_optimizer.processor.models import ProcessingOutcome, ProcessingRequest
from cv_optimizer.processor.pipeline import PipelineContext, PipelineStep
from cv_optimizer.processor.steps import (
    AnalyzeStep,
    BuildCompositeStep,
    ExtractTextStep,
    RenderPreviewStep,
    SanitizeStep,
    ValidateUploadsStep,
)


class Processor:
    """Runs an analysis request through the pipeline steps in order.

    Pipeline: validate -> extract -> sanitize -> compose -> analyze -> preview.
    Only upload validation errors escape; later stages degrade and add warnings.
    """

    def __init__(self, steps: Sequence[PipelineStep]) -> None:
        self._steps = list(steps)

    def process(self, request: ProcessingRequest) -> ProcessingOutcome:
        Log.info(f"Processing CV {request.cv.file_name}", models=list(request.models))
        context = PipelineContext(request=request)
        for step in self._steps:
            context = step.run(context)

        if context.cv_extraction is None or context.report is None:
            raise ValueError("Pipeline finished without an extraction or analysis result")
        for warning in context.warnings:
            Log.warning(warning)
        return ProcessingOutcome(
            cv_extraction=context.cv_extraction,
            tor_extraction=context.tor_extraction,
            sanitized_cv=context.sanitized_cv,
            sanitized_tor=context.sanitized_tor,
            report=context.report,
            preview=tuple(context.preview),
            warnings=tuple(context.warnings),
        )


def build_processor(
    settings: Settings,
    store: ApiKeyStore,
    models: Sequence[str] = (),
) -> Processor:
    """Build a Processor with the default adapters for the selected models."""
    service = AnalyzerFactory.create(settings, store, models)
    return Processor(
        steps=[
            ValidateUploadsStep(settings),
            ExtractTextStep(DocumentReader(settings)),
            SanitizeStep(),
            BuildCompositeStep(),
            AnalyzeStep(service),
            RenderPreviewStep(),
        ]
    )
