from cv_optimizer.analysis.service import AnalysisService
from cv_optimizer.config.settings import Settings
from cv_optimizer.extraction.models import ExtractionResult, UploadedDocument
from cv_optimizer.extraction.reader import DocumentReader
from cv_optimizer.extraction.sanitizer import sanitize, sanitize_tor
from cv_optimizer.extraction.validation import validate_upload
from cv_optimizer.logging.logger import Log
from cv_optimizer.processor.pipeline import PipelineContext, PipelineStep
from cv_optimizer.rendering.blocks import to_blocks
from cv_optimizer.synthesis.models import CompositeInput


class ValidateUploadsStep(PipelineStep):
    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def run(self, context: PipelineContext) -> PipelineContext:
        validate_upload(context.request.cv, self._settings)
        if context.request.tor is not None:
            validate_upload(context.request.tor, self._settings)
        Log.info(f"Accepted upload {context.request.cv.file_name}")
        return context


class ExtractTextStep(PipelineStep):
    def __init__(self, reader: DocumentReader) -> None:
        self._reader = reader

    def run(self, context: PipelineContext) -> PipelineContext:
        context.cv_extraction = self._read(context.request.cv, context)
        if context.request.tor is not None:
            context.tor_extraction = self._read(context.request.tor, context)
        return context

    def _read(self, document: UploadedDocument, context: PipelineContext) -> ExtractionResult:
        result = self._reader.read(document)
        if result.is_opaque_marker:
            context.warnings.append(f"Could not extract readable text from {document.file_name}")
        return result


class SanitizeStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        if context.cv_extraction is None:
            raise ValueError("PipelineContext.cv_extraction must be set before sanitizing")
        context.sanitized_cv = sanitize(context.cv_extraction.body_text)
        if context.tor_extraction is not None:
            context.sanitized_tor = sanitize_tor(context.tor_extraction.body_text)
        Log.info(f"Sanitized CV text: {len(context.sanitized_cv)} chars")
        return context


class BuildCompositeStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        tor = context.sanitized_tor
        if context.tor_extraction is not None and context.tor_extraction.is_opaque_marker:
            Log.warning("TOR has no readable text, analyzing the CV without it")
            tor = None
        competencies = (context.request.competencies or "").strip() or None
        context.composite = CompositeInput(
            cv=context.sanitized_cv,
            tor=tor,
            competencies=competencies,
        )
        return context


class AnalyzeStep(PipelineStep):
    def __init__(self, service: AnalysisService) -> None:
        self._service = service

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.composite is None:
            raise ValueError("PipelineContext.composite must be set before analysis")
        context.report = self._service.analyze(context.composite, context.request.models)
        context.warnings.extend(context.report.warnings)
        Log.info(
            f"Analysis produced {len(context.report.result.suggestions)} suggestions",
            source=context.report.source,
        )
        return context


class RenderPreviewStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        if context.report is None:
            raise ValueError("PipelineContext.report must be set before rendering")
        context.preview = to_blocks(context.report.result.improved_text)
        return context
