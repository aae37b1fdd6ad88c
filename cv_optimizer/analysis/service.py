from collections.abc import Sequence

from cv_optimizer.analysis.base import BaseAnalyzer
from cv_optimizer.analysis.exceptions import AnalysisError
from cv_optimizer.analysis.models import AnalysisReport
from cv_optimizer.extraction.sanitizer import sanitize
from cv_optimizer.logging.logger import Log
from cv_optimizer.synthesis.models import CompositeInput, SynthesisResult
from cv_optimizer.synthesis.synthesizer import normalize_models


class AnalysisService:
    """Runs an analysis and degrades instead of failing.

    Order: primary analyzer (when configured), then the offline fallback, then
    the sanitized CV itself. Every step taken past the first adds a warning.
    """

    def __init__(self, primary: BaseAnalyzer | None, fallback: BaseAnalyzer) -> None:
        self._primary = primary
        self._fallback = fallback

    @property
    def primary(self) -> BaseAnalyzer | None:
        return self._primary

    def analyze(self, composite: CompositeInput, models: Sequence[str] = ()) -> AnalysisReport:
        selected = normalize_models(models)
        warnings: list[str] = []

        if self._primary is not None:
            try:
                result = self._primary.analyze(composite, selected)
                return AnalysisReport(result=result, source="llm")
            except AnalysisError as exc:
                Log.error(f"AI analysis failed, falling back to offline analysis: {exc}")
                warnings.append(f"AI analysis failed ({exc}); showing offline suggestions instead.")

        try:
            result = self._fallback.analyze(composite, selected)
            return AnalysisReport(result=result, source="mock", warnings=tuple(warnings))
        except Exception as exc:
            Log.error(f"Offline analysis failed, returning the CV unchanged: {exc}")
            warnings.append("Analysis is unavailable; showing your CV without changes.")

        passthrough = SynthesisResult(improved_text=sanitize(composite.cv), models_used=selected)
        return AnalysisReport(result=passthrough, source="passthrough", warnings=tuple(warnings))
