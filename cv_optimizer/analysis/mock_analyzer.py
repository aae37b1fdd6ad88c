from collections.abc import Sequence

from cv_optimizer.analysis.base import BaseAnalyzer
from cv_optimizer.synthesis.models import CompositeInput, SynthesisResult
from cv_optimizer.synthesis.synthesizer import synthesize


class MockAnalyzer(BaseAnalyzer):
    """Offline analyzer backed by the keyword rule engine. Needs no credentials."""

    def analyze(self, composite: CompositeInput, models: Sequence[str]) -> SynthesisResult:
        return synthesize(composite, models)
