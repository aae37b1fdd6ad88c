from abc import ABC, abstractmethod
from collections.abc import Sequence

from cv_optimizer.synthesis.models import CompositeInput, SynthesisResult


class BaseAnalyzer(ABC):
    """Contract for all CV analysis adapters."""

    @abstractmethod
    def analyze(self, composite: CompositeInput, models: Sequence[str]) -> SynthesisResult:
        """Rewrite the CV and suggest section improvements.

        Args:
            composite: Sanitized CV with optional TOR and competencies.
            models: Selected model ids, already de-duplicated.

        Returns:
            SynthesisResult with sanitized improved text and ordered suggestions.

        Raises:
            AnalysisError: on any failure.
        """
