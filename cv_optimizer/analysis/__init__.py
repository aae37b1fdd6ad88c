from cv_optimizer.analysis.base import BaseAnalyzer
from cv_optimizer.analysis.factory import AnalyzerFactory
from cv_optimizer.analysis.llm_analyzer import LlmAnalyzer
from cv_optimizer.analysis.mock_analyzer import MockAnalyzer
from cv_optimizer.analysis.service import AnalysisService

__all__ = ["AnalysisService", "AnalyzerFactory", "BaseAnalyzer", "LlmAnalyzer", "MockAnalyzer"]
