from collections.abc import Sequence
from typing import ClassVar

from cv_optimizer.analysis.llm_analyzer import LlmAnalyzer
from cv_optimizer.analysis.mock_analyzer import MockAnalyzer
from cv_optimizer.analysis.openai_client_adapter import OpenAIClientAdapter
from cv_optimizer.analysis.service import AnalysisService
from cv_optimizer.config.settings import Settings
from cv_optimizer.keys.api_key_store import SUPPORTED_MODELS, ApiKeyStore, resolve_api_key
from cv_optimizer.logging.logger import Log
from cv_optimizer.synthesis.synthesizer import normalize_models


class AnalyzerFactory:
    """Creates the analysis service for a set of selected models."""

    PROVIDER_BASE_URLS: ClassVar[dict[str, str | None]] = {
        "openai": None,
        "claude": "https://api.anthropic.com/v1/",
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "qwen": "https://dashscope-intl.aliyuncs.com/compatible-mode/v1",
        "deepseek": "https://api.deepseek.com/v1",
    }

    @classmethod
    def create(
        cls,
        settings: Settings,
        store: ApiKeyStore,
        models: Sequence[str] = (),
    ) -> AnalysisService:
        """Use the first selected model that has a key; the mock backs it up."""
        fallback = MockAnalyzer()
        if settings.use_mock_analyzer:
            Log.info("Mock analyzer forced by configuration")
            return AnalysisService(primary=None, fallback=fallback)

        for model in normalize_models(models):
            if model not in SUPPORTED_MODELS:
                Log.warning(f"Ignoring unknown model '{model}'")
                continue
            api_key = resolve_api_key(model, settings, store)
            if api_key:
                Log.info(f"Using {model} for CV analysis")
                return AnalysisService(
                    primary=cls.create_llm_analyzer(model, api_key, settings),
                    fallback=fallback,
                )

        Log.warning("No API key configured for the selected models, using offline analysis")
        return AnalysisService(primary=None, fallback=fallback)

    @classmethod
    def create_llm_analyzer(cls, model: str, api_key: str, settings: Settings) -> LlmAnalyzer:
        if model not in cls.PROVIDER_BASE_URLS:
            raise ValueError(
                f"Unknown analysis model '{model}'. Choose from: {list(cls.PROVIDER_BASE_URLS)}"
            )
        client = OpenAIClientAdapter(
            api_key=api_key,
            timeout_seconds=settings.analysis_timeout_seconds,
            base_url=cls.PROVIDER_BASE_URLS[model],
            strict_schema=model == "openai",
        )
        return LlmAnalyzer(
            client=client,
            model=getattr(settings, f"{model}_model_name"),
            temperature=settings.analysis_temperature,
        )
