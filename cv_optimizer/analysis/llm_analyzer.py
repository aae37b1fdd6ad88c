"""AI-backed CV analyzer."""

import json
from collections.abc import Sequence
from pathlib import Path

from cv_optimizer.analysis.base import BaseAnalyzer
from cv_optimizer.analysis.client_base import BaseAnalysisClient
from cv_optimizer.analysis.exceptions import AnalysisResponseError
from cv_optimizer.analysis.models import AnalysisErr
from cv_optimizer.analysis.prompt_loader import (
    SYSTEM_PROMPT,
    load_json_schema,
    load_prompt_template,
)
from cv_optimizer.analysis.response import parse_analysis_response
from cv_optimizer.extraction.sanitizer import sanitize
from cv_optimizer.logging.logger import Log
from cv_optimizer.synthesis.models import CompositeInput, SynthesisResult
from cv_optimizer.synthesis.synthesizer import compose_analysis_text, normalize_models


class LlmAnalyzer(BaseAnalyzer):
    """Rewrites a CV through a chat completion provider."""

    def __init__(
        self,
        *,
        client: BaseAnalysisClient,
        model: str,
        temperature: float = 0.7,
        prompt_template_path: Path | None = None,
        json_schema_path: Path | None = None,
        system_prompt: str = SYSTEM_PROMPT,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))
        self._system_prompt = system_prompt
        self._prompt_template = load_prompt_template(prompt_template_path)
        schema_str = load_json_schema(json_schema_path)
        self._json_schema = schema_str
        self._json_schema_dict = json.loads(schema_str)

    @property
    def model(self) -> str:
        return self._model

    def analyze(self, composite: CompositeInput, models: Sequence[str]) -> SynthesisResult:
        prompt = self._build_prompt(composite)
        Log.debug(f"Analysis prompt:\n{prompt}")

        raw_response = self._call_ai(prompt)
        Log.debug(f"AI raw response:\n{raw_response}")

        response = parse_analysis_response(raw_response)
        if isinstance(response, AnalysisErr):
            raise AnalysisResponseError(response.reason)

        result = SynthesisResult(
            improved_text=sanitize(response.improved_text),
            suggestions=response.suggestions,
            models_used=normalize_models(models),
        )
        Log.info(
            f"Analysis complete: {len(result.suggestions)} suggestions",
            model=self._model,
        )
        return result

    def _build_prompt(self, composite: CompositeInput) -> str:
        return self._prompt_template.format(
            cv_text=compose_analysis_text(composite),
            json_schema=self._json_schema,
        )

    def _call_ai(self, prompt: str) -> str:
        return self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
            json_schema=self._json_schema_dict,
        )
