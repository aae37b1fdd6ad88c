import httpx
import openai

from cv_optimizer.analysis.client_base import BaseAnalysisClient
from cv_optimizer.analysis.exceptions import AnalysisNetworkError, AnalysisResponseError


class OpenAIClientAdapter(BaseAnalysisClient):
    """Analysis client built on the OpenAI-compatible chat completions API.

    Providers without structured-output support get ``json_object`` mode; the
    schema is still spelled out in the prompt.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
        strict_schema: bool = True,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )
        self._strict_schema = strict_schema

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                response_format=self._response_format(json_schema),
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise AnalysisNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise AnalysisNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise AnalysisResponseError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise AnalysisResponseError("AI returned empty response")
        return content

    def _response_format(self, json_schema: dict[str, object]) -> dict[str, object]:
        if not self._strict_schema:
            return {"type": "json_object"}
        return {
            "type": "json_schema",
            "json_schema": {
                "name": "cv_analysis_result",
                "strict": True,
                "schema": json_schema,
            },
        }
