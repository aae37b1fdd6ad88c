"""User-supplied API keys, persisted as a JSON object keyed by model id."""

import json
from pathlib import Path

from cv_optimizer.config.settings import Settings
from cv_optimizer.keys.exceptions import ApiKeyStoreError
from cv_optimizer.logging.logger import Log

SUPPORTED_MODELS: tuple[str, ...] = ("openai", "claude", "gemini", "qwen", "deepseek")


class ApiKeyStore:
    """Local key-value store for API keys entered by the user."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def all(self) -> dict[str, str]:
        """Return every stored key. Missing or unreadable files count as empty."""
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            Log.error(f"Error retrieving user API keys from {self._path}: {exc}")
            return {}
        if not isinstance(data, dict):
            Log.error(f"User API key store {self._path} is not a JSON object")
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def get(self, model: str) -> str:
        return self.all().get(model, "")

    def set(self, model: str, key: str) -> None:
        if model not in SUPPORTED_MODELS:
            raise ApiKeyStoreError(
                f"Unknown model '{model}'. Choose from: {list(SUPPORTED_MODELS)}"
            )
        keys = self.all()
        keys[model] = key.strip()
        self._write(keys)

    def remove(self, model: str) -> None:
        keys = self.all()
        if keys.pop(model, None) is not None:
            self._write(keys)

    def _write(self, keys: dict[str, str]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(keys, indent=2, sort_keys=True), encoding="utf-8")
        except OSError as exc:
            raise ApiKeyStoreError(f"Failed to save API keys to {self._path}: {exc}") from exc


def environment_key(model: str, settings: Settings) -> str:
    return str(getattr(settings, f"{model}_api_key", "") or "")


def resolve_api_key(model: str, settings: Settings, store: ApiKeyStore) -> str:
    """User-supplied key first, then the environment-preconfigured one."""
    return store.get(model) or environment_key(model, settings)


def available_models(settings: Settings, store: ApiKeyStore) -> list[str]:
    """Model ids that have a key from either source, in canonical order."""
    return [m for m in SUPPORTED_MODELS if resolve_api_key(m, settings, store)]
