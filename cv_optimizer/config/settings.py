from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"

    max_upload_size_bytes: int = 5 * 1024 * 1024
    allowed_extensions: list[str] = [".pdf", ".doc", ".docx", ".txt"]

    pdf_engine: str = "pdfplumber"

    use_mock_analyzer: bool = False
    analysis_temperature: float = 0.7
    analysis_timeout_seconds: int = 30

    openai_api_key: str = ""
    openai_model_name: str = "gpt-4o"
    claude_api_key: str = ""
    claude_model_name: str = "claude-3-7-sonnet-latest"
    gemini_api_key: str = ""
    gemini_model_name: str = "gemini-2.0-flash"
    qwen_api_key: str = ""
    qwen_model_name: str = "qwen-plus"
    deepseek_api_key: str = ""
    deepseek_model_name: str = "deepseek-chat"

    api_keys_store_path: Path = Path.home() / ".cv_optimizer" / "api_keys.json"

    export_template: str = "eu"
