"""Application configuration loaded from environment variables."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from wyr.models.question import GenerationMode


class Settings(BaseSettings):
    """Global application settings."""

    openai_api_key: Optional[str] = Field(
        default=None, description="Secret key for OpenAI APIs."
    )
    openai_base_url: str = "https://api.openai.com/v1"
    openai_model_chat: str = "gpt-4.1-mini"

    generation_mode: GenerationMode = GenerationMode.STRUCTURED
    temperature: float = 1.0
    max_output_tokens: int = 300

    default_category: str = "General"
    or_separator_ignore_case: bool = False
    or_separator_word_boundary: bool = False
    marker_word_boundary: bool = False

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
