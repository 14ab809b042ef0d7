# config/settings.py
from functools import lru_cache

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # LLM provider
    # The key is not validated here; a missing key surfaces as a request-time model error.
    api_key: SecretStr | None = Field(default=None, description="Credential for the text-generation service")
    llm_provider: str = Field(default="gemini", description="gemini | openai")
    llm_model: str = Field(default="gemini-2.0-flash")
    openai_base_url: str | None = Field(default=None, description="OpenAI-compatible endpoint for the openai provider")
    llm_timeout_seconds: float = Field(default=30.0, gt=0)

    # Diagnostics
    prompt_test_delay_seconds: float = Field(default=1.0, ge=0)

    # Server
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=3000)
    debug: bool = Field(default=False)

    # Logging
    log_level: str = Field(default="INFO")
    log_to_console: bool = Field(default=True)
    log_file: str | None = Field(default=None)


@lru_cache
def get_settings() -> Settings:
    return Settings()
