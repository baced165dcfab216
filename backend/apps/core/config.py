"""
Configuration module using Pydantic Settings.
"""

import json
from typing import Annotated, Any

from dotenv import load_dotenv
from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

load_dotenv()


class OpenAIConfig(BaseSettings):
    api_key: SecretStr | None = Field(default=None, alias="OPENAI_API_KEY")
    base_url: str = Field(default="https://api.openai.com/v1", alias="OPENAI_BASE_URL")
    transcription_model: str = Field(default="whisper-1", alias="OPENAI_TRANSCRIPTION_MODEL")
    chat_model: str = Field(default="gpt-4o", alias="OPENAI_CHAT_MODEL")
    # None waits on the provider indefinitely
    timeout: float | None = Field(default=None, alias="OPENAI_TIMEOUT")


class CORSConfig(BaseSettings):
    allow_origins: Annotated[list[str], NoDecode] = Field(default=["*"], alias="CORS_ALLOW_ORIGINS")
    allow_methods: Annotated[list[str], NoDecode] = Field(default=["GET", "POST"], alias="CORS_ALLOW_METHODS")
    allow_headers: Annotated[list[str], NoDecode] = Field(
        default=["Content-Type", "Authorization"], alias="CORS_ALLOW_HEADERS"
    )

    @field_validator("allow_origins", "allow_methods", "allow_headers", mode="before")
    @classmethod
    def split_values(cls, value: Any) -> Any:
        """Accept a JSON list or a comma-separated string."""
        if not isinstance(value, str):
            return value
        if value.strip().startswith("["):
            return json.loads(value)
        return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseSettings):
    """Application-wide settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    # Sub-configs
    openai: OpenAIConfig = Field(default_factory=OpenAIConfig)
    cors: CORSConfig = Field(default_factory=CORSConfig)

    def openai_api_key(self) -> str | None:
        """Provider secret as plain text, or None when it is not configured."""
        if self.openai.api_key is None:
            return None
        return self.openai.api_key.get_secret_value() or None


settings = Settings()
