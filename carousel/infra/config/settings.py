"""
Application configuration settings.
"""

from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Application
    app_name: str = Field("Carousel Generator API", alias="APP_NAME")
    environment: str = Field("development", alias="ENVIRONMENT")
    debug: bool = Field(False, alias="DEBUG")

    # Server
    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(8000, alias="PORT")

    # Text generation
    text_provider: str = Field("gemini", alias="TEXT_PROVIDER")
    gemini_api_key: Optional[str] = Field(
        None, validation_alias=AliasChoices("GEMINI_API_KEY", "GOOGLE_API_KEY")
    )
    gemini_model: str = Field("gemini-1.5-flash", alias="GEMINI_MODEL")
    gemini_base_url: str = Field(
        "https://generativelanguage.googleapis.com/v1beta", alias="GEMINI_BASE_URL"
    )
    openai_api_key: Optional[str] = Field(None, alias="OPENAI_API_KEY")
    openai_model: str = Field("gpt-4o-mini", alias="OPENAI_MODEL")
    openai_base_url: Optional[str] = Field(None, alias="OPENAI_BASE_URL")
    llm_temperature: float = Field(0.8, alias="LLM_TEMPERATURE")
    llm_max_tokens: int = Field(2048, alias="LLM_MAX_TOKENS")
    llm_top_k: int = Field(40, alias="LLM_TOP_K")
    llm_top_p: float = Field(0.95, alias="LLM_TOP_P")
    text_timeout_seconds: float = Field(25.0, alias="TEXT_TIMEOUT_SECONDS")
    fallback_enabled: bool = Field(True, alias="FALLBACK_ENABLED")

    # Image generation (empty provider disables images)
    image_provider: str = Field("", alias="IMAGE_PROVIDER")
    image_api_key: Optional[str] = Field(None, alias="IMAGE_API_KEY")
    image_endpoint: Optional[str] = Field(None, alias="IMAGE_ENDPOINT")
    image_model: str = Field("gpt-image-1", alias="IMAGE_MODEL")
    image_size: str = Field("1024x1024", alias="IMAGE_SIZE")
    image_timeout_seconds: float = Field(8.0, alias="IMAGE_TIMEOUT_SECONDS")

    # CORS
    cors_origins: str = Field("*", alias="CORS_ORIGINS")
    cors_allow_credentials: bool = Field(False, alias="CORS_ALLOW_CREDENTIALS")

    # Logging
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_format: str = Field("json", alias="LOG_FORMAT")

    def get_cors_origins(self) -> list[str]:
        """Parse CORS origins from string."""
        if self.cors_origins == "*":
            return ["*"]
        return [
            origin.strip() for origin in self.cors_origins.split(",") if origin.strip()
        ]

    def images_enabled(self) -> bool:
        return bool(self.image_provider.strip())

    def is_production(self) -> bool:
        return self.environment.lower() == "production"


_settings = None


def get_settings() -> Settings:
    """Get settings instance (useful for dependency injection)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
