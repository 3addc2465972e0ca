"""Configuration management using Pydantic Settings.

Priority order:
1. Environment variables (highest priority, for Cloud Run)
2. .env file (for local development fallback)
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    Configuration is loaded from:
    1. Environment variables (highest priority)
    2. .env file (local development fallback)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Google Cloud
    google_project_id: str
    google_location: str = "us-central1"
    environment: str = "dev"

    # Vertex AI
    llm_model: str = "gemini-2.0-flash"
    llm_model_lite: str = "gemini-2.0-flash-lite"
    llm_temperature: float = 0.7
    llm_max_output_tokens: int = 800  # Token budget for one rhyme with guide and translation

    # Feature flags
    use_lite_model: bool = True  # Use flash-lite for rhyme generation

    @property
    def is_production(self) -> bool:
        """Whether the app runs in the production environment."""
        return self.environment == "prod"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Default settings instance
settings = get_settings()
