"""Application configuration."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: str = "sqlite:///./curalink.db"

    # Auth
    jwt_secret_key: str = ""

    # API Keys
    anthropic_api_key: str = ""
    serpapi_api_key: str = ""

    # LLM Settings
    summary_model: str = "claude-haiku-4-5-20251001"

    # Upstream etiquette (NCBI and ORCID ask for a contact address)
    contact_email: str = "test@example.com"

    # App Settings
    cors_origins: list[str] = ["http://localhost:5173"]
    debug: bool = False
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        frozen = True


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
