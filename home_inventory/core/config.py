"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Storage
    DATABASE_URL: str = "sqlite:///./inventory.db"

    # Application
    APP_NAME: str = "Home Inventory"
    APP_VERSION: str = "1.1.0"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]

    # Preference defaults (used when no cookie is present)
    DEFAULT_CURRENCY: str = "USD"
    DEFAULT_UNITS: str = "imperial"

    # AI assistant (empty key disables every lookup)
    GEMINI_API_KEY: str = ""
    GEMINI_MODEL: str = "gemini-2.5-flash"
    GEMINI_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta"
    AI_TIMEOUT_SECONDS: float = 30.0

    class Config:
        env_file = ".env"


settings = Settings()
