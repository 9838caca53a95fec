from typing import List, Optional
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_JWT_SECRET = "syndicpro-dev-secret"


class Settings(BaseSettings):
    # -------------------------------------------------
    # General
    # -------------------------------------------------
    PROJECT_NAME: str = "SyndicPro API"
    ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # -------------------------------------------------
    # CORS (dashboard frontends)
    # -------------------------------------------------
    FRONTEND_DOMAINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]
    BACKEND_CORS_ORIGINS: List[str] = []

    # -------------------------------------------------
    # Session tokens
    # -------------------------------------------------
    JWT_SECRET_KEY: str = DEFAULT_JWT_SECRET
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 12

    # Demo manager account (simulated login, no password check)
    MANAGER_EMAIL: str = "sindico@email.com"

    # -------------------------------------------------
    # AI notice drafting (Google Generative Language API)
    # -------------------------------------------------
    GEMINI_API_KEY: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY"),
    )
    GEMINI_MODEL: str = "gemini-2.5-flash"
    GEMINI_API_URL: str = "https://generativelanguage.googleapis.com/v1beta"
    AI_REQUEST_TIMEOUT: int = Field(30, description="Seconds before the drafting call gives up")

    # -------------------------------------------------
    # In-memory data
    # -------------------------------------------------
    SEED_SAMPLE_DATA: bool = True

    # -------------------------------------------------
    # Forgot-password rate limiting
    # -------------------------------------------------
    FORGOT_PASSWORD_MAX_REQUESTS: int = 5
    FORGOT_PASSWORD_WINDOW_SECONDS: int = 3600

    # -------------------------------------------------
    # Model Config
    # -------------------------------------------------
    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        extra="ignore",
    )


# Instantiate settings
settings = Settings()

# -------------------------------------------------
# Build CORS list after loading settings
# -------------------------------------------------
settings.BACKEND_CORS_ORIGINS = sorted({d.rstrip("/") for d in settings.FRONTEND_DOMAINS})
