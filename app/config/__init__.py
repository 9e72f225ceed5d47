"""
Application Settings
Load from environment variables
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings from environment"""

    # ======================
    # Database
    # ======================
    DATABASE_URL: str = "sqlite+aiosqlite:///./portfolio.db"
    AUTO_CREATE_TABLES: bool = True

    # ======================
    # Application
    # ======================
    APP_ENV: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 5000
    CORS_ORIGINS: List[str] = ["*"]

    # ======================
    # Portfolio analytics
    # ======================
    ACTIVITY_LIMIT: int = 5

    # Placeholders reported in the summary, not derived from holdings
    DIVERSIFICATION_SCORE: float = 8.2
    RISK_LEVEL: str = "Moderate"

    # ======================
    # Ingestion
    # ======================
    PORTFOLIO_WORKBOOK: Optional[str] = None

    # ======================
    # Pydantic v2 config
    # ======================
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="forbid",
    )


settings = Settings()
