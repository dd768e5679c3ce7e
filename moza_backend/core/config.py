"""
Configuration settings for the API.
Loads environment variables and provides application settings.
"""

from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    """

    # Database
    DATABASE_URL: str
    DB_ECHO: bool = False

    # Security
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 72 * 60

    # API
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "Moza Backend"
    VERSION: str = "1.0.0"
    DESCRIPTION: str = "REST backend for user accounts, bank accounts, cards and transfers"
    CORS_ORIGINS: List[str] = ["*"]

    # Logging
    LOG_LEVEL: str = "INFO"

    # Banking
    IDENTIFIER_MAX_ATTEMPTS: int = 5
    CARD_VALIDITY_YEARS: int = 4
    TRANSACTION_REFERENCE_PREFIX: str = "TXN"

    class Config:
        env_file = ".env"
        case_sensitive = True


# Create global settings instance
settings = Settings()
