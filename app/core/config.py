"""
Configuration settings for the application
"""

import os
from typing import List
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application settings"""

    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./activities.db")
    SEED_ON_STARTUP: bool = True
    SEED_CLEAR_FIRST: bool = False

    # Request handling
    REQUEST_TIMEOUT_SECONDS: float = 30.0
    DELETE_DELAY_SECONDS: float = 0.1  # awaited before a delete commits

    # CORS
    ALLOW_ORIGINS: List[str] = [
        "http://localhost:3000",
        "https://localhost:3000",
        "https://localhost:3001",
    ]

    # Transport security
    ENABLE_HSTS: bool = False
    HTTPS_REDIRECT: bool = False

    # Rate limiting
    RATE_LIMIT_PER_MINUTE: int = 60
    TRUST_FORWARDED_HEADERS: bool = False  # only behind a reverse proxy

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    class Config:
        env_file = ".env"

settings = Settings()
