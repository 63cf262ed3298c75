"""Validation configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Validation settings loaded from environment variables."""

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # Person names
    NAME_MIN_LENGTH: int = 2

    # Usernames
    USERNAME_MIN_LENGTH: int = 3
    USERNAME_MAX_LENGTH: int = 30

    # Passwords
    PASSWORD_MIN_LENGTH: int = 8
    PASSWORD_MIN_SCORE: int = 4

    # Dates
    MAX_AGE_YEARS: int = 120

    # Input filters
    PHONE_DIGITS: int = 10
    ZIPCODE_DIGITS: int = 6

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
