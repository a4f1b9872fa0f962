"""
Application configuration using pydantic-settings.
All config is loaded from environment variables with sensible defaults.
"""

import os
from functools import lru_cache

from pydantic_settings import BaseSettings

DEFAULT_PRICES_FILE = os.path.join(
    os.path.dirname(os.path.dirname(__file__)), "resources", "prices.properties"
)


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Cinema Tickets"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Pricing
    PRICES_FILE: str = DEFAULT_PRICES_FILE

    model_config = {
        "env_file": ".env",
        "case_sensitive": True,
    }


@lru_cache()
def get_settings() -> Settings:
    return Settings()
