"""
Configuration management for the WorqHat client.
"""

import logging
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SDK_VERSION = "1.0.0"
DEFAULT_BASE_URL = "https://api.worqhat.com"


class Configuration(BaseSettings):
    """Settings bound to a single client instance.

    Values can be passed directly or read from ``WORQHAT_*`` environment
    variables (``WORQHAT_API_KEY``, ``WORQHAT_DEBUG``...). The object is
    frozen once constructed.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="WORQHAT_", extra="ignore", frozen=True
    )

    api_key: str
    debug: bool = False
    max_retries: int = Field(2, ge=0, description="Retries after the first attempt")
    retry_delay: float = Field(0.5, ge=0, description="Base backoff delay in seconds")
    timeout: float = Field(60.0, gt=0)
    base_url: str = DEFAULT_BASE_URL

    @field_validator("api_key", mode="before")
    @classmethod
    def _check_api_key(cls, value: Any) -> str:
        if not value:
            raise ValueError("API Key is required")
        if not isinstance(value, str):
            raise ValueError("API Key must be a string")
        return value

    @field_validator("base_url")
    @classmethod
    def _strip_base_url(cls, value: str) -> str:
        return value.rstrip("/")

    def setup_logging(self) -> None:
        """Configure logging for the client."""
        level = logging.DEBUG if self.debug else logging.INFO

        logger = logging.getLogger("worqhat")
        logger.setLevel(level)

        if not logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            )
            handler.setFormatter(formatter)
            logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name."""
    return logging.getLogger(f"worqhat.{name}")
