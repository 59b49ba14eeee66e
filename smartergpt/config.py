"""Centralized config loading: read once at import time."""

import os
from dataclasses import dataclass
from pathlib import Path

import yaml
from dotenv import load_dotenv

# Load .env from project root (parent of smartergpt/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(_PROJECT_ROOT / ".env")

CONFIG_PATH = Path(__file__).resolve().parent / "config.yaml"

_config = yaml.safe_load(CONFIG_PATH.read_text())


def get_config() -> dict:
    """Return the loaded config dictionary."""
    return _config


@dataclass(frozen=True)
class Settings:
    """Process settings handed to the pipeline and its conversation."""

    api_key: str | None
    model: str = "gpt-3.5-turbo"
    temperature: float = 0.5
    number_of_requests: int = 3
    rate_limit_backoff_seconds: float = 20.0
    rate_limit_max_retries: int | None = 5  # None retries forever
    request_timeout_seconds: float | None = 120.0

    def __post_init__(self):
        if not isinstance(self.number_of_requests, int) or self.number_of_requests < 1:
            raise ValueError(
                f"number_of_requests must be a whole number of at least 1, got {self.number_of_requests!r}"
            )


def load_settings() -> Settings:
    """Build Settings from config.yaml plus the API key in the environment.

    Raises ValueError if number_of_requests is not a whole number of at least 1.
    """
    config = get_config()
    api_key_env = config.get("api_key_env", "OPENAI_API_KEY")

    return Settings(
        api_key=os.environ.get(api_key_env) or None,
        model=config.get("model", "gpt-3.5-turbo"),
        temperature=config.get("temperature", 0.5),
        number_of_requests=config.get("number_of_requests", 3),
        rate_limit_backoff_seconds=config.get("rate_limit_backoff_seconds", 20.0),
        rate_limit_max_retries=config.get("rate_limit_max_retries", 5),
        request_timeout_seconds=config.get("request_timeout_seconds", 120.0),
    )
