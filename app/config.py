"""Application configuration read from the environment."""
import os
from dataclasses import dataclass


def _get_env(name: str, default: str | None) -> str | None:
    value = os.getenv(name)
    return value if value is not None else default


def _get_timeout() -> float | None:
    # Unset means no timeout at all: a hung connection stays in the loading state
    value = _get_env("POKEAPI_TIMEOUT", None)
    return float(value) if value else None


@dataclass(frozen=True)
class Settings:
    pokeapi_base_url: str = _get_env("POKEAPI_BASE_URL", "https://pokeapi.co/api/v2")
    pokeapi_timeout: float | None = _get_timeout()
    log_level: str = _get_env("LOG_LEVEL", "INFO")


settings = Settings()
