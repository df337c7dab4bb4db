import logging
import os
from collections.abc import Mapping
from functools import lru_cache

from dotenv import load_dotenv

DEFAULT_PORT = 8080
DEFAULT_HOST = "0.0.0.0"
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """Raised when the environment holds an unusable setting."""


class Settings:
    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        env: Mapping[str, str] = os.environ if environ is None else environ

        self.host = env.get("HOST") or DEFAULT_HOST
        self.port = parse_port(env.get("PORT") or str(DEFAULT_PORT))
        self.log_level = parse_log_level(env.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL)


def parse_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError:
        raise ConfigError(f"PORT must be an integer, got {raw!r}") from None
    if not 1 <= port <= 65535:
        raise ConfigError(f"PORT must be between 1 and 65535, got {port}")
    return port


def parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"Unknown LOG_LEVEL {raw!r}")
    return level


@lru_cache
def get_settings() -> Settings:
    """
    Load settings once per process.

    A .env file in the working directory is read first; variables already
    set in the environment win.
    """
    load_dotenv()
    return Settings()


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
