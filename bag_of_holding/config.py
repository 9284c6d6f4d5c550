# bag_of_holding/config.py
"""Service configuration read from the environment (and an optional .env file)."""

import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

log = logging.getLogger(__name__)

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 5000
DEFAULT_LOG_LEVEL = "INFO"


def _parse_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def _parse_seed(raw: Optional[str]) -> Optional[int]:
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"BOH_SEED must be an integer, got {raw!r}") from None


@dataclass
class Settings:
    """Runtime settings for the web service."""
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    seed: Optional[int] = None

    @classmethod
    def from_env(cls, env_path: Optional[str] = None) -> 'Settings':
        """Build settings from ``BOH_*`` environment variables.

        Args:
            env_path: Optional .env file to load first; variables already set
                in the environment win over the file.
        """
        loaded = load_dotenv(env_path)
        log.debug("Loaded env file %s (loaded=%s)", env_path or ".env", loaded)

        settings = cls(
            host=os.getenv("BOH_HOST", DEFAULT_HOST),
            port=int(os.getenv("BOH_PORT", str(DEFAULT_PORT))),
            log_level=os.getenv("BOH_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
            cors_origins=_parse_origins(os.getenv("BOH_CORS_ORIGINS", "*")),
            seed=_parse_seed(os.getenv("BOH_SEED")),
        )
        log.debug("Config: host=%s, port=%s, log_level=%s, seed=%s",
                  settings.host, settings.port, settings.log_level, settings.seed)
        return settings
