"""Service-wide configuration.

Defines the fixed service identity and reads the runtime settings from the
environment once at startup:
- PORT: listening port (default 5100)
- APP_VERSION: version string reported by `/version` (default v1.0.0)
- LOG_LEVEL: console log level (default INFO)
"""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

SERVICE_NAME = "devops-demo"
BIND_HOST = "0.0.0.0"

DEFAULT_PORT = 5100
DEFAULT_VERSION = "v1.0.0"
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

# config.py -> core -> devops_demo -> repo root
REPO_ROOT = Path(__file__).resolve().parents[2]


class Settings(BaseModel):
    """Immutable runtime settings, read once per process."""

    model_config = ConfigDict(frozen=True)

    port: int = Field(DEFAULT_PORT, ge=1, le=65535)
    version: str = DEFAULT_VERSION
    log_level: str = DEFAULT_LOG_LEVEL


def load_env() -> None:
    """Load `.env` then `.env.local` from the repo root if present.

    Existing environment variables are never overridden, so real deployment
    configuration always wins over local files.
    """
    load_dotenv(dotenv_path=REPO_ROOT / ".env", override=False)
    load_dotenv(dotenv_path=REPO_ROOT / ".env.local", override=False)


def parse_port(raw: Optional[str]) -> int:
    """Parse PORT, falling back to the default when unset or unusable."""
    if raw is None or not raw.strip():
        return DEFAULT_PORT
    digits = raw.strip()
    # Plain ASCII digits only; int() would also take "1_000", "+80" or non-ASCII digits.
    if not (digits.isascii() and digits.isdigit()):
        logger.warning("Ignoring non-numeric PORT=%r, using %d", raw, DEFAULT_PORT)
        return DEFAULT_PORT
    port = int(digits)
    if not 1 <= port <= 65535:
        logger.warning("Ignoring out-of-range PORT=%r, using %d", raw, DEFAULT_PORT)
        return DEFAULT_PORT
    return port


def parse_log_level(raw: Optional[str]) -> str:
    level = (raw or DEFAULT_LOG_LEVEL).strip().upper()
    return level if level in LOG_LEVELS else DEFAULT_LOG_LEVEL


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ
    return Settings(
        port=parse_port(env.get("PORT")),
        # Empty APP_VERSION counts as unset
        version=env.get("APP_VERSION") or DEFAULT_VERSION,
        log_level=parse_log_level(env.get("LOG_LEVEL")),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings, parsed on first use."""
    return load_settings()
