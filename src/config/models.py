"""Configuration models and data structures."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from config.config import (
    BACKEND_URL_ENV,
    DEFAULT_BACKEND_URL,
    DEFAULT_LOG_LEVEL,
    FETCH_TIMEOUT_S,
    LOG_LEVEL_ENV,
    RECENT_ACTIVITY_LIMIT,
)


@dataclass(frozen=True)
class DashboardConfig:
    """Configuration injected into the overview controller."""
    backend_url: str = DEFAULT_BACKEND_URL
    timeout_s: float = FETCH_TIMEOUT_S
    recent_activity_limit: int = RECENT_ACTIVITY_LIMIT
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        if not self.backend_url:
            raise ValueError("backend_url must be a non-empty address")
        if self.timeout_s <= 0:
            raise ValueError("timeout_s must be positive")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DashboardConfig":
        """Build a config from environment variables.

        An unset or empty ``BACKEND_URL`` falls back to the local development
        address.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.
        """
        env = os.environ if environ is None else environ
        backend_url = (env.get(BACKEND_URL_ENV) or "").strip() or DEFAULT_BACKEND_URL
        log_level = (env.get(LOG_LEVEL_ENV) or "").strip().upper() or DEFAULT_LOG_LEVEL
        return cls(backend_url=normalize_base_url(backend_url), log_level=log_level)


def normalize_base_url(url: str) -> str:
    """Strip surrounding whitespace and trailing slashes from a base address."""
    return url.strip().rstrip("/")
