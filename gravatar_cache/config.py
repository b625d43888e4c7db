"""Configuration management for gravatar-cache."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from gravatar_cache.constants import DEFAULT_RATING, DEFAULT_SIZE, DEFAULT_STYLE
from gravatar_cache.utils.gravatar import SERVICE_BASE_URL


@dataclass
class AvatarConfig:
    """Avatar resolver configuration."""

    size: int = DEFAULT_SIZE
    rating: str = DEFAULT_RATING
    default: str = DEFAULT_STYLE
    cache_dir: Path | None = None
    base_url: str = SERVICE_BASE_URL
    timeout: float | None = None

    @property
    def use_cache(self) -> bool:
        return self.cache_dir is not None

    @classmethod
    def from_env(cls, *, load_dotenv_file: bool = True) -> AvatarConfig:
        """Build a configuration from ``GRAVATAR_*`` environment variables.

        Args:
            load_dotenv_file: Load a ``.env`` file from the working directory
                (or its parents) first

        Raises:
            ValueError: If a numeric variable cannot be parsed
        """
        if load_dotenv_file:
            load_dotenv(find_dotenv(usecwd=True))

        # Empty values keep the defaults, like set_defaults().
        cache_dir = os.getenv("GRAVATAR_CACHE_DIR")
        size = os.getenv("GRAVATAR_SIZE")
        timeout = os.getenv("GRAVATAR_TIMEOUT")
        return cls(
            size=int(size or 0) or DEFAULT_SIZE,
            rating=os.getenv("GRAVATAR_RATING") or DEFAULT_RATING,
            default=os.getenv("GRAVATAR_DEFAULT") or DEFAULT_STYLE,
            cache_dir=Path(cache_dir) if cache_dir else None,
            base_url=os.getenv("GRAVATAR_BASE_URL") or SERVICE_BASE_URL,
            timeout=float(timeout) if timeout else None,
        )
