"""Local avatar cache storage."""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path

from gravatar_cache.constants import CACHE_EXTENSION, CACHE_PREFIX

logger = logging.getLogger("gravatar_cache.cache")


def cache_filename(url: str) -> str:
    """Return the cache filename for a remote avatar URL."""
    digest = hashlib.md5(url.encode("utf-8")).hexdigest()  # noqa: S324
    return f"{CACHE_PREFIX}{digest}{CACHE_EXTENSION}"


def cache_path(cache_dir: Path | str, url: str) -> Path:
    """Return the cache file path for a remote avatar URL."""
    return Path(cache_dir) / cache_filename(url)


class AvatarCache:
    """Stores fetched avatars in a directory, keyed by their remote URL.

    Entries are written once and never refreshed or removed.
    """

    def __init__(self, directory: Path | str) -> None:
        self.directory = Path(directory)

    def ensure_directory(self) -> None:
        """Ensure the cache directory exists."""
        self.directory.mkdir(parents=True, exist_ok=True)

    def path_for(self, url: str) -> Path:
        return cache_path(self.directory, url)

    def lookup(self, url: str) -> Path | None:
        """Return the cached file for ``url`` if it exists."""
        path = self.path_for(url)
        if path.exists():
            return path
        return None

    def store(self, url: str, content: bytes) -> Path:
        """Write ``content`` as the cache entry for ``url``.

        Raises:
            OSError: If the file cannot be written
        """
        path = self.path_for(url)
        path.write_bytes(content)
        logger.debug("Cached avatar %s -> %s (%d bytes)", url, path, len(content))
        return path


__all__ = [
    "AvatarCache",
    "cache_filename",
    "cache_path",
]
