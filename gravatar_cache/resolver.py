"""Resolve email addresses into displayable avatar locators.

A locator is either the remote gravatar URL or the path of a locally cached
copy, and can be used directly as an ``<img src>``.

Example:
    resolver = AvatarResolver()
    resolver.configure("cache/")
    resolver.set_defaults(100, "g", "identicon")
    src = resolver.resolve("test@test.com")
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from types import TracebackType

from gravatar_cache.cache import AvatarCache
from gravatar_cache.config import AvatarConfig
from gravatar_cache.downloader import AvatarDownloader
from gravatar_cache.utils.gravatar import gravatar_url

logger = logging.getLogger("gravatar_cache.resolver")


class AvatarStatus(str, Enum):
    """How an avatar request was served."""

    CACHED = "cached"
    FETCHED = "fetched"
    FETCH_FAILED = "fetch_failed"
    UNCACHED = "uncached"


@dataclass(frozen=True)
class AvatarResult:
    """Outcome of resolving a single avatar."""

    url: str
    local_path: Path | None
    status: AvatarStatus

    @property
    def locator(self) -> str:
        """The string handed back by ``AvatarResolver.resolve``.

        Only a pre-existing cache entry yields the local path. A freshly
        fetched avatar is still reported by its remote URL.
        """
        if self.status is AvatarStatus.CACHED and self.local_path is not None:
            return str(self.local_path)
        return self.url


class AvatarResolver:
    """Looks up gravatars and caches the images locally.

    Caching is disabled until a cache directory is configured.
    """

    def __init__(
        self,
        config: AvatarConfig | None = None,
        *,
        downloader: AvatarDownloader | None = None,
    ) -> None:
        self.config = replace(config) if config is not None else AvatarConfig()
        self._downloader = downloader
        self._owns_downloader = downloader is None
        if self.config.cache_dir is not None:
            self.configure(self.config.cache_dir)

    @property
    def use_cache(self) -> bool:
        return self.config.use_cache

    @property
    def cache(self) -> AvatarCache | None:
        """The cache for the currently configured directory, if any."""
        if self.config.cache_dir is None:
            return None
        return AvatarCache(self.config.cache_dir)

    def configure(self, cache_dir: Path | str) -> None:
        """Enable caching in ``cache_dir``, creating it when missing."""
        cache = AvatarCache(cache_dir)
        cache.ensure_directory()
        self.config.cache_dir = cache.directory
        logger.debug("Avatar cache enabled in %s", cache.directory)

    set_cache_dir = configure

    def set_defaults(
        self,
        size: int | None = None,
        rating: str | None = None,
        default: str | None = None,
    ) -> None:
        """Override the default image parameters.

        Falsy arguments are ignored rather than resetting the current value.
        """
        if size:
            self.config.size = size
        if rating:
            self.config.rating = rating
        if default:
            self.config.default = default

    def remote_url(
        self,
        email: str,
        size: int | None = None,
        rating: str | None = None,
        default: str | None = None,
    ) -> str:
        """Return the gravatar URL for ``email`` after applying defaults."""
        return gravatar_url(
            email,
            size=size or self.config.size,
            rating=rating or self.config.rating,
            default=default or self.config.default,
            base_url=self.config.base_url,
        )

    def cache_path(
        self,
        email: str,
        size: int | None = None,
        rating: str | None = None,
        default: str | None = None,
    ) -> Path | None:
        """Return where the avatar would be cached, or None without a cache."""
        cache = self.cache
        if cache is None:
            return None
        return cache.path_for(self.remote_url(email, size, rating, default))

    def resolve_result(
        self,
        email: str,
        size: int | None = None,
        rating: str | None = None,
        default: str | None = None,
    ) -> AvatarResult:
        """Resolve an avatar and report how it was served."""
        url = self.remote_url(email, size, rating, default)

        cache = self.cache
        if cache is None:
            return AvatarResult(url=url, local_path=None, status=AvatarStatus.UNCACHED)

        cached = cache.lookup(url)
        if cached is not None:
            logger.debug("Avatar cache hit for %s", url)
            return AvatarResult(url=url, local_path=cached, status=AvatarStatus.CACHED)

        content = self.downloader.fetch(url)
        if content is None:
            logger.info("Could not fetch avatar %s", url)
            return AvatarResult(
                url=url, local_path=None, status=AvatarStatus.FETCH_FAILED
            )

        stored = cache.store(url, content)
        return AvatarResult(url=url, local_path=stored, status=AvatarStatus.FETCHED)

    def resolve(
        self,
        email: str,
        size: int | None = None,
        rating: str | None = None,
        default: str | None = None,
    ) -> str:
        """Return a locator for ``email`` usable directly in an ``<img>`` tag.

        Args:
            email: Email address, compared case- and whitespace-insensitively
            size: Image size in pixels
            rating: Maximum content rating (``g``, ``pg``, ``r``, ``x``)
            default: Fallback image style such as ``identicon``

        Returns:
            The cached file path on a cache hit, otherwise the remote URL
        """
        return self.resolve_result(email, size, rating, default).locator

    def get_gravatar(
        self,
        email: str,
        size: int | None = None,
        rating: str | None = None,
        default: str | None = None,
    ) -> str:
        """Deprecated alias of :meth:`resolve`."""
        warnings.warn(
            "get_gravatar() is deprecated, use resolve() instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.resolve(email, size, rating, default)

    @property
    def downloader(self) -> AvatarDownloader:
        if self._downloader is None:
            self._downloader = AvatarDownloader(timeout=self.config.timeout)
        return self._downloader

    def close(self) -> None:
        if self._owns_downloader and self._downloader is not None:
            self._downloader.close()
            self._downloader = None

    def __enter__(self) -> AvatarResolver:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


__all__ = [
    "AvatarResolver",
    "AvatarResult",
    "AvatarStatus",
]
