"""Avatar download utilities.

Fetches avatar images synchronously and reports failures as ``None`` instead
of raising, so a missing avatar never breaks the caller.
"""

from __future__ import annotations

import logging
from types import TracebackType

import httpx

from gravatar_cache.constants import AVATAR_REQUEST_HEADERS

logger = logging.getLogger("gravatar_cache.downloader")


class AvatarDownloader:
    """Downloads avatar images over HTTP.

    Example:
        with AvatarDownloader() as downloader:
            content = downloader.fetch("http://www.gravatar.com/avatar/...")
    """

    def __init__(
        self,
        *,
        timeout: float | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        """Initialize the downloader.

        Args:
            timeout: HTTP request timeout in seconds, ``None`` to wait forever
            client: Optional preconfigured client; the downloader does not
                close clients it did not create
        """
        self.timeout = timeout
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=timeout,
            follow_redirects=True,
            headers=AVATAR_REQUEST_HEADERS,
        )

    def fetch(self, url: str) -> bytes | None:
        """Download the avatar at ``url``.

        Returns:
            The response body, or None if the request failed or was empty
        """
        try:
            response = self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.debug("HTTP error for %s: %s", url, exc)
            return None

        if not response.content:
            logger.debug("Skipping empty avatar response: %s", url)
            return None

        return response.content

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> AvatarDownloader:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


__all__ = ["AvatarDownloader"]
