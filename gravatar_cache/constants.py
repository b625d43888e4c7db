"""Avatar fetch and cache constants."""

from __future__ import annotations

# Cache file naming
CACHE_PREFIX = "GRAVATAR_CACHE_"
CACHE_EXTENSION = ".jpg"

# Defaults
DEFAULT_SIZE = 50  # pixels
DEFAULT_RATING = "g"
DEFAULT_STYLE = "identicon"

# HTTP headers for avatar requests
AVATAR_REQUEST_HEADERS = {
    "User-Agent": "gravatar-cache/0.1",
    "Accept": "image/*",
}

__all__ = [
    "AVATAR_REQUEST_HEADERS",
    "CACHE_EXTENSION",
    "CACHE_PREFIX",
    "DEFAULT_RATING",
    "DEFAULT_SIZE",
    "DEFAULT_STYLE",
]
