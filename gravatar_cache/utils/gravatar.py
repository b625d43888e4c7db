"""Gravatar utilities."""

import hashlib
from urllib.parse import urlencode

SERVICE_BASE_URL = "http://www.gravatar.com/avatar/"
SERVICE_BASE_URL_SSL = "https://secure.gravatar.com/avatar/"


def email_hash(email: str) -> str:
    """Return the gravatar hash for an email address."""
    normalized = email.strip().lower().encode("utf-8")
    return hashlib.md5(normalized).hexdigest()  # noqa: S324


def gravatar_url(
    email: str,
    *,
    size: int | str,
    rating: str,
    default: str,
    base_url: str = SERVICE_BASE_URL,
) -> str:
    """Return a gravatar URL for an email address.

    Query parameters are always emitted in ``r``, ``s``, ``d`` order. The base
    URL may be given with or without its trailing slash.
    """
    query = urlencode({"r": rating, "s": size, "d": default})
    return f"{base_url.rstrip('/')}/{email_hash(email)}?{query}"
