"""Gravatar lookups with a local file cache."""

from gravatar_cache.config import AvatarConfig
from gravatar_cache.resolver import AvatarResolver, AvatarResult, AvatarStatus
from gravatar_cache.utils.gravatar import (
    SERVICE_BASE_URL,
    SERVICE_BASE_URL_SSL,
    email_hash,
    gravatar_url,
)

__all__ = [
    "SERVICE_BASE_URL",
    "SERVICE_BASE_URL_SSL",
    "AvatarConfig",
    "AvatarResolver",
    "AvatarResult",
    "AvatarStatus",
    "email_hash",
    "gravatar_url",
]
