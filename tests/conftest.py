import logging
from collections.abc import Callable, Iterator
from typing import Any

import httpx
import pytest

from gravatar_cache.downloader import AvatarDownloader
from gravatar_cache.logging_config import HTTP_LOGGERS

AVATAR_BYTES = b"\xff\xd8\xff\xe0fake-jpeg"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    for name in (
        "GRAVATAR_CACHE_DIR",
        "GRAVATAR_SIZE",
        "GRAVATAR_RATING",
        "GRAVATAR_DEFAULT",
        "GRAVATAR_BASE_URL",
        "GRAVATAR_TIMEOUT",
        "GRAVATAR_LOG_LEVEL",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    # Keep load_dotenv() away from any .env in the project checkout.
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def avatar_bytes() -> bytes:
    return AVATAR_BYTES


@pytest.fixture
def requests_seen() -> list[httpx.Request]:
    return []


@pytest.fixture
def make_downloader(
    requests_seen: list[httpx.Request],
) -> Iterator[Callable[..., AvatarDownloader]]:
    clients: list[httpx.Client] = []

    def factory(
        status_code: int = 200, content: bytes = AVATAR_BYTES
    ) -> AvatarDownloader:
        def handler(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            return httpx.Response(
                status_code,
                content=content,
                headers={"content-type": "image/jpeg"},
            )

        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return AvatarDownloader(client=client)

    yield factory

    for client in clients:
        client.close()


@pytest.fixture(autouse=True)
def app_logger() -> Iterator[logging.Logger]:
    logger = logging.getLogger("gravatar_cache")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    http_levels = {name: logging.getLogger(name).level for name in HTTP_LOGGERS}
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
    for name, http_level in http_levels.items():
        logging.getLogger(name).setLevel(http_level)


@pytest.fixture
def owned_clients(
    monkeypatch: pytest.MonkeyPatch, requests_seen: list[httpx.Request]
) -> list[httpx.Client]:
    """Clients AvatarDownloader creates for itself, on a mock transport."""
    created: list[httpx.Client] = []
    real_client = httpx.Client

    def handler(request: httpx.Request) -> httpx.Response:
        requests_seen.append(request)
        return httpx.Response(200, content=AVATAR_BYTES)

    def client_factory(**kwargs: Any) -> httpx.Client:
        client = real_client(transport=httpx.MockTransport(handler), **kwargs)
        created.append(client)
        return client

    monkeypatch.setattr(httpx, "Client", client_factory)
    return created
