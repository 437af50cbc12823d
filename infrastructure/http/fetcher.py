"""Document fetchers: the browser's only network (and file) boundary."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from urllib.parse import urlsplit

import httpx

from domain.errors import FetchError
from infrastructure.config.models import BrowserConfig
from infrastructure.io.fs import ensure_exists, read_text

logger = logging.getLogger(__name__)


def is_http_url(target: str) -> bool:
    return urlsplit(target).scheme in ("http", "https")


class Fetcher(ABC):
    """Retrieve a document as text. Implementations raise FetchError on any failure."""

    @abstractmethod
    async def fetch_text(self, url: str) -> str:
        raise NotImplementedError

    async def aclose(self) -> None:
        return None

    async def __aenter__(self) -> "Fetcher":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


class HttpFetcher(Fetcher):
    """
    httpx-backed fetcher.

    - http(s) URLs are fetched with `Accept: application/ld+json`
    - anything else is treated as a local file path (handy for offline vocabularies)
    """

    def __init__(self, *, client: httpx.AsyncClient) -> None:
        self.client = client

    @classmethod
    def from_cfg(cls, cfg: BrowserConfig) -> "HttpFetcher":
        headers = {"Accept": cfg.http.accept}
        if cfg.http.user_agent:
            headers["User-Agent"] = cfg.http.user_agent
        client = httpx.AsyncClient(
            timeout=cfg.http.timeout_s,
            headers=headers,
            follow_redirects=cfg.http.follow_redirects,
        )
        return cls(client=client)

    async def fetch_text(self, url: str) -> str:
        if not is_http_url(url):
            return self._read_file(url)

        logger.debug("GET %s", url)
        try:
            resp = await self.client.get(url)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchError(url, status=e.response.status_code, reason=e.response.reason_phrase) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchError(url, reason=f"{type(e).__name__}: {e}") from e

        logger.info("Fetched %s (%d bytes)", url, len(resp.content))
        return resp.text

    def _read_file(self, target: str) -> str:
        path = Path(target[len("file://"):] if target.startswith("file://") else target)
        try:
            ensure_exists(path, "vocabulary document")
            return read_text(path)
        except (OSError, UnicodeDecodeError) as e:
            raise FetchError(target, reason=str(e)) from e

    async def aclose(self) -> None:
        await self.client.aclose()
