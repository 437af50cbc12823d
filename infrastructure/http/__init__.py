"""HTTP/file fetching of vocabulary and list documents."""

from infrastructure.http.fetcher import Fetcher, HttpFetcher, is_http_url

__all__ = [
    "Fetcher",
    "HttpFetcher",
    "is_http_url",
]
