# transport.py
from __future__ import annotations

import json
import logging
import time
from typing import Any, Callable, TypeVar

import httpx

from kitsu.endpoints import API_URL
from kitsu.errors import (
    BadRequestError,
    DeserializationError,
    InvalidResponseError,
    NetworkConnectionError,
    NetworkError,
    NetworkTimeoutError,
    UnauthorizedError,
    UrlError,
)

T = TypeVar("T")
Decoder = Callable[[Any], T]


def build_url(base_url: str, path: str, query: str = "") -> httpx.URL:
    """
    `{base_url}/{path}` plus `?{query}` when the query is not empty.

    Raises UrlError before anything touches the network if the result is not
    an absolute http(s) URL.
    """
    raw = f"{base_url.rstrip('/')}/{path.lstrip('/')}"
    if query:
        raw = f"{raw}?{query}"
    try:
        url = httpx.URL(raw)
    except httpx.InvalidURL as e:
        raise UrlError(f"Invalid URL {raw!r}: {e}", url=raw) from e
    if url.scheme not in ("http", "https") or not url.host:
        raise UrlError(f"Not an absolute http(s) URL: {raw!r}", url=raw)
    return url


def _response_url(response: httpx.Response) -> str | None:
    try:
        return str(response.request.url)
    except RuntimeError:
        # response built without a request (tests, replays)
        return None


def handle_response(response: httpx.Response, decode: Decoder[T]) -> T:
    """
    Maps a finished exchange to a decoded value or a typed error.

    200 -> decode(json body); 400 -> BadRequestError; 401 -> UnauthorizedError;
    anything else -> InvalidResponseError. Error variants keep the response.
    """
    status = response.status_code
    url = _response_url(response)

    if status == httpx.codes.OK:
        try:
            payload = response.json()
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise DeserializationError(f"Invalid JSON body: {e}", url=url) from e
        try:
            return decode(payload)
        except (KeyError, TypeError, ValueError) as e:
            raise DeserializationError(f"Unexpected response shape: {e}", url=url) from e

    if status == httpx.codes.BAD_REQUEST:
        raise BadRequestError(f"HTTP 400 Bad Request for {url}", response, url=url)
    if status == httpx.codes.UNAUTHORIZED:
        raise UnauthorizedError(f"HTTP 401 Unauthorized for {url}", response, url=url)
    raise InvalidResponseError(f"HTTP {status} for {url}", response, url=url)


def _network_error(e: httpx.RequestError, url: httpx.URL) -> NetworkError:
    if isinstance(e, httpx.TimeoutException):
        return NetworkTimeoutError(f"Request timeout for {url}", url=str(url), original_error=e)
    if isinstance(e, httpx.ConnectError):
        return NetworkConnectionError(f"Connection failed for {url}", url=str(url), original_error=e)
    return NetworkError(f"Request failed for {url}: {e}", url=str(url), original_error=e)


class _BaseTransport:
    """
    GET + decode over a caller-configured httpx client.

    Тут НЕ должно быть бизнес-логики: no retries, no cache, no state
    between calls.
    """

    def __init__(self, *, base_url: str = API_URL, logger: logging.Logger | None = None) -> None:
        self.base_url = base_url.rstrip("/")
        self.logger = logger or logging.getLogger(__name__)

    def _log_exchange(self, path: str, response: httpx.Response, t0: float) -> None:
        elapsed = time.time() - t0
        bytes_len = len(response.content or b"")
        self.logger.info(f"API {path}: {elapsed:.2f}s; {bytes_len} bytes")
        if response.status_code != httpx.codes.OK:
            ct = response.headers.get("Content-Type", "")
            self.logger.debug(f"HTTP {response.status_code} {path} | CT:{ct}")


class HttpTransport(_BaseTransport):
    def __init__(self, http: httpx.Client, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._http = http

    def get(self, path: str, decode: Decoder[T], query: str = "") -> T:
        url = build_url(self.base_url, path, query)
        self.logger.debug(f"GET {url}")
        t0 = time.time()
        try:
            response = self._http.get(url)
        except httpx.RequestError as e:
            raise _network_error(e, url) from e
        self._log_exchange(path, response, t0)
        return handle_response(response, decode)


class AsyncHttpTransport(_BaseTransport):
    def __init__(self, http: httpx.AsyncClient, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._http = http

    async def get(self, path: str, decode: Decoder[T], query: str = "") -> T:
        url = build_url(self.base_url, path, query)
        self.logger.debug(f"GET {url}")
        t0 = time.time()
        try:
            response = await self._http.get(url)
        except httpx.RequestError as e:
            raise _network_error(e, url) from e
        self._log_exchange(path, response, t0)
        return handle_response(response, decode)
