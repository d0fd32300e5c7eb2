# errors.py
from __future__ import annotations

import httpx


class KitsuError(Exception):
    """Base exception for everything the client raises."""
    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.message = message
        self.url = url


class UrlError(KitsuError):
    """Assembled URL (or resource id) is not valid; no request was sent."""
    pass


class NetworkError(KitsuError):
    """The HTTP exchange could not be completed."""
    def __init__(self, message: str, url: str | None = None, original_error: Exception | None = None):
        super().__init__(message, url)
        self.original_error = original_error


class NetworkTimeoutError(NetworkError):
    """Превышен таймаут запроса"""
    pass


class NetworkConnectionError(NetworkError):
    """Connection failed (no network, DNS, refused, TLS)"""
    pass


class ResponseError(KitsuError):
    """
    Service answered with a non-200 status.

    The original response is handed over to the caller, so the status code,
    headers and error body stay inspectable.
    """
    def __init__(self, message: str, response: httpx.Response, url: str | None = None):
        super().__init__(message, url)
        self.response = response

    @property
    def status_code(self) -> int:
        return self.response.status_code


class BadRequestError(ResponseError):
    """HTTP 400"""
    pass


class UnauthorizedError(ResponseError):
    """HTTP 401"""
    pass


class InvalidResponseError(ResponseError):
    """Any other non-200 status."""
    pass


class DeserializationError(KitsuError):
    """200 body could not be decoded into the expected shape."""
    pass
