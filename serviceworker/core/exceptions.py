"""Custom exception hierarchy."""

from __future__ import annotations


class ServiceWorkerError(Exception):
    """Base exception for all client errors."""

    pass


class UnsupportedMethodError(ServiceWorkerError):
    """Requested verb is outside GET, POST, PUT and DELETE."""

    def __init__(self, method: str | None) -> None:
        if method is None:
            message = "Request method is not set."
        else:
            message = f"Method {method} is not supported."
        super().__init__(message)
        self.method = method


class TransportError(ServiceWorkerError):
    """Network or transport-level failure while executing a request."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class TransportInitError(TransportError):
    """The HTTP transport could not be set up for this call."""

    pass


class UnexpectedStatusError(ServiceWorkerError):
    """Server answered with a status code other than 200.

    Every non-200 code is a failure, including other 2xx codes. Most services
    this client talks to return 200 on success regardless of the verb.
    """

    def __init__(self, status_code: int, body: bytes = b"") -> None:
        super().__init__(
            f'Server returned response code "{status_code}". Expected response code is 200.'
        )
        self.status_code = status_code
        self.body = body


class ParseError(ServiceWorkerError):
    """Response body does not match the requested content type."""

    def __init__(self, message: str, content_type: str) -> None:
        super().__init__(message)
        self.content_type = content_type
