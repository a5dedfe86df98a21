"""Core components."""

from .constants import DEFAULT_TIMEOUT, EXPECTED_STATUS, MULTIPART_METHODS
from .enums import ContentType, HTTPMethod
from .exceptions import (
    ParseError,
    ServiceWorkerError,
    TransportError,
    TransportInitError,
    UnexpectedStatusError,
    UnsupportedMethodError,
)

__all__ = [
    "DEFAULT_TIMEOUT",
    "EXPECTED_STATUS",
    "MULTIPART_METHODS",
    "ContentType",
    "HTTPMethod",
    "ServiceWorkerError",
    "UnsupportedMethodError",
    "TransportInitError",
    "TransportError",
    "UnexpectedStatusError",
    "ParseError",
]
