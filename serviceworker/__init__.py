"""serviceworker - small blocking REST client with pluggable response parsing."""

from .client import RestClient, ServiceWorker
from .core import (
    ContentType,
    HTTPMethod,
    ParseError,
    ServiceWorkerError,
    TransportError,
    TransportInitError,
    UnexpectedStatusError,
    UnsupportedMethodError,
)
from .models import ClientConfig, RequestSpec, ResponseEnvelope
from .runtime import (
    AiohttpTransport,
    CallableLogSink,
    LogSink,
    NullLogSink,
    StdlibLogSink,
    Transport,
    build_url,
    parse_content,
)

__version__ = "0.1.0"

__all__ = [
    "RestClient",
    "ServiceWorker",
    "ClientConfig",
    "RequestSpec",
    "ResponseEnvelope",
    "ContentType",
    "HTTPMethod",
    "Transport",
    "AiohttpTransport",
    "LogSink",
    "NullLogSink",
    "CallableLogSink",
    "StdlibLogSink",
    "build_url",
    "parse_content",
    "ServiceWorkerError",
    "UnsupportedMethodError",
    "TransportInitError",
    "TransportError",
    "UnexpectedStatusError",
    "ParseError",
]
