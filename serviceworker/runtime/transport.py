"""Blocking HTTP transport built on aiohttp.

Architecture:
    ``AiohttpTransport.execute`` runs one coroutine on a private event loop
    via ``asyncio.run``. The coroutine opens a fresh ``aiohttp.ClientSession``,
    sends a single request, reads the full body and closes the session, so
    every call acquires and releases its own handle on every exit path.

Design Decisions:
    - No connection pooling: a session never outlives its call
    - Cannot be used from inside a running event loop (TransportInitError)
    - aiohttp and timeout errors surface as TransportError with the cause chained
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from ..core.constants import MULTIPART_METHODS
from ..core.enums import HTTPMethod
from ..core.exceptions import TransportError, TransportInitError
from ..models.request import ResponseEnvelope

logger = logging.getLogger(__name__)


class Transport(Protocol):
    def execute(
        self,
        method: HTTPMethod,
        url: str,
        body: Mapping[str, Any] | None,
        headers: tuple[tuple[str, str], ...],
        timeout: float | None,
        multipart: bool = False,
    ) -> ResponseEnvelope: ...


def _form_value(value: Any) -> Any:
    if hasattr(value, "read"):
        return value
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def form_fields(body: Mapping[str, Any]) -> list[tuple[str, Any]]:
    """Flatten ``body`` into ordered (name, value) pairs.

    Sequence values become repeated fields, ``None`` values are dropped and
    booleans are sent as "1"/"0". File-like values are passed through.
    """
    pairs: list[tuple[str, Any]] = []
    for name, value in body.items():
        values = value if isinstance(value, (list, tuple)) else [value]
        for item in values:
            if item is None:
                continue
            pairs.append((str(name), _form_value(item)))
    return pairs


def encode_body(
    method: HTTPMethod, body: Mapping[str, Any] | None, multipart: bool = False
) -> aiohttp.FormData | None:
    """Build the request payload for ``method``.

    GET requests carry no body. POST/PUT/DELETE send the mapping
    form-urlencoded, or as multipart/form-data for POST/PUT when
    ``multipart`` is set.
    """
    if method == HTTPMethod.GET or body is None:
        return None
    as_multipart = multipart and method.value in MULTIPART_METHODS
    form = aiohttp.FormData(quote_fields=not as_multipart)
    for name, value in form_fields(body):
        if as_multipart and isinstance(value, str):
            # An explicit part content type switches FormData to multipart
            form.add_field(name, value, content_type="text/plain")
        else:
            form.add_field(name, value)
    return form


def format_raw_headers(response: aiohttp.ClientResponse) -> str:
    """Rebuild the raw header block: status line plus one line per header."""
    version = response.version
    status_line = f"HTTP/{version.major}.{version.minor} {response.status} {response.reason or ''}"
    lines = [status_line.rstrip()]
    for name, value in response.raw_headers:
        lines.append(f"{name.decode('latin-1')}: {value.decode('latin-1')}")
    return "\r\n".join(lines) + "\r\n\r\n"


class AiohttpTransport:
    """Executes one blocking request per call."""

    async def _execute(
        self,
        method: HTTPMethod,
        url: str,
        body: Mapping[str, Any] | None,
        headers: tuple[tuple[str, str], ...],
        timeout: float | None,
        multipart: bool,
    ) -> ResponseEnvelope:
        client_timeout = aiohttp.ClientTimeout(total=timeout)
        started = time.perf_counter()
        async with aiohttp.ClientSession(timeout=client_timeout) as session:
            async with session.request(
                method.value,
                url,
                data=encode_body(method, body, multipart),
                headers=list(headers) or None,
            ) as response:
                raw_body = await response.read()
                return ResponseEnvelope(
                    status_code=response.status,
                    headers=format_raw_headers(response),
                    body=raw_body,
                    elapsed=time.perf_counter() - started,
                    final_url=str(response.url),
                    charset=response.charset,
                )

    def execute(
        self,
        method: HTTPMethod,
        url: str,
        body: Mapping[str, Any] | None,
        headers: tuple[tuple[str, str], ...],
        timeout: float | None,
        multipart: bool = False,
    ) -> ResponseEnvelope:
        """Send the request and block until the full body is read.

        Raises:
            TransportInitError: If called while an event loop is running in this thread.
            TransportError: On connection failures and timeouts.
        """
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            pass
        else:
            raise TransportInitError(
                "Blocking transport cannot run inside a running event loop.", url=url
            )

        try:
            return asyncio.run(self._execute(method, url, body, headers, timeout, multipart))
        except asyncio.TimeoutError as exc:
            logger.debug("request_timed_out", extra={"url": url, "timeout": timeout})
            raise TransportError(f"Request timed out after {timeout} seconds", url=url) from exc
        except aiohttp.ClientError as exc:
            logger.debug("request_failed", extra={"url": url, "error": str(exc)})
            raise TransportError(str(exc) or exc.__class__.__name__, url=url) from exc
