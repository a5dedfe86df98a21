"""Blocking REST client for a single resource root.

Architecture:
    RestClient owns one ClientConfig and a Transport. CRUD helpers set the
    request method, build the URL and delegate to ``call``, which executes
    the request, checks the status code and parses the body.

    get_all(params)        GET     base?query
    get_one(id)            GET     base/id
    create(data)           POST    base
    update(data, id)       PUT     base/id
    delete(id, params)     DELETE  base[/id]

Example:
    >>> client = RestClient("https://api.example.com/items", timeout=10)
    >>> client.set_custom_headers({"X-Api-Key": "secret"}).get_one(42)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .core.constants import EXPECTED_STATUS
from .core.enums import ContentType, HTTPMethod
from .core.exceptions import UnexpectedStatusError, UnsupportedMethodError
from .models.config import ClientConfig
from .models.request import RequestSpec, ResponseEnvelope
from .runtime.log_sink import LogSink, as_log_sink
from .runtime.parsing import parse_content
from .runtime.transport import AiohttpTransport, Transport
from .runtime.url import build_url, join_id

logger = logging.getLogger(__name__)


class RestClient:
    """CRUD client bound to one base URL."""

    def __init__(
        self,
        base_url: str,
        transport: Transport | None = None,
        **options: Any,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Resource root, e.g. ``https://api.example.com/items``
            transport: Request executor (default: AiohttpTransport)
            **options: Any other ClientConfig field (timeout, content_type,
                custom_headers, logger, multipart)
        """
        self.transport = transport or AiohttpTransport()
        self._apply(ClientConfig(base_url=base_url, **options))

    @classmethod
    def from_config(cls, config: ClientConfig, transport: Transport | None = None) -> RestClient:
        return cls(config.base_url, transport)._apply(config)

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def _apply(self, config: ClientConfig) -> RestClient:
        self.config = config
        self._sink: LogSink = as_log_sink(config.logger)
        return self

    # Configuration

    def set_method(self, method: HTTPMethod | str) -> RestClient:
        """Set the request method.

        Raises:
            UnsupportedMethodError: If the method is not GET, POST, PUT or DELETE.
        """
        return self._apply(self.config.evolve(method=HTTPMethod.parse(method)))

    def set_content_type(self, content_type: ContentType | str) -> RestClient:
        """Set how bodies are parsed: json, xml, autodetect or raw."""
        return self._apply(self.config.evolve(content_type=content_type))

    def set_custom_headers(self, headers: Any) -> RestClient:
        return self._apply(self.config.evolve(custom_headers=headers))

    def set_logger(self, log: Any) -> RestClient:
        return self._apply(self.config.evolve(logger=log))

    def set_timeout(self, timeout: float | None) -> RestClient:
        return self._apply(self.config.evolve(timeout=timeout))

    def set_multipart(self, enabled: bool = True) -> RestClient:
        return self._apply(self.config.evolve(multipart=enabled))

    def reset(self) -> RestClient:
        """Drop per-request settings, keeping the base URL and logger."""
        return self._apply(
            ClientConfig(base_url=self.config.base_url, logger=self.config.logger)
        )

    # Dispatch

    def log_data(self, message: str, data: Mapping[str, Any] | None = None) -> None:
        """Report an event to the configured sink; sink failures are logged and ignored."""
        logger.debug(message, extra=dict(data or {}))
        try:
            self._sink.log(message, data)
        except Exception:
            logger.exception("log_sink_failed", extra={"event": message})

    def call(self, url: str, data: Mapping[str, Any] | None = None) -> Any:
        """Perform a request with the current configuration.

        Args:
            url: Fully built request URL
            data: Body fields (ignored for GET)

        Returns:
            Parsed body: JSON value, XML element or the raw body (text when
            it decodes cleanly, bytes otherwise)

        Raises:
            UnsupportedMethodError: If no method has been set
            TransportInitError: If the transport cannot be set up
            TransportError: On connection failures and timeouts
            UnexpectedStatusError: If the status code is not 200
            ParseError: If an explicit json/xml body does not parse
        """
        if self.config.method is None:
            raise UnsupportedMethodError(None)

        request = RequestSpec(
            url=url,
            method=self.config.method,
            body=dict(data or {}),
            headers=self.config.custom_headers,
            timeout=self.config.timeout,
            multipart=self.config.multipart,
        )
        self.log_data(
            "Send request.",
            {
                "url": request.url,
                "method": request.method.value,
                "data": request.body,
                "headers": list(request.headers),
            },
        )

        response = self.transport.execute(
            request.method,
            request.url,
            request.body,
            request.headers,
            request.timeout,
            request.multipart,
        )
        self.log_data(
            "Response received.",
            {
                "status_code": response.status_code,
                "elapsed": response.elapsed,
                "response_url": response.final_url,
                "response_headers": response.headers,
            },
        )
        return self.parse_response(response)

    def parse_response(self, response: ResponseEnvelope) -> Any:
        if response.status_code != EXPECTED_STATUS:
            raise UnexpectedStatusError(response.status_code, response.body)
        return parse_content(response.content, self.config.content_type)

    # CRUD

    def get_all(self, search_params: Mapping[str, Any] | None = None) -> Any:
        """Fetch a collection, passing ``search_params`` in the query string."""
        url = build_url(self.config.base_url, search_params, HTTPMethod.GET)
        return self.set_method(HTTPMethod.GET).call(url)

    def get_one(self, record_id: Any) -> Any:
        return self.set_method(HTTPMethod.GET).call(join_id(self.config.base_url, record_id))

    def create(self, data: Mapping[str, Any]) -> Any:
        return self.set_method(HTTPMethod.POST).call(self.config.base_url, data)

    def update(self, data: Mapping[str, Any], record_id: Any) -> Any:
        return self.set_method(HTTPMethod.PUT).call(join_id(self.config.base_url, record_id), data)

    def delete(
        self, record_id: Any | None = None, search_params: Mapping[str, Any] | None = None
    ) -> Any:
        """Delete one record by ID, or records matching ``search_params``."""
        url = self.config.base_url
        if record_id is not None:
            url = join_id(url, record_id)
        return self.set_method(HTTPMethod.DELETE).call(url, search_params)


# Name kept for callers of the original class
ServiceWorker = RestClient
