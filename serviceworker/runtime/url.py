"""Request URL construction."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import parse_qsl, urlencode

from ..core.enums import HTTPMethod


def build_url(
    base_url: str,
    search_params: Mapping[str, Any] | None = None,
    method: HTTPMethod | str = HTTPMethod.GET,
) -> str:
    """Build the URL for a request.

    For GET, ``search_params`` are merged over any query already present in
    ``base_url`` (caller values win) and serialized after ``?``. Other
    methods carry their parameters in the body, so the base URL is returned
    unchanged.

    Examples:
        >>> build_url("https://api.test/items?page=1", {"limit": 10})
        'https://api.test/items?page=1&limit=10'
        >>> build_url("https://api.test/items", {"limit": 10}, "POST")
        'https://api.test/items'
        >>> build_url("https://api.test/items")
        'https://api.test/items?'
    """
    if HTTPMethod.parse(method) != HTTPMethod.GET:
        return base_url

    path, _, existing = base_url.partition("?")
    params: dict[str, Any] = dict(parse_qsl(existing, keep_blank_values=True))
    if search_params:
        params.update(search_params)
    return f"{path}?{urlencode(params, doseq=True)}"


def join_id(base_url: str, record_id: Any) -> str:
    """Append a record identifier as the last path segment."""
    return f"{base_url}/{record_id}"
