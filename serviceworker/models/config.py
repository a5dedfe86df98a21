"""Client configuration model."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.constants import DEFAULT_TIMEOUT
from ..core.enums import ContentType, HTTPMethod


class ClientConfig(BaseModel):
    """Immutable settings of one client instance.

    A client holds exactly one live config; every change produces a new,
    re-validated instance via ``evolve``.
    """

    base_url: str = Field(..., min_length=1)
    method: HTTPMethod | None = None
    timeout: float | None = Field(default=DEFAULT_TIMEOUT, ge=0)
    content_type: ContentType = ContentType.AUTODETECT
    custom_headers: tuple[tuple[str, str], ...] = ()
    logger: Any = None
    multipart: bool = False

    model_config = ConfigDict(
        frozen=True, str_strip_whitespace=True, arbitrary_types_allowed=True
    )

    @field_validator("method", mode="before")
    @classmethod
    def normalize_method(cls, v: Any) -> HTTPMethod | None:
        """Raises UnsupportedMethodError for verbs outside GET, POST, PUT and DELETE."""
        if v is None:
            return None
        return HTTPMethod.parse(v)

    @field_validator("content_type", mode="before")
    @classmethod
    def normalize_content_type(cls, v: Any) -> ContentType:
        """Map unknown values to RAW instead of rejecting them."""
        return ContentType(v)

    @field_validator("logger")
    @classmethod
    def check_logger(cls, v: Any) -> Any:
        """Accept None, a callable or any object with a callable ``log``."""
        if v is None or callable(v) or callable(getattr(v, "log", None)):
            return v
        raise ValueError(f"Unsupported logger: {v!r}")

    @field_validator("custom_headers", mode="before")
    @classmethod
    def normalize_headers(cls, v: Any) -> tuple[tuple[str, str], ...]:
        """Accept a mapping, (name, value) pairs or raw "Name: value" lines."""
        if v is None:
            return ()
        if isinstance(v, Mapping):
            items = v.items()
        elif isinstance(v, str):
            raise ValueError("custom_headers must be a mapping or a sequence")
        else:
            items = v

        pairs: list[tuple[str, str]] = []
        for item in items:
            if isinstance(item, str):
                name, sep, value = item.partition(":")
                if not sep or not name.strip():
                    raise ValueError(f"malformed header line: {item!r}")
                pairs.append((name.strip(), value.strip()))
            else:
                name, value = item
                pairs.append((str(name), str(value)))
        return tuple(pairs)

    def evolve(self, **changes: Any) -> ClientConfig:
        """Return a validated copy with ``changes`` applied."""
        values = {name: getattr(self, name) for name in type(self).model_fields}
        values.update(changes)
        return type(self).model_validate(values)
