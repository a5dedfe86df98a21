"""Core enumerations for request methods and response content types.

Design Decisions:
    - String enums: values compare equal to the plain strings used on the wire
    - Case-insensitive lookup: callers may pass "get" or "Json"
    - ContentType falls back to RAW for unknown values instead of failing
"""

from __future__ import annotations

from enum import Enum

from .exceptions import UnsupportedMethodError


class HTTPMethod(str, Enum):
    """Request methods supported by the client."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @classmethod
    def parse(cls, value: HTTPMethod | str) -> HTTPMethod:
        """Normalize a method name.

        Raises:
            UnsupportedMethodError: If the name is not GET, POST, PUT or DELETE.
        """
        if isinstance(value, cls):
            return value
        name = str(value).strip().upper()
        try:
            return cls(name)
        except ValueError:
            raise UnsupportedMethodError(name) from None


class ContentType(str, Enum):
    """How a response body should be parsed."""

    JSON = "json"
    XML = "xml"
    AUTODETECT = "autodetect"
    RAW = "raw"

    @classmethod
    def _missing_(cls, value: object) -> ContentType:
        if isinstance(value, str):
            lowered = value.strip().lower()
            for member in cls:
                if member.value == lowered:
                    return member
        # Anything unrecognized is passed through untouched
        return cls.RAW
