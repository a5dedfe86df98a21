"""Per-call request and response records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..core.enums import HTTPMethod


@dataclass(frozen=True)
class RequestSpec:
    """Everything the transport needs to issue one request."""

    url: str
    method: HTTPMethod
    body: dict[str, Any] = field(default_factory=dict)
    headers: tuple[tuple[str, str], ...] = ()
    timeout: float | None = None
    multipart: bool = False


@dataclass(frozen=True)
class ResponseEnvelope:
    """Raw result of one request, consumed immediately by the client."""

    status_code: int
    headers: str
    body: bytes
    elapsed: float
    final_url: str
    charset: str | None = None

    @property
    def text(self) -> str:
        """Body decoded with the response charset (UTF-8 when unknown)."""
        try:
            return self.body.decode(self.charset or "utf-8", errors="replace")
        except LookupError:
            return self.body.decode("utf-8", errors="replace")

    @property
    def content(self) -> str | bytes:
        """Body as text when it decodes cleanly, otherwise the original bytes."""
        try:
            return self.body.decode(self.charset or "utf-8")
        except (UnicodeDecodeError, LookupError):
            return self.body
