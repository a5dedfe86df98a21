"""Data models used by the client.

Architecture:
    ClientConfig is a frozen Pydantic v2 model validated on every change.
    RequestSpec and ResponseEnvelope are short-lived frozen dataclasses that
    exist for the duration of a single call.
"""

from .config import ClientConfig
from .request import RequestSpec, ResponseEnvelope

__all__ = ["ClientConfig", "RequestSpec", "ResponseEnvelope"]
