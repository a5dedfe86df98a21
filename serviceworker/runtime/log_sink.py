"""Pluggable sinks for the client's request log.

The client reports two events per call ("Send request." and
"Successfully got the response.") to a LogSink. Plain callables and
``logging.Logger`` instances are adapted automatically.
"""

from __future__ import annotations

import logging
import pprint
from collections.abc import Callable, Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class LogSink(Protocol):
    def log(self, message: str, data: Mapping[str, Any] | None = None) -> None: ...


class NullLogSink:
    """Discards everything."""

    def log(self, message: str, data: Mapping[str, Any] | None = None) -> None:
        return None


class CallableLogSink:
    """Adapts a one-argument callable, rendering ``data`` into the message."""

    def __init__(self, func: Callable[[str], Any]) -> None:
        self.func = func

    def log(self, message: str, data: Mapping[str, Any] | None = None) -> None:
        if data:
            message = f"{message} Parameters {pprint.pformat(dict(data))}"
        self.func(message)


class StdlibLogSink:
    """Forwards events to a ``logging.Logger`` with the data as ``extra``."""

    def __init__(self, logger: logging.Logger, level: int = logging.INFO) -> None:
        self.logger = logger
        self.level = level

    def log(self, message: str, data: Mapping[str, Any] | None = None) -> None:
        self.logger.log(self.level, message, extra={"data": dict(data or {})})


def as_log_sink(target: Any) -> LogSink:
    """Pick the sink implementation for ``target``.

    Raises:
        TypeError: If ``target`` is neither a sink, a logger nor a callable.
    """
    if target is None:
        return NullLogSink()
    # logging.Logger has its own log(level, msg) signature
    if isinstance(target, logging.Logger):
        return StdlibLogSink(target)
    if isinstance(target, LogSink):
        return target
    if callable(target):
        return CallableLogSink(target)
    raise TypeError(f"Unsupported logger: {target!r}")
