"""Runtime pieces used by the client: URLs, transport, parsing, log sinks."""

from .log_sink import CallableLogSink, LogSink, NullLogSink, StdlibLogSink, as_log_sink
from .parsing import ParseOutcome, attempt, autodetect, parse_content, parse_json, parse_raw, parse_xml
from .transport import AiohttpTransport, Transport, encode_body, form_fields
from .url import build_url, join_id

__all__ = [
    "AiohttpTransport",
    "Transport",
    "encode_body",
    "form_fields",
    "build_url",
    "join_id",
    "ParseOutcome",
    "attempt",
    "autodetect",
    "parse_content",
    "parse_json",
    "parse_xml",
    "parse_raw",
    "LogSink",
    "NullLogSink",
    "CallableLogSink",
    "StdlibLogSink",
    "as_log_sink",
]
