"""Response body parsers and the autodetect pipeline.

Architecture:
    Each parser turns a raw body into a structured value or raises
    ParseError. ``attempt`` wraps a parser into a ParseOutcome so the
    autodetect pipeline can walk its stages without nested try blocks.

Design Decisions:
    - Fixed order: JSON, then XML, then the raw body
    - Autodetect never raises; the raw body is its last stage
    - JSON and XML parsers accept both ``str`` and ``bytes``
"""

from __future__ import annotations

import json
import logging
import xml.etree.ElementTree as ET
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from ..core.enums import ContentType
from ..core.exceptions import ParseError

logger = logging.getLogger(__name__)

Body = str | bytes
Parser = Callable[[Body], Any]


@dataclass(frozen=True)
class ParseOutcome:
    ok: bool
    value: Any = None
    error: ParseError | None = None


def parse_json(raw: Body) -> Any:
    try:
        return json.loads(raw)
    except (ValueError, TypeError) as exc:
        raise ParseError(
            f"Unable to parse json content. Error message: {exc}", ContentType.JSON.value
        ) from exc


def parse_xml(raw: Body) -> ET.Element:
    try:
        return ET.fromstring(raw)
    except (ET.ParseError, ValueError, TypeError) as exc:
        raise ParseError(
            f"Unable to parse xml content. Error message: {exc}", ContentType.XML.value
        ) from exc


def parse_raw(raw: Body) -> Body:
    """Return the body untouched."""
    return raw


def attempt(parser: Parser, raw: Body) -> ParseOutcome:
    """Run ``parser`` and report success or failure instead of raising."""
    try:
        return ParseOutcome(ok=True, value=parser(raw))
    except ParseError as exc:
        return ParseOutcome(ok=False, error=exc)


AUTODETECT_STAGES: tuple[Parser, ...] = (parse_json, parse_xml)


def autodetect(raw: Body, stages: Sequence[Parser] = AUTODETECT_STAGES) -> Any:
    """Return the first successful stage's value, else the raw body."""
    for stage in stages:
        outcome = attempt(stage, raw)
        if outcome.ok:
            return outcome.value
        logger.debug(
            "autodetect_stage_failed",
            extra={"stage": stage.__name__, "error": str(outcome.error)},
        )
    return parse_raw(raw)


PARSERS: dict[ContentType, Parser] = {
    ContentType.JSON: parse_json,
    ContentType.XML: parse_xml,
    ContentType.AUTODETECT: autodetect,
    ContentType.RAW: parse_raw,
}


def parse_content(raw: Body, content_type: ContentType | str = ContentType.AUTODETECT) -> Any:
    """Parse ``raw`` according to ``content_type``.

    Raises:
        ParseError: For explicit json/xml content types when the body does not match.
    """
    return PARSERS[ContentType(content_type)](raw)
