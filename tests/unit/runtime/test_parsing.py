"""Unit tests for response parsers and the autodetect pipeline."""

import logging
import xml.etree.ElementTree as ET

import pytest

from serviceworker.core import ContentType, ParseError
from serviceworker.runtime import attempt, autodetect, parse_content, parse_json, parse_xml


class TestExplicitParsers:
    def test_json(self):
        assert parse_json('{"a": 1}') == {"a": 1}
        assert parse_json(b"[1, 2]") == [1, 2]

    def test_json_malformed(self):
        with pytest.raises(ParseError) as exc_info:
            parse_json("{not json")
        assert exc_info.value.content_type == "json"
        assert "Unable to parse json content" in str(exc_info.value)

    def test_xml(self):
        element = parse_xml("<items><item id='1'>x</item></items>")
        assert element.tag == "items"
        assert element.find("item").get("id") == "1"

    def test_xml_malformed(self):
        with pytest.raises(ParseError) as exc_info:
            parse_xml("<a><b></a>")
        assert exc_info.value.content_type == "xml"

    def test_xml_empty(self):
        with pytest.raises(ParseError):
            parse_xml("")


class TestAttempt:
    def test_success(self):
        outcome = attempt(parse_json, '{"a": 1}')
        assert outcome.ok
        assert outcome.value == {"a": 1}
        assert outcome.error is None

    def test_failure(self):
        outcome = attempt(parse_json, "nope")
        assert not outcome.ok
        assert isinstance(outcome.error, ParseError)


class TestAutodetect:
    def test_json_first(self):
        assert autodetect('{"a":1}') == {"a": 1}

    def test_xml_second(self):
        result = autodetect("<a>1</a>")
        assert isinstance(result, ET.Element)
        assert result.tag == "a"
        assert result.text == "1"

    def test_raw_last(self):
        assert autodetect("not-json-not-xml") == "not-json-not-xml"

    def test_empty_body_is_raw(self):
        assert autodetect("") == ""

    def test_stage_order(self):
        calls = []

        def first(raw):
            calls.append("first")
            raise ParseError("no", "json")

        def second(raw):
            calls.append("second")
            return "second"

        def third(raw):
            calls.append("third")
            return "third"

        assert autodetect("x", stages=(first, second, third)) == "second"
        assert calls == ["first", "second"]

    def test_failed_stages_are_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="serviceworker.runtime.parsing"):
            autodetect("plain")
        stages = [record.stage for record in caplog.records]
        assert stages == ["parse_json", "parse_xml"]


class TestParseContent:
    def test_default_is_autodetect(self):
        assert parse_content('{"a":1}') == {"a": 1}
        assert parse_content("text") == "text"

    def test_json_mode_raises(self):
        with pytest.raises(ParseError):
            parse_content("<a>1</a>", ContentType.JSON)

    def test_xml_mode_raises(self):
        with pytest.raises(ParseError):
            parse_content('{"a":1}', "xml")

    def test_raw_mode_returns_body(self):
        assert parse_content('{"a":1}', ContentType.RAW) == '{"a":1}'

    def test_unrecognized_mode_returns_body(self):
        assert parse_content("<a>1</a>", "html") == "<a>1</a>"
