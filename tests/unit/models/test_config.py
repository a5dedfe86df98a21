"""Unit tests for ClientConfig validation and evolution."""

import logging

import pytest
from pydantic import ValidationError

from serviceworker.core import ContentType, HTTPMethod, UnsupportedMethodError
from serviceworker.models import ClientConfig
from serviceworker.runtime import NullLogSink


class TestClientConfigDefaults:
    def test_defaults(self):
        config = ClientConfig(base_url="https://api.test/items")
        assert config.method is None
        assert config.timeout == 30.0
        assert config.content_type is ContentType.AUTODETECT
        assert config.custom_headers == ()
        assert config.logger is None
        assert config.multipart is False

    def test_base_url_required(self):
        with pytest.raises(ValidationError):
            ClientConfig(base_url="")

    def test_frozen(self):
        config = ClientConfig(base_url="https://api.test")
        with pytest.raises(ValidationError):
            config.timeout = 5


class TestClientConfigValidation:
    def test_negative_timeout_rejected(self):
        with pytest.raises(ValidationError):
            ClientConfig(base_url="https://api.test", timeout=-1)

    def test_zero_and_none_timeout_allowed(self):
        assert ClientConfig(base_url="https://api.test", timeout=0).timeout == 0
        assert ClientConfig(base_url="https://api.test", timeout=None).timeout is None

    def test_method_normalized(self):
        config = ClientConfig(base_url="https://api.test", method="post")
        assert config.method is HTTPMethod.POST

    @pytest.mark.parametrize("method", ["patch", "PATCH", "head"])
    def test_unknown_method_rejected(self, method):
        with pytest.raises(UnsupportedMethodError):
            ClientConfig(base_url="https://api.test", method=method)

    def test_evolve_rejects_unknown_method(self):
        config = ClientConfig(base_url="https://api.test")
        with pytest.raises(UnsupportedMethodError):
            config.evolve(method="options")

    @pytest.mark.parametrize("target", [print, logging.getLogger("serviceworker.tests"), NullLogSink()])
    def test_logger_accepted(self, target):
        assert ClientConfig(base_url="https://api.test", logger=target).logger is target

    @pytest.mark.parametrize("target", [42, "stdout", object()])
    def test_invalid_logger_rejected(self, target):
        with pytest.raises(ValidationError):
            ClientConfig(base_url="https://api.test", logger=target)

    def test_unknown_content_type_becomes_raw(self):
        config = ClientConfig(base_url="https://api.test", content_type="csv")
        assert config.content_type is ContentType.RAW


class TestCustomHeaders:
    def test_mapping(self):
        config = ClientConfig(base_url="https://api.test", custom_headers={"X-Key": "abc"})
        assert config.custom_headers == (("X-Key", "abc"),)

    def test_pairs_keep_order(self):
        config = ClientConfig(
            base_url="https://api.test",
            custom_headers=[("Accept", "application/json"), ("X-Key", "abc")],
        )
        assert config.custom_headers == (("Accept", "application/json"), ("X-Key", "abc"))

    def test_raw_lines(self):
        config = ClientConfig(
            base_url="https://api.test",
            custom_headers=["Authorization: Bearer t0k:en", "X-Trace:1"],
        )
        assert config.custom_headers == (("Authorization", "Bearer t0k:en"), ("X-Trace", "1"))

    def test_malformed_line_rejected(self):
        with pytest.raises(ValidationError):
            ClientConfig(base_url="https://api.test", custom_headers=["no separator"])

    def test_plain_string_rejected(self):
        with pytest.raises(ValidationError):
            ClientConfig(base_url="https://api.test", custom_headers="X-Key: abc")


class TestEvolve:
    def test_evolve_returns_new_instance(self):
        config = ClientConfig(base_url="https://api.test")
        changed = config.evolve(timeout=5, method="GET")
        assert changed is not config
        assert changed.timeout == 5
        assert changed.method is HTTPMethod.GET
        assert config.timeout == 30.0

    def test_evolve_validates(self):
        config = ClientConfig(base_url="https://api.test")
        with pytest.raises(ValidationError):
            config.evolve(timeout=-5)

    def test_evolve_keeps_logger_identity(self):
        sink = object()
        config = ClientConfig(base_url="https://api.test", logger=sink)
        assert config.evolve(timeout=1).logger is sink
