# Copyright 2025 DataStax Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may not
# use this file except in compliance with the License. You may obtain a copy of
# the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations under
# the License.

"""Tests for logging configuration."""

import json
import logging

import pytest

from bcd_client.observability import (
    LogConfig,
    RequestContextFilter,
    StructuredJsonFormatter,
    get_request_context,
    request_context,
    setup_logging,
)


@pytest.fixture
def package_logger():
    logger = logging.getLogger("bcd_client")
    yield logger
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def _record(message="hello"):
    return logging.LogRecord("bcd_client.test", logging.INFO, __file__, 1, message, None, None)


class TestLogConfig:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("BCD_LOG_LEVEL", raising=False)
        monkeypatch.delenv("BCD_LOG_FORMAT", raising=False)

        config = LogConfig()

        assert config.log_level == logging.WARNING
        assert config.log_format == "text"

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("BCD_LOG_LEVEL", "debug")
        monkeypatch.setenv("BCD_LOG_FORMAT", "JSON")

        config = LogConfig()

        assert config.log_level == logging.DEBUG
        assert config.log_format == "json"

    def test_unknown_level_falls_back(self, monkeypatch):
        monkeypatch.setenv("BCD_LOG_LEVEL", "chatty")
        assert LogConfig().log_level == logging.WARNING


class TestRequestContext:
    def test_set_and_reset(self):
        assert get_request_context() == {}

        with request_context("/search", cancel_key="search"):
            assert get_request_context() == {"operation": "/search", "cancel_key": "search"}

        assert get_request_context() == {}

    def test_nested(self):
        with request_context("/head"):
            with request_context("/stats", cancel_key="stats"):
                assert get_request_context()["operation"] == "/stats"
            assert get_request_context() == {"operation": "/head", "cancel_key": ""}

    def test_filter_injects_fields(self):
        record = _record()
        with request_context("/search", cancel_key="search"):
            assert RequestContextFilter().filter(record)

        assert record.operation == "/search"
        assert record.cancel_key == "search"

    def test_filter_outside_request(self):
        record = _record()
        RequestContextFilter().filter(record)
        assert record.operation == ""


class TestStructuredJsonFormatter:
    def test_fields(self):
        record = _record("request sent")
        with request_context("/head", cancel_key="head"):
            RequestContextFilter().filter(record)

        entry = json.loads(StructuredJsonFormatter().format(record))

        assert entry["level"] == "INFO"
        assert entry["message"] == "request sent"
        assert entry["logger"] == "bcd_client.test"
        assert entry["operation"] == "/head"
        assert entry["cancel_key"] == "head"
        assert "timestamp" in entry

    def test_omits_empty_context(self):
        entry = json.loads(StructuredJsonFormatter().format(_record()))
        assert "operation" not in entry
        assert "cancel_key" not in entry


class TestSetupLogging:
    def test_json_handler(self, monkeypatch, package_logger):
        monkeypatch.setenv("BCD_LOG_LEVEL", "INFO")
        monkeypatch.setenv("BCD_LOG_FORMAT", "json")

        setup_logging()

        assert package_logger.level == logging.INFO
        assert len(package_logger.handlers) == 1
        assert isinstance(package_logger.handlers[0].formatter, StructuredJsonFormatter)

    def test_no_duplicate_handlers(self, package_logger):
        config = LogConfig()
        setup_logging(config)
        setup_logging(config)
        assert len(package_logger.handlers) == 1
