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

"""Tests for the bcd command line interface."""

import json
import logging

import httpx
import pytest
import respx
from click.testing import CliRunner

from bcd_client.cli.main import main

BASE_URL = "https://api.bcd.test/v1"


@pytest.fixture
def runner(monkeypatch):
    for name in ("BCD_API_URL", "BCD_TIMEOUT", "BCD_LOG_LEVEL", "BCD_JWT"):
        monkeypatch.delenv(name, raising=False)
    yield CliRunner()
    logging.getLogger("bcd_client").handlers.clear()


def test_head(runner):
    with respx.mock(base_url=BASE_URL) as mock:
        mock.get("/head").mock(return_value=httpx.Response(200, json=[{"level": 1}]))
        result = runner.invoke(main, ["--base-url", BASE_URL, "head"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == [{"level": 1}]


def test_base_url_from_environment(runner):
    with respx.mock(base_url=BASE_URL) as mock:
        route = mock.get("/stats").mock(return_value=httpx.Response(200, json={}))
        result = runner.invoke(main, ["stats"], env={"BCD_API_URL": BASE_URL})

    assert result.exit_code == 0, result.output
    assert route.called


def test_missing_metadata_prints_null(runner):
    with respx.mock(base_url=BASE_URL) as mock:
        mock.get("/account/mainnet/tz1abc/metadata").mock(return_value=httpx.Response(204))
        result = runner.invoke(main, ["--base-url", BASE_URL, "metadata", "mainnet", "tz1abc"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) is None


def test_search_options(runner):
    with respx.mock(base_url=BASE_URL) as mock:
        route = mock.get("/search").mock(return_value=httpx.Response(200, json={"items": []}))
        result = runner.invoke(
            main,
            ["--base-url", BASE_URL, "search", "tzBTC", "--network", "mainnet", "--network", "ghostnet"],
        )

    assert result.exit_code == 0, result.output
    assert dict(route.calls.last.request.url.params) == {
        "q": "tzBTC",
        "n": "mainnet,ghostnet",
        "g": "1",
    }


def test_failure_exits_nonzero(runner):
    with respx.mock(base_url=BASE_URL) as mock:
        mock.get("/stats/mainnet").mock(return_value=httpx.Response(500))
        result = runner.invoke(main, ["--base-url", BASE_URL, "stats", "mainnet"])

    assert result.exit_code == 1
    assert "Request failed with status 500" in result.output


def test_version(runner):
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output
