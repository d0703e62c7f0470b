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

"""Tests for client settings."""

import pytest
from pydantic import ValidationError

from bcd_client import BetterCallClient, ClientSettings
from bcd_client.config import DEFAULT_BASE_URL, DEFAULT_PAGE_SIZE


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("BCD_API_URL", "BCD_TIMEOUT", "BCD_AUTH_SCHEME", "BCD_JWT_ENV"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = ClientSettings()
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.timeout == 30.0
    assert settings.page_size == DEFAULT_PAGE_SIZE
    assert settings.auth_scheme is None
    assert settings.credential_env == "BCD_JWT"


def test_from_env(monkeypatch):
    monkeypatch.setenv("BCD_API_URL", "https://api.bcd.test/v1")
    monkeypatch.setenv("BCD_TIMEOUT", "2.5")
    monkeypatch.setenv("BCD_AUTH_SCHEME", "Bearer")
    monkeypatch.setenv("BCD_JWT_ENV", "MY_TOKEN")

    settings = ClientSettings.from_env()

    assert settings.base_url == "https://api.bcd.test/v1"
    assert settings.timeout == 2.5
    assert settings.auth_scheme == "Bearer"
    assert settings.credential_env == "MY_TOKEN"


def test_from_env_without_variables():
    assert ClientSettings.from_env() == ClientSettings()


def test_timeout_must_be_positive():
    with pytest.raises(ValidationError):
        ClientSettings(timeout=0)


def test_client_from_env(monkeypatch):
    monkeypatch.setenv("BCD_API_URL", "https://api.bcd.test/v1/")
    monkeypatch.setenv("BCD_JWT_ENV", "MY_TOKEN")
    monkeypatch.setenv("MY_TOKEN", "secret")

    client = BetterCallClient.from_env()

    assert client.url == "https://api.bcd.test/v1"
    assert client.api.credentials() == "secret"
