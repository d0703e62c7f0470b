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

"""Shared fixtures for the client tests."""

import pytest

from bcd_client import BetterCallClient

BASE_URL = "https://api.bcd.test/v1"


class TokenStore:
    """Mutable credential source standing in for the session storage."""

    def __init__(self, token: str | None = None):
        self.token = token
        self.reads = 0

    def __call__(self) -> str | None:
        self.reads += 1
        return self.token


@pytest.fixture
def tokens():
    return TokenStore()


@pytest.fixture
def client(tokens):
    return BetterCallClient(BASE_URL, credentials=tokens)
