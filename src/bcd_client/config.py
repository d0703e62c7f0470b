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

"""Client settings."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

DEFAULT_BASE_URL = "https://api.better-call.dev/v1"
DEFAULT_PAGE_SIZE = 10


class ClientSettings(BaseModel):
    """Settings for ``BetterCallClient``.

    Environment variables read by ``from_env``:
    - BCD_API_URL: Base URL of the API
    - BCD_TIMEOUT: Request timeout in seconds
    - BCD_AUTH_SCHEME: Prefix of the Authorization header (e.g. "Bearer")
    - BCD_JWT_ENV: Name of the variable holding the session token
    """

    base_url: str = Field(default=DEFAULT_BASE_URL, description="Base URL of the API")
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, gt=0, description="Default page size")
    auth_scheme: str | None = Field(
        default=None,
        description="Authorization header prefix; None sends the token verbatim",
    )
    credential_env: str = Field(
        default="BCD_JWT",
        description="Environment variable read for the session token",
    )

    @classmethod
    def from_env(cls) -> ClientSettings:
        values: dict[str, object] = {}
        if url := os.environ.get("BCD_API_URL"):
            values["base_url"] = url
        if timeout := os.environ.get("BCD_TIMEOUT"):
            values["timeout"] = float(timeout)
        if scheme := os.environ.get("BCD_AUTH_SCHEME"):
            values["auth_scheme"] = scheme
        if credential_env := os.environ.get("BCD_JWT_ENV"):
            values["credential_env"] = credential_env
        return cls(**values)
