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

"""Credential lookup and Authorization header attachment."""

from __future__ import annotations

import os
from collections.abc import Callable
from enum import Enum

CredentialProvider = Callable[[], "str | None"]


class AuthPolicy(str, Enum):
    """How an endpoint uses the caller's credential.

    NONE: never attach a credential.
    OPTIONAL: attach when available; a 401 is a generic request failure.
    PROFILE: attach when available; a 401 means the session is unauthorized.
    """

    NONE = "none"
    OPTIONAL = "optional"
    PROFILE = "profile"


def no_credential() -> str | None:
    return None


def env_credential(name: str = "BCD_JWT") -> CredentialProvider:
    """Provider reading the token from an environment variable on each call."""

    def _read() -> str | None:
        return os.environ.get(name) or None

    return _read


def auth_headers(
    policy: AuthPolicy,
    provider: CredentialProvider,
    scheme: str | None = None,
) -> dict[str, str]:
    """Build the Authorization header for one call.

    The credential is read at call time. A missing credential yields no header;
    the server decides whether an anonymous call is acceptable.
    """
    if policy is AuthPolicy.NONE:
        return {}
    token = provider()
    if not token:
        return {}
    if scheme:
        token = f"{scheme} {token}"
    return {"Authorization": token}
