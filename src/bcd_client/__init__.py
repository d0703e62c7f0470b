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

"""Async client for the Better Call Dev blockchain explorer API.

Example:
    ```python
    from bcd_client import CANCELED, BetterCallClient, UnauthorizedError

    async with BetterCallClient("https://api.better-call.dev/v1") as client:
        metadata = await client.get_account_metadata("mainnet", "tz1...")
        if metadata is None:
            print("No metadata")
    ```

For the declarative endpoint catalog and transport, use ``bcd_client.api``.
"""

from .api import (
    CANCELED,
    AuthPolicy,
    BcdApiError,
    CancellationRegistry,
    EmptyPolicy,
    FailureKind,
    Outcome,
    RequestFailedError,
    Result,
    TransportError,
    UnauthorizedError,
    env_credential,
)
from .client import BetterCallClient
from .config import ClientSettings

__version__ = "0.1.0"

__all__ = [
    # Client
    "BetterCallClient",
    "ClientSettings",
    "CancellationRegistry",
    "env_credential",
    # Results
    "CANCELED",
    "Outcome",
    "Result",
    "AuthPolicy",
    "EmptyPolicy",
    # Errors
    "BcdApiError",
    "FailureKind",
    "RequestFailedError",
    "TransportError",
    "UnauthorizedError",
]
