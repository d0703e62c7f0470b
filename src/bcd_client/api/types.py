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

"""Common types for the API client."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

import httpx

if TYPE_CHECKING:
    from .errors import BcdApiError


# Sentinel for arguments the caller did not pass
class _Unset:
    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET = _Unset()
Unset = _Unset


class _Canceled:
    """Result of a request superseded in its cancellation group.

    Falsy, so callers that treat it like "no result" behave safely.
    """

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "CANCELED"


CANCELED = _Canceled()
Canceled = _Canceled


class Outcome(str, Enum):
    """Terminal state of a single call."""

    SUCCESS = "success"
    EMPTY = "empty"
    FAILURE = "failure"
    CANCELED = "canceled"


@dataclass
class Result:
    """Normalized outcome of one request.

    Every call site consumes exactly one of these, never a raw transport
    response.
    """

    outcome: Outcome
    payload: Any = None
    status: int | None = None
    error: BcdApiError | None = None
    response: httpx.Response | None = None

    @property
    def ok(self) -> bool:
        return self.outcome in (Outcome.SUCCESS, Outcome.EMPTY)

    @classmethod
    def canceled(cls) -> Result:
        return cls(Outcome.CANCELED, payload=CANCELED)
