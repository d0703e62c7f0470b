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

"""Contains shared errors types that can be raised from API functions"""

from __future__ import annotations

from enum import Enum

import httpx


class FailureKind(str, Enum):
    REQUEST_FAILED = "request_failed"
    UNAUTHORIZED = "unauthorized"
    TRANSPORT = "transport"


class BcdApiError(Exception):
    """Base exception for all API client failures."""

    def __init__(
        self,
        message: str,
        status: int | None = None,
        response: httpx.Response | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status = status
        self.response = response

    @property
    def kind(self) -> FailureKind:
        return FailureKind.REQUEST_FAILED

    @property
    def content(self) -> bytes:
        """Raw response body, empty when the server never answered."""
        if self.response is None:
            return b""
        return self.response.content


class RequestFailedError(BcdApiError):
    """The server answered with a status the endpoint does not accept.

    Timeouts are reported here as well, with ``status`` set to None.
    """

    def __init__(
        self,
        status: int | None,
        response: httpx.Response | None = None,
        message: str | None = None,
    ):
        if message is None:
            message = f"Request failed with status {status}"
        super().__init__(message, status=status, response=response)

    # Kept for callers written against the ``code`` attribute
    @property
    def code(self) -> int | None:
        return self.status


class UnauthorizedError(RequestFailedError):
    """401 from an endpoint of the authenticated profile family."""

    def __init__(self, cause: Exception | httpx.Response):
        response = cause if isinstance(cause, httpx.Response) else getattr(cause, "response", None)
        super().__init__(401, response=response, message="Unauthorized")
        self.cause = cause

    @property
    def kind(self) -> FailureKind:
        return FailureKind.UNAUTHORIZED


class TransportError(RequestFailedError):
    """The request never produced a response (DNS, refused, reset)."""

    def __init__(self, cause: Exception):
        super().__init__(None, message=f"Transport error: {cause!s}")
        self.cause = cause

    @property
    def kind(self) -> FailureKind:
        return FailureKind.TRANSPORT
