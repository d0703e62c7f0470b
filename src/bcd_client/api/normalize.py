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

"""Classification of transport outcomes into normalized results.

Resolved responses and raised transport errors both go through ``classify``,
so an error carrying a response (e.g. a 401 surfaced as
``httpx.HTTPStatusError``) is judged exactly like the same response returned
normally.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

import httpx

from .auth import AuthPolicy
from .errors import RequestFailedError, TransportError, UnauthorizedError
from .types import CANCELED, Outcome, Result

logger = logging.getLogger(__name__)

SUCCESS_STATUS = 200
NO_CONTENT_STATUS = 204
UNAUTHORIZED_STATUS = 401


class EmptyPolicy(str, Enum):
    """What a 204 means for an endpoint.

    NONE: 204 is not a documented outcome and fails like any other status.
    NULL: nothing found, returned as ``None``.
    EMPTY_OBJECT: nothing found, returned as ``{}``.
    """

    NONE = "none"
    NULL = "null"
    EMPTY_OBJECT = "empty_object"

    def empty_value(self) -> Any:
        if self is EmptyPolicy.EMPTY_OBJECT:
            return {}
        return None


class ResponseFormat(str, Enum):
    JSON = "json"
    TEXT = "text"


def _decode(response: httpx.Response, response_format: ResponseFormat) -> Any:
    if response_format is ResponseFormat.TEXT:
        return response.text
    if not response.content:
        return None
    return response.json()


def _classify_response(
    response: httpx.Response,
    *,
    auth: AuthPolicy,
    on_empty: EmptyPolicy,
    response_format: ResponseFormat,
) -> Result:
    status = response.status_code

    if status == SUCCESS_STATUS:
        try:
            payload = _decode(response, response_format)
        except ValueError as e:
            failure = RequestFailedError(
                status, response=response, message=f"Invalid JSON in response: {e}"
            )
            return Result(Outcome.FAILURE, status=status, error=failure, response=response)
        return Result(Outcome.SUCCESS, payload=payload, status=status, response=response)

    if status == NO_CONTENT_STATUS and on_empty is not EmptyPolicy.NONE:
        return Result(
            Outcome.EMPTY,
            payload=on_empty.empty_value(),
            status=status,
            response=response,
        )

    if status == UNAUTHORIZED_STATUS and auth is AuthPolicy.PROFILE:
        rejected: RequestFailedError = UnauthorizedError(response)
    else:
        rejected = RequestFailedError(status, response=response)
    return Result(Outcome.FAILURE, status=status, error=rejected, response=response)


def classify(
    *,
    response: httpx.Response | None = None,
    error: BaseException | None = None,
    auth: AuthPolicy = AuthPolicy.NONE,
    on_empty: EmptyPolicy = EmptyPolicy.NONE,
    response_format: ResponseFormat = ResponseFormat.JSON,
) -> Result:
    """Map one transport outcome onto the normalized result taxonomy.

    Args:
        response: Response returned by the transport, if any.
        error: Exception raised by the transport, if any.
        auth: Authentication policy of the endpoint.
        on_empty: 204 policy of the endpoint.
        response_format: How a successful body is decoded.

    Returns:
        A ``Result`` in one of the success, empty or failure states.
    """
    if error is not None:
        if isinstance(error, httpx.HTTPStatusError):
            return _classify_response(
                error.response, auth=auth, on_empty=on_empty, response_format=response_format
            )
        if isinstance(error, httpx.TimeoutException):
            failure = RequestFailedError(None, message=f"Request timed out: {error!s}")
        elif isinstance(error, httpx.HTTPError):
            failure = TransportError(error)
        else:
            raise TypeError(f"Cannot classify non-transport error: {error!r}") from error
        return Result(Outcome.FAILURE, error=failure)

    if response is None:
        raise ValueError("Either a response or an error is required")

    return _classify_response(
        response, auth=auth, on_empty=on_empty, response_format=response_format
    )


def unwrap(result: Result) -> Any:
    """Return the caller-facing value of a result or raise its failure."""
    if result.outcome is Outcome.FAILURE:
        assert result.error is not None
        logger.debug(f"Request failed: {result.error.message}")
        raise result.error
    if result.outcome is Outcome.CANCELED:
        return CANCELED
    return result.payload
