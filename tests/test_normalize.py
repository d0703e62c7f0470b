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

"""Tests for response classification."""

import httpx
import pytest

from bcd_client.api.auth import AuthPolicy
from bcd_client.api.errors import (
    FailureKind,
    RequestFailedError,
    TransportError,
    UnauthorizedError,
)
from bcd_client.api.normalize import EmptyPolicy, ResponseFormat, classify, unwrap
from bcd_client.api.types import CANCELED, Outcome, Result

REQUEST = httpx.Request("GET", "https://api.bcd.test/v1/profile")


class TestClassifyResponse:
    def test_success_payload(self):
        result = classify(response=httpx.Response(200, json={"network": "mainnet"}))
        assert result.outcome is Outcome.SUCCESS
        assert result.payload == {"network": "mainnet"}
        assert result.status == 200
        assert result.ok

    def test_success_text(self):
        result = classify(
            response=httpx.Response(200, text="Pair 1 2"),
            response_format=ResponseFormat.TEXT,
        )
        assert result.payload == "Pair 1 2"

    def test_success_empty_body(self):
        result = classify(response=httpx.Response(200))
        assert result.outcome is Outcome.SUCCESS
        assert result.payload is None

    def test_invalid_json_is_failure(self):
        result = classify(response=httpx.Response(200, content=b"{not json"))
        assert result.outcome is Outcome.FAILURE
        assert isinstance(result.error, RequestFailedError)
        assert result.error.status == 200

    def test_204_as_null(self):
        result = classify(response=httpx.Response(204), on_empty=EmptyPolicy.NULL)
        assert result.outcome is Outcome.EMPTY
        assert result.payload is None

    def test_204_as_empty_object(self):
        result = classify(response=httpx.Response(204), on_empty=EmptyPolicy.EMPTY_OBJECT)
        assert result.outcome is Outcome.EMPTY
        assert result.payload == {}

    def test_204_without_policy_fails(self):
        result = classify(response=httpx.Response(204))
        assert result.outcome is Outcome.FAILURE
        assert result.error.status == 204

    @pytest.mark.parametrize("status", [201, 400, 404, 500, 502])
    def test_other_statuses_fail(self, status):
        response = httpx.Response(status, json={"message": "nope"})
        result = classify(response=response)
        assert result.outcome is Outcome.FAILURE
        assert type(result.error) is RequestFailedError
        assert result.error.status == status
        assert result.error.response is response
        assert result.error.kind is FailureKind.REQUEST_FAILED

    def test_401_on_profile_endpoint_is_unauthorized(self):
        result = classify(response=httpx.Response(401), auth=AuthPolicy.PROFILE)
        assert isinstance(result.error, UnauthorizedError)
        assert result.error.status == 401
        assert result.error.kind is FailureKind.UNAUTHORIZED

    @pytest.mark.parametrize("auth", [AuthPolicy.NONE, AuthPolicy.OPTIONAL])
    def test_401_elsewhere_is_generic(self, auth):
        result = classify(response=httpx.Response(401), auth=auth)
        assert type(result.error) is RequestFailedError
        assert result.error.status == 401


class TestClassifyError:
    def test_status_error_with_attached_401(self):
        response = httpx.Response(401, request=REQUEST)
        error = httpx.HTTPStatusError("Unauthorized", request=REQUEST, response=response)

        result = classify(error=error, auth=AuthPolicy.PROFILE)

        assert isinstance(result.error, UnauthorizedError)
        assert result.error.response is response

    def test_status_error_judged_like_response(self):
        response = httpx.Response(204, request=REQUEST)
        error = httpx.HTTPStatusError("No Content", request=REQUEST, response=response)

        result = classify(error=error, on_empty=EmptyPolicy.NULL)

        assert result.outcome is Outcome.EMPTY

    def test_timeout_is_request_failed_without_status(self):
        result = classify(error=httpx.ReadTimeout("timed out", request=REQUEST))
        assert result.outcome is Outcome.FAILURE
        assert type(result.error) is RequestFailedError
        assert result.error.status is None

    def test_connection_failure_is_transport_error(self):
        result = classify(error=httpx.ConnectError("refused", request=REQUEST))
        assert isinstance(result.error, TransportError)
        assert result.error.status is None
        assert result.error.kind is FailureKind.TRANSPORT
        assert result.error.content == b""

    def test_non_transport_error_rejected(self):
        with pytest.raises(TypeError):
            classify(error=RuntimeError("bug"))

    def test_requires_outcome(self):
        with pytest.raises(ValueError):
            classify()


class TestUnwrap:
    def test_success(self):
        assert unwrap(Result(Outcome.SUCCESS, payload=[1, 2])) == [1, 2]

    def test_empty(self):
        assert unwrap(Result(Outcome.EMPTY, payload={})) == {}

    def test_canceled(self):
        assert unwrap(Result.canceled()) is CANCELED

    def test_failure_raises(self):
        error = RequestFailedError(500)
        with pytest.raises(RequestFailedError) as exc_info:
            unwrap(Result(Outcome.FAILURE, error=error, status=500))
        assert exc_info.value is error
        assert exc_info.value.code == 500
