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

"""HTTP client for the Better Call Dev API."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from .auth import CredentialProvider, no_credential
from .cancellation import CancellationRegistry

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


@dataclass
class ApiRequest:
    """A fully shaped request, ready for the transport."""

    method: str
    url: str
    params: dict[str, Any] = field(default_factory=dict)
    json: Any = None
    headers: dict[str, str] = field(default_factory=dict)


class Client:
    """HTTP client wrapper for the Better Call Dev API.

    Owns the pooled ``httpx.AsyncClient``, the cancellation registry shared by
    every cancellable endpoint, and the credential provider read on each
    authenticated call.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: httpx.Timeout | float | None = None,
        headers: dict[str, str] | None = None,
        registry: CancellationRegistry | None = None,
        credentials: CredentialProvider | None = None,
        auth_scheme: str | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        if timeout is None:
            timeout = DEFAULT_TIMEOUT
        self.timeout = timeout if isinstance(timeout, httpx.Timeout) else httpx.Timeout(timeout)
        self.headers = headers or {}
        self.registry = registry if registry is not None else CancellationRegistry()
        self.credentials = credentials or no_credential
        self.auth_scheme = auth_scheme
        self._async_client: httpx.AsyncClient | None = None

    def get_async_httpx_client(self) -> httpx.AsyncClient:
        """Get asynchronous httpx client."""
        if self._async_client is None or self._async_client.is_closed:
            self._async_client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=self.headers,
            )

            # Try to apply OpenTelemetry instrumentation
            try:
                from opentelemetry.instrumentation.httpx import (
                    HTTPXClientInstrumentor,
                )

                HTTPXClientInstrumentor().instrument_client(self._async_client)
            except ImportError:
                logger.debug("OpenTelemetry httpx instrumentation not available")

        return self._async_client

    async def send(self, request: ApiRequest) -> httpx.Response:
        """Send a request without judging its status.

        Raises:
            httpx.TimeoutException: If the request takes longer than the timeout.
            httpx.HTTPError: If no response could be obtained.
        """
        kwargs: dict[str, Any] = {"method": request.method, "url": request.url}
        if request.params:
            kwargs["params"] = request.params
        if request.json is not None:
            kwargs["json"] = request.json
        if request.headers:
            kwargs["headers"] = request.headers

        response = await self.get_async_httpx_client().request(**kwargs)
        logger.debug(f"{request.method} {request.url} -> {response.status_code}")
        return response

    async def aclose(self) -> None:
        """Cancel outstanding requests and close the async client."""
        self.registry.cancel_all()
        if self._async_client is not None:
            await self._async_client.aclose()
            self._async_client = None
