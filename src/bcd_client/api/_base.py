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

"""Thin declarative API layer for HTTP endpoints."""

from __future__ import annotations

import re
from typing import Any
from urllib.parse import quote

import httpx
from attrs import frozen

from ..observability import request_context
from .auth import AuthPolicy, auth_headers
from .client import ApiRequest, Client
from .normalize import EmptyPolicy, ResponseFormat, classify, unwrap
from .params import Param, build_params
from .types import Result

_PLACEHOLDER = re.compile(r"{(\w+)}")


@frozen
class Endpoint:
    """Declarative endpoint definition.

    Usage:
        get_head = Endpoint("GET", "/head", cancel_key="head")
        get_account_metadata = Endpoint(
            "GET", "/account/{network}/{address}/metadata",
            cancel_key="account_metadata", on_empty=EmptyPolicy.NULL,
        )
        list_domains = Endpoint(
            "GET", "/domains/{network}", cancel_key="domains",
            query=(Param("size", Omit.NON_POSITIVE), Param("offset", Omit.NON_POSITIVE)),
        )
    """

    method: str
    path: str
    query: tuple[Param, ...] = ()
    body: tuple[Param, ...] | None = None
    raw_body: bool = False
    fixed_query: tuple[tuple[str, Any], ...] = ()
    cancel_key: str | None = None
    auth: AuthPolicy = AuthPolicy.NONE
    on_empty: EmptyPolicy = EmptyPolicy.NONE
    response_format: ResponseFormat = ResponseFormat.JSON

    @property
    def path_params(self) -> tuple[str, ...]:
        return tuple(_PLACEHOLDER.findall(self.path))

    @property
    def cancellable(self) -> bool:
        return self.cancel_key is not None

    def _build_url(self, **path_params: Any) -> str:
        """Build URL with path parameters."""
        url = self.path
        for key in self.path_params:
            if key not in path_params:
                raise TypeError(f"Missing path parameter '{key}' for {self.path}")
            url = url.replace(f"{{{key}}}", quote(str(path_params[key]), safe=""))
        return url

    def _prepare_body(self, kwargs: dict[str, Any]) -> Any:
        if self.raw_body:
            return kwargs.get("body")
        if self.body is None:
            return None
        return build_params(self.body, kwargs)

    def build_request(
        self,
        *,
        client: Client,
        extra_query: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> ApiRequest:
        """Shape a request from keyword arguments.

        Path placeholders are filled from ``kwargs``, query and body fields are
        filtered through their omission rules, and the Authorization header is
        attached according to the endpoint's auth policy.
        """
        params = dict(self.fixed_query)
        # Declared fields win over free-form extras
        if extra_query:
            params.update(extra_query)
        params.update(build_params(self.query, kwargs))

        return ApiRequest(
            method=self.method,
            url=self._build_url(**kwargs),
            params=params,
            json=self._prepare_body(kwargs),
            headers=auth_headers(self.auth, client.credentials, client.auth_scheme),
        )

    async def _exchange(self, client: Client, request: ApiRequest) -> Result:
        try:
            response = await client.send(request)
        except httpx.HTTPError as e:
            return classify(
                error=e,
                auth=self.auth,
                on_empty=self.on_empty,
                response_format=self.response_format,
            )
        return classify(
            response=response,
            auth=self.auth,
            on_empty=self.on_empty,
            response_format=self.response_format,
        )

    async def asyncio_detailed(self, *, client: Client, **kwargs: Any) -> Result:
        """Execute the request and return the normalized result."""
        request = self.build_request(client=client, **kwargs)
        with request_context(operation=self.path, cancel_key=self.cancel_key):
            if not self.cancellable:
                return await self._exchange(client, request)

            result = await client.registry.run(
                self.cancel_key, lambda: self._exchange(client, request)
            )
            if isinstance(result, Result):
                return result
            return Result.canceled()

    async def asyncio(self, *, client: Client, **kwargs: Any) -> Any:
        """Execute the request and return its payload.

        Returns:
            The decoded payload, the endpoint's empty value for a documented
            204, or ``CANCELED`` when the call was superseded.

        Raises:
            errors.RequestFailedError: If the request failed.
        """
        return unwrap(await self.asyncio_detailed(client=client, **kwargs))
