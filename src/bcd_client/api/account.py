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

"""Account API endpoints."""

from ._base import Endpoint
from .normalize import EmptyPolicy
from .params import Omit, Param

_ACCOUNT = "/account/{network}/{address}"

get_account_info = Endpoint("GET", _ACCOUNT, cancel_key="account")
get_account_token_balances = Endpoint(
    "GET",
    f"{_ACCOUNT}/token_balances",
    cancel_key="account_token_balances",
    query=(Param("offset", Omit.NON_POSITIVE), Param("size", Omit.NON_POSITIVE)),
)
# 204 means the account has no off-chain metadata
get_account_metadata = Endpoint(
    "GET",
    f"{_ACCOUNT}/metadata",
    cancel_key="account_metadata",
    on_empty=EmptyPolicy.NULL,
)
get_account_transfers = Endpoint(
    "GET",
    "/tokens/{network}/transfers/{address}",
    cancel_key="account_transfers",
    query=(
        Param("token_id", Omit.NEGATIVE),
        Param("size", Omit.NON_POSITIVE),
        Param("last_id", Omit.EMPTY),
        Param("contracts", Omit.EMPTY, join=True),
    ),
)

__all__ = [
    "get_account_info",
    "get_account_token_balances",
    "get_account_metadata",
    "get_account_transfers",
]
