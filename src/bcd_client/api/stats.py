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

"""Token and statistics API endpoints."""

from ._base import Endpoint
from .params import Omit, Param

get_tokens_by_version = Endpoint(
    "GET",
    "/tokens/{network}/version/{version}",
    cancel_key="tokens_by_version",
    query=(Param("size", Omit.NON_POSITIVE), Param("offset", Omit.NON_POSITIVE)),
)
get_token_volume_series = Endpoint(
    "GET",
    "/tokens/{network}/series",
    cancel_key="token_volume_series",
    query=(
        Param("contract"),
        Param("period"),
        Param("token_id"),
        Param("slug", Omit.EMPTY),
    ),
)
get_stats = Endpoint("GET", "/stats", cancel_key="stats")
get_network_stats = Endpoint("GET", "/stats/{network}", cancel_key="network_stats")
get_network_stats_series = Endpoint(
    "GET",
    "/stats/{network}/series",
    cancel_key="network_stats_series",
    query=(
        Param("addresses", Omit.EMPTY, wire="address", join=True),
        Param("period", Omit.FALSY),
        Param("index", Omit.FALSY, wire="name"),
    ),
)
get_contracts_stats = Endpoint(
    "GET",
    "/stats/{network}/contracts",
    cancel_key="contracts_stats",
    query=(
        Param("period", Omit.EMPTY),
        Param("addresses", Omit.EMPTY, wire="contracts", join=True),
    ),
)

__all__ = [
    "get_tokens_by_version",
    "get_token_volume_series",
    "get_stats",
    "get_network_stats",
    "get_network_stats_series",
    "get_contracts_stats",
]
