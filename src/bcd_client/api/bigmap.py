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

"""Big map API endpoints."""

from ._base import Endpoint
from .params import Omit, Param

_BIGMAP = "/bigmap/{network}/{ptr}"

get_big_map = Endpoint("GET", _BIGMAP, cancel_key="bigmap")
get_big_map_diffs_count = Endpoint("GET", f"{_BIGMAP}/count", cancel_key="bigmap_count")
get_big_map_keys = Endpoint(
    "GET",
    f"{_BIGMAP}/keys",
    cancel_key="bigmap_keys",
    query=(Param("q", Omit.EMPTY), Param("offset", Omit.NON_POSITIVE)),
)
get_big_map_actions = Endpoint("GET", f"{_BIGMAP}/history", cancel_key="bigmap_actions")
get_big_map_history = Endpoint(
    "GET",
    f"{_BIGMAP}/keys/{{keyhash}}",
    cancel_key="bigmap_history",
    query=(Param("offset", Omit.NON_POSITIVE),),
)

__all__ = [
    "get_big_map",
    "get_big_map_diffs_count",
    "get_big_map_keys",
    "get_big_map_actions",
    "get_big_map_history",
]
