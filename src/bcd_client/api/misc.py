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

"""Global API endpoints: search, head, dapps, domains and friends."""

from ._base import Endpoint
from .normalize import EmptyPolicy
from .params import Omit, Param

get_config = Endpoint("GET", "/config", cancel_key="config")
get_head = Endpoint("GET", "/head", cancel_key="head")

# All keystrokes of the search box share one slot
search = Endpoint(
    "GET",
    "/search",
    cancel_key="search",
    query=(
        Param("text", wire="q"),
        Param("offset", Omit.NON_POSITIVE, wire="o"),
        Param("indices", Omit.EMPTY, wire="i", join=True),
        Param("networks", Omit.EMPTY, wire="n", join=True),
        Param("languages", Omit.EMPTY, wire="l", join=True),
        Param("group", Omit.NEGATIVE, wire="g", const=1),
    ),
)

pick_random = Endpoint(
    "GET",
    "/pick_random",
    cancel_key="pick_random",
    query=(Param("network", Omit.FALSY),),
)

prepare_to_fork = Endpoint("POST", "/fork", cancel_key="fork", raw_body=True)
get_diff = Endpoint("POST", "/diff", raw_body=True)
get_projects = Endpoint("GET", "/projects", cancel_key="projects")
get_opg = Endpoint(
    "GET", "/opg/{hash}", cancel_key="opg", fixed_query=(("with_mempool", "true"),)
)
get_error_location = Endpoint(
    "GET", "/operation/{operation_id}/error_location", cancel_key="error_location"
)
get_contract_by_slug = Endpoint("GET", "/slug/{slug}", cancel_key="slug")
get_dapps = Endpoint("GET", "/dapps", cancel_key="dapps")
get_dapp = Endpoint("GET", "/dapps/{slug}", cancel_key="dapp")

list_domains = Endpoint(
    "GET",
    "/domains/{network}",
    cancel_key="domains",
    query=(Param("size", Omit.NON_POSITIVE), Param("offset", Omit.NON_POSITIVE)),
)
resolve_domain = Endpoint(
    "GET",
    "/domains/{network}/resolve",
    cancel_key="resolve_domain",
    query=(Param("address"),),
    on_empty=EmptyPolicy.EMPTY_OBJECT,
)

__all__ = [
    "get_config",
    "get_head",
    "search",
    "pick_random",
    "prepare_to_fork",
    "get_diff",
    "get_projects",
    "get_opg",
    "get_error_location",
    "get_contract_by_slug",
    "get_dapps",
    "get_dapp",
    "list_domains",
    "resolve_domain",
]
