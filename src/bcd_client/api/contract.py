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

"""Contract API endpoints."""

from ._base import Endpoint
from .auth import AuthPolicy
from .normalize import ResponseFormat
from .params import Omit, Param

# applied, failed, backtracked, skipped
OPERATION_STATUSES = 4

_CONTRACT = "/contract/{network}/{address}"
_LEVEL = (Param("level", Omit.NONE),)

get_contract = Endpoint("GET", _CONTRACT, cancel_key="contract", auth=AuthPolicy.OPTIONAL)
get_same_contracts = Endpoint(
    "GET",
    f"{_CONTRACT}/same",
    cancel_key="same_contracts",
    query=(Param("offset", Omit.NON_POSITIVE),),
)
get_similar_contracts = Endpoint(
    "GET",
    f"{_CONTRACT}/similar",
    cancel_key="similar_contracts",
    query=(Param("offset", Omit.NON_POSITIVE),),
)
get_contract_operations = Endpoint(
    "GET",
    f"{_CONTRACT}/operations",
    cancel_key="contract_operations",
    query=(
        Param("last_id", Omit.EMPTY),
        Param("from_", Omit.ZERO, wire="from"),
        Param("to", Omit.ZERO),
        Param("statuses", Omit.EMPTY, wire="status", join=True, universe=OPERATION_STATUSES),
        Param("entrypoints", Omit.EMPTY, join=True),
        Param("with_storage_diff"),
    ),
)
get_contract_code = Endpoint(
    "GET",
    f"{_CONTRACT}/code",
    cancel_key="contract_code",
    query=(Param("protocol", Omit.EMPTY), Param("level", Omit.NON_POSITIVE)),
)
get_contract_migrations = Endpoint(
    "GET", f"{_CONTRACT}/migrations", cancel_key="contract_migrations"
)
get_contract_tokens = Endpoint(
    "GET",
    f"{_CONTRACT}/tokens",
    cancel_key="contract_tokens",
    query=(Param("offset", Omit.NON_POSITIVE), Param("size", Omit.NON_POSITIVE)),
)
get_contract_tokens_count = Endpoint(
    "GET", f"{_CONTRACT}/tokens/count", cancel_key="contract_tokens_count"
)
get_contract_transfers = Endpoint(
    "GET",
    f"{_CONTRACT}/transfers",
    cancel_key="contract_transfers",
    query=(
        Param("token_id", Omit.NEGATIVE),
        Param("size", Omit.NON_POSITIVE),
        Param("offset", Omit.NON_POSITIVE),
    ),
)
get_contract_entrypoints = Endpoint(
    "GET", f"{_CONTRACT}/entrypoints", cancel_key="contract_entrypoints"
)
get_contract_entrypoint_data = Endpoint(
    "POST",
    f"{_CONTRACT}/entrypoints/data",
    cancel_key="entrypoint_data",
    body=(Param("name"), Param("data"), Param("format", Omit.EMPTY)),
    response_format=ResponseFormat.TEXT,
)

# Both variants share a slot: running an operation supersedes a pending trace
_TRACE_BODY = (
    Param("name"),
    Param("data"),
    Param("source", Omit.FALSY),
    Param("amount", Omit.FALSY, convert=int),
)
trace_entrypoint = Endpoint(
    "POST", f"{_CONTRACT}/entrypoints/trace", cancel_key="entrypoint_trace", body=_TRACE_BODY
)
run_operation = Endpoint(
    "POST",
    f"{_CONTRACT}/entrypoints/run_operation",
    cancel_key="entrypoint_trace",
    body=_TRACE_BODY,
)

get_contract_entrypoint_schema = Endpoint(
    "GET",
    f"{_CONTRACT}/entrypoints/schema",
    query=(Param("fill_type"), Param("entrypoint")),
)
get_contract_storage = Endpoint(
    "GET", f"{_CONTRACT}/storage", cancel_key="contract_storage", query=_LEVEL
)
get_contract_storage_raw = Endpoint("GET", f"{_CONTRACT}/storage/raw", query=_LEVEL)
get_contract_storage_rich = Endpoint("GET", f"{_CONTRACT}/storage/rich", query=_LEVEL)
get_contract_storage_schema = Endpoint(
    "GET", f"{_CONTRACT}/storage/schema", query=(Param("fill_type"),)
)
get_contract_mempool = Endpoint("GET", f"{_CONTRACT}/mempool", cancel_key="contract_mempool")
get_metadata_views_schema = Endpoint("GET", f"{_CONTRACT}/views/schema")
execute_metadata_view = Endpoint("POST", f"{_CONTRACT}/views/execute", raw_body=True)
get_token_holders_list = Endpoint(
    "GET", f"{_CONTRACT}/tokens/holders", query=(Param("token_id"),)
)

__all__ = [
    "get_contract",
    "get_same_contracts",
    "get_similar_contracts",
    "get_contract_operations",
    "get_contract_code",
    "get_contract_migrations",
    "get_contract_tokens",
    "get_contract_tokens_count",
    "get_contract_transfers",
    "get_contract_entrypoints",
    "get_contract_entrypoint_data",
    "trace_entrypoint",
    "run_operation",
    "get_contract_entrypoint_schema",
    "get_contract_storage",
    "get_contract_storage_raw",
    "get_contract_storage_rich",
    "get_contract_storage_schema",
    "get_contract_mempool",
    "get_metadata_views_schema",
    "execute_metadata_view",
    "get_token_holders_list",
]
