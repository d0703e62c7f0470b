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

"""Authenticated profile API endpoints.

Every endpoint here carries the caller's credential when one is available, and
a 401 answer surfaces as ``UnauthorizedError`` so callers can re-authenticate.
"""

from ._base import Endpoint
from .auth import AuthPolicy
from .params import Omit, Param

_PAGE = (Param("limit", Omit.NON_POSITIVE), Param("offset", Omit.NON_POSITIVE))

vote = Endpoint(
    "POST",
    "/profile/vote",
    auth=AuthPolicy.PROFILE,
    body=(
        Param("src"),
        Param("src_network"),
        Param("dest"),
        Param("dest_network"),
        Param("vote"),
    ),
)
get_tasks = Endpoint("GET", "/profile/vote/tasks", auth=AuthPolicy.PROFILE)
generate_tasks = Endpoint("GET", "/profile/vote/generate", auth=AuthPolicy.PROFILE)
get_profile = Endpoint("GET", "/profile", auth=AuthPolicy.PROFILE)
mark_all_read = Endpoint(
    "POST",
    "/profile/mark_all_read",
    auth=AuthPolicy.PROFILE,
    body=(Param("timestamp"),),
)

get_subscriptions = Endpoint("GET", "/profile/subscriptions", auth=AuthPolicy.PROFILE)
add_subscription = Endpoint(
    "POST", "/profile/subscriptions", auth=AuthPolicy.PROFILE, raw_body=True
)
remove_subscription = Endpoint(
    "DELETE",
    "/profile/subscriptions",
    auth=AuthPolicy.PROFILE,
    body=(Param("network"), Param("address")),
)
get_events = Endpoint(
    "GET",
    "/profile/subscriptions/events",
    auth=AuthPolicy.PROFILE,
    query=(Param("offset", Omit.NON_POSITIVE), Param("size", Omit.NON_POSITIVE)),
)

get_accounts = Endpoint(
    "GET", "/profile/accounts", cancel_key="profile_accounts", auth=AuthPolicy.PROFILE
)
get_repos = Endpoint(
    "GET",
    "/profile/repos",
    cancel_key="profile_repos",
    auth=AuthPolicy.PROFILE,
    query=(Param("login"),),
)
get_refs = Endpoint(
    "GET",
    "/profile/refs",
    cancel_key="profile_refs",
    auth=AuthPolicy.PROFILE,
    query=(Param("owner"), Param("repo")),
)
get_compilations = Endpoint(
    "GET",
    "/profile/compilations",
    cancel_key="profile_compilations",
    auth=AuthPolicy.PROFILE,
    query=_PAGE,
)

get_verification_list = Endpoint(
    "GET",
    "/profile/compilations/verification",
    cancel_key="verification_list",
    auth=AuthPolicy.PROFILE,
)
verify_contract = Endpoint(
    "POST",
    "/profile/compilations/verification",
    auth=AuthPolicy.PROFILE,
    body=(
        Param("network"),
        Param("address"),
        Param("account"),
        Param("repo"),
        Param("ref"),
    ),
)

get_deployment_list = Endpoint(
    "GET",
    "/profile/compilations/deployment",
    cancel_key="deployment_list",
    auth=AuthPolicy.PROFILE,
    query=_PAGE,
)
deploy_contract = Endpoint(
    "POST",
    "/profile/compilations/deployment",
    auth=AuthPolicy.PROFILE,
    body=(Param("network"), Param("address"), Param("repo"), Param("ref")),
)
finalize_deployment = Endpoint(
    "PATCH",
    "/profile/compilations/deployment",
    auth=AuthPolicy.PROFILE,
    body=(Param("operation_hash"), Param("task_id"), Param("result_id")),
)

__all__ = [
    "vote",
    "get_tasks",
    "generate_tasks",
    "get_profile",
    "mark_all_read",
    "get_subscriptions",
    "add_subscription",
    "remove_subscription",
    "get_events",
    "get_accounts",
    "get_repos",
    "get_refs",
    "get_compilations",
    "get_verification_list",
    "verify_contract",
    "get_deployment_list",
    "deploy_contract",
    "finalize_deployment",
]
