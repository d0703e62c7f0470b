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

"""Better Call Dev API client: transport, endpoint catalog and normalization."""

from . import account, bigmap, contract, misc, profile, stats
from ._base import Endpoint
from .auth import AuthPolicy, CredentialProvider, env_credential
from .cancellation import CancellationRegistry
from .client import ApiRequest, Client
from .errors import (
    BcdApiError,
    FailureKind,
    RequestFailedError,
    TransportError,
    UnauthorizedError,
)
from .normalize import EmptyPolicy, ResponseFormat, classify
from .params import Omit, Param, build_params
from .types import CANCELED, UNSET, Canceled, Outcome, Result, Unset

CATALOG = {
    f"{module.__name__.rsplit('.', 1)[-1]}.{name}": getattr(module, name)
    for module in (misc, contract, account, bigmap, stats, profile)
    for name in module.__all__
}

__all__ = [
    "ApiRequest",
    "AuthPolicy",
    "BcdApiError",
    "CANCELED",
    "CATALOG",
    "CancellationRegistry",
    "Canceled",
    "Client",
    "CredentialProvider",
    "EmptyPolicy",
    "Endpoint",
    "FailureKind",
    "Omit",
    "Outcome",
    "Param",
    "RequestFailedError",
    "ResponseFormat",
    "Result",
    "TransportError",
    "UNSET",
    "UnauthorizedError",
    "Unset",
    "build_params",
    "classify",
    "env_credential",
]
