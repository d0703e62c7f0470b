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

"""Tests for parameter omission rules."""

from enum import Enum

import pytest

from bcd_client.api import contract, misc
from bcd_client.api.params import Omit, Param, build_params, without_empty
from bcd_client.api.types import UNSET


class Network(str, Enum):
    MAINNET = "mainnet"
    GHOSTNET = "ghostnet"


class TestOmissionRules:
    @pytest.mark.parametrize("value", [0, -1, -100, None])
    def test_pagination_non_positive_omitted(self, value):
        fields = (Param("offset", Omit.NON_POSITIVE), Param("size", Omit.NON_POSITIVE))
        assert build_params(fields, {"offset": value, "size": value}) == {}

    def test_pagination_positive_kept(self):
        fields = (Param("offset", Omit.NON_POSITIVE), Param("size", Omit.NON_POSITIVE))
        assert build_params(fields, {"offset": 20, "size": 10}) == {"offset": 20, "size": 10}

    def test_empty_string_omitted(self):
        fields = (Param("last_id", Omit.EMPTY),)
        assert build_params(fields, {"last_id": ""}) == {}
        assert build_params(fields, {"last_id": "123"}) == {"last_id": "123"}

    def test_none_sentinel_keeps_zero(self):
        fields = (Param("level", Omit.NONE),)
        assert build_params(fields, {"level": None}) == {}
        assert build_params(fields, {"level": 0}) == {"level": 0}

    def test_negative_sentinel_keeps_zero(self):
        fields = (Param("token_id", Omit.NEGATIVE),)
        assert build_params(fields, {"token_id": -1}) == {}
        assert build_params(fields, {"token_id": 0}) == {"token_id": 0}

    def test_zero_sentinel_keeps_negative(self):
        fields = (Param("from_", Omit.ZERO, wire="from"),)
        assert build_params(fields, {"from_": 0}) == {}
        assert build_params(fields, {"from_": -5}) == {"from": -5}

    def test_falsy_sentinel(self):
        fields = (Param("network", Omit.FALSY),)
        assert build_params(fields, {"network": None}) == {}
        assert build_params(fields, {"network": ""}) == {}
        assert build_params(fields, {"network": "mainnet"}) == {"network": "mainnet"}

    def test_never_keeps_falsy_values(self):
        fields = (Param("with_storage_diff"), Param("token_id"))
        assert build_params(fields, {"with_storage_diff": False, "token_id": 0}) == {
            "with_storage_diff": False,
            "token_id": 0,
        }

    def test_unset_always_omitted(self):
        fields = (Param("q"), Param("offset", Omit.NON_POSITIVE))
        assert build_params(fields, {}) == {}
        assert build_params(fields, {"q": UNSET}) == {}


class TestCollections:
    def test_join_preserves_caller_order(self):
        fields = (Param("networks", Omit.EMPTY, wire="n", join=True),)
        params = build_params(fields, {"networks": ["ghostnet", "mainnet", "jakartanet"]})
        assert params == {"n": "ghostnet,mainnet,jakartanet"}

    def test_empty_collection_omitted(self):
        fields = (Param("networks", Omit.EMPTY, wire="n", join=True),)
        assert build_params(fields, {"networks": []}) == {}
        assert build_params(fields, {"networks": ()}) == {}

    def test_join_serializes_enums(self):
        fields = (Param("networks", Omit.EMPTY, join=True),)
        params = build_params(fields, {"networks": [Network.MAINNET, Network.GHOSTNET]})
        assert params == {"networks": "mainnet,ghostnet"}

    @pytest.mark.parametrize("count", [1, 2, 3])
    def test_bounded_selection_kept(self, count):
        statuses = ["applied", "failed", "backtracked", "skipped"][:count]
        params = build_params(contract.get_contract_operations.query, {"statuses": statuses})
        assert params["status"] == ",".join(statuses)

    def test_full_universe_is_no_filter(self):
        statuses = ["applied", "failed", "backtracked", "skipped"]
        params = build_params(contract.get_contract_operations.query, {"statuses": statuses})
        assert "status" not in params


class TestSerialization:
    def test_const_replaces_value(self):
        params = build_params(misc.search.query, {"text": "foo", "group": 0})
        assert params == {"q": "foo", "g": 1}

    def test_const_field_still_honors_sentinel(self):
        params = build_params(misc.search.query, {"text": "foo", "group": -1})
        assert params == {"q": "foo"}

    def test_convert_applied(self):
        params = build_params(
            contract.trace_entrypoint.body, {"name": "x", "data": {}, "amount": "15"}
        )
        assert params == {"name": "x", "data": {}, "amount": 15}

    def test_enum_value_sent(self):
        fields = (Param("network"),)
        assert build_params(fields, {"network": Network.MAINNET}) == {"network": "mainnet"}

    def test_declaration_order(self):
        params = build_params(
            misc.search.query,
            {
                "languages": ["michelson"],
                "text": "foo",
                "offset": 10,
                "networks": ["mainnet"],
                "group": 0,
            },
        )
        assert list(params) == ["q", "o", "n", "l", "g"]


class TestWithoutEmpty:
    def test_drops_none(self):
        assert without_empty({"s": 1, "e": None}) == {"s": 1}

    def test_drops_empty_and_zero(self):
        assert without_empty({"s": "", "e": 0, "x": [], "y": 5}) == {"y": 5}

    def test_empty_input(self):
        assert without_empty(None) == {}
        assert without_empty({}) == {}
