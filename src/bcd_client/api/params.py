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

"""Declarative omission rules for query and body parameters.

Each endpoint lists its optional fields as ``Param`` rules. A rule names the
"unset" sentinel of the field; a value matching the sentinel is dropped from the
outgoing request instead of being serialized literally.

Usage:
    fields = (
        Param("offset", Omit.NON_POSITIVE),
        Param("networks", Omit.EMPTY, wire="n", join=True),
        Param("statuses", Omit.EMPTY, wire="status", join=True, universe=4),
    )
    build_params(fields, {"offset": 0, "networks": ["mainnet"]})
    # {"n": "mainnet"}
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from enum import Enum
from typing import Any

from attrs import frozen

from .types import UNSET, Unset


class Omit(Enum):
    """Sentinel rule deciding when a value is left out."""

    NEVER = "never"
    NONE = "none"
    EMPTY = "empty"
    FALSY = "falsy"
    NON_POSITIVE = "non_positive"
    NEGATIVE = "negative"
    ZERO = "zero"


def _is_sentinel(rule: Omit, value: Any) -> bool:
    if rule is Omit.NEVER:
        return False
    if rule is Omit.NONE:
        return value is None
    if rule is Omit.EMPTY:
        return value is None or len(value) == 0
    if rule is Omit.FALSY:
        return not value
    if rule is Omit.NON_POSITIVE:
        return value is None or value <= 0
    if rule is Omit.NEGATIVE:
        return value is None or value < 0
    if rule is Omit.ZERO:
        return value is None or value == 0
    raise ValueError(f"Unknown omission rule: {rule}")


@frozen
class Param:
    """Omission rule and serialization strategy for one field.

    Attributes:
        name: Keyword argument name on the calling side.
        omit: Rule identifying the field's unset sentinel.
        wire: Name sent to the server, defaults to ``name``.
        join: Serialize collections as a comma-joined string in caller order.
        universe: Size of the value universe for count-bounded filters; a
            selection of the whole universe means "no filter" and is omitted.
        const: Value sent in place of the argument when the field is kept.
        convert: Callable applied to the value before it is sent.
    """

    name: str
    omit: Omit = Omit.NEVER
    wire: str | None = None
    join: bool = False
    universe: int | None = None
    const: Any = None
    convert: Callable[[Any], Any] | None = None

    @property
    def wire_name(self) -> str:
        return self.wire or self.name

    def keeps(self, value: Any) -> bool:
        if isinstance(value, Unset):
            return False
        if _is_sentinel(self.omit, value):
            return False
        if self.universe is not None and len(value) >= self.universe:
            return False
        return True

    def serialize(self, value: Any) -> Any:
        if self.const is not None:
            return self.const
        if self.convert is not None:
            value = self.convert(value)
        if self.join:
            return ",".join(_scalar(item) for item in value)
        if isinstance(value, Enum):
            return value.value
        return value


def _scalar(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    return str(value)


def build_params(fields: Iterable[Param], values: Mapping[str, Any]) -> dict[str, Any]:
    """Build a query or body mapping keeping only non-sentinel fields.

    Field order follows the declaration order of ``fields``.
    """
    params: dict[str, Any] = {}
    for field in fields:
        value = values.get(field.name, UNSET)
        if not field.keeps(value):
            continue
        params[field.wire_name] = field.serialize(value)
    return params


def without_empty(values: Mapping[str, Any] | None) -> dict[str, Any]:
    """Drop unset (falsy) entries from free-form extra parameters."""
    if not values:
        return {}
    return {key: value for key, value in values.items() if value}
