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

"""Single-slot cancellation of superseded requests.

Every cancellable endpoint belongs to a cancellation group (its key). The
registry holds at most one in-flight request per key: registering a new one
cancels the previous holder first, and the superseded call resolves to
``CANCELED`` instead of raising.
"""

from __future__ import annotations

import asyncio
import logging
import weakref
from collections.abc import Awaitable, Callable
from typing import TypeVar

from .types import CANCELED, Canceled

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CancellationRegistry:
    """Table of in-flight cancellable requests keyed by cancellation group.

    The table is only mutated synchronously inside the event loop, so no two
    registrations for the same key can both believe they hold the slot.

    Example:
        ```python
        registry = CancellationRegistry()

        first = asyncio.create_task(registry.run("search", lambda: fetch("foo")))
        await asyncio.sleep(0)
        second = await registry.run("search", lambda: fetch("foobar"))

        assert await first is CANCELED
        ```
    """

    def __init__(self) -> None:
        self._slots: dict[str, asyncio.Task] = {}
        self._superseded: weakref.WeakSet[asyncio.Task] = weakref.WeakSet()

    def __len__(self) -> int:
        return sum(1 for task in self._slots.values() if not task.done())

    def __contains__(self, key: str) -> bool:
        task = self._slots.get(key)
        return task is not None and not task.done()

    def _cancel(self, key: str, task: asyncio.Task) -> bool:
        if task.done():
            return False
        self._superseded.add(task)
        task.cancel()
        logger.debug(f"Canceled in-flight request for '{key}'")
        return True

    def register(self, key: str, factory: Callable[[], Awaitable[T]]) -> asyncio.Task:
        """Start a request as the holder of ``key``, canceling any previous one."""
        previous = self._slots.get(key)
        if previous is not None:
            self._cancel(key, previous)

        task = asyncio.ensure_future(factory())
        self._slots[key] = task
        task.add_done_callback(lambda done: self._release(key, done))
        return task

    def _release(self, key: str, task: asyncio.Task) -> None:
        if self._slots.get(key) is task:
            del self._slots[key]

    async def run(self, key: str, factory: Callable[[], Awaitable[T]]) -> T | Canceled:
        """Register a request and wait for it.

        Returns:
            The request's result, or ``CANCELED`` when a later registration
            (or ``cancel_all``) superseded it.

        Raises:
            asyncio.CancelledError: If the awaiting caller itself was cancelled.
        """
        task = self.register(key, factory)
        try:
            return await task
        except asyncio.CancelledError:
            if task in self._superseded:
                return CANCELED
            raise

    def cancel(self, key: str) -> bool:
        """Cancel the holder of a single key, if any."""
        task = self._slots.get(key)
        if task is None:
            return False
        return self._cancel(key, task)

    def cancel_all(self) -> int:
        """Cancel every held slot.

        Requests that were not registered here are not affected.

        Returns:
            Number of requests that were canceled.
        """
        canceled = 0
        for key, task in list(self._slots.items()):
            if self._cancel(key, task):
                canceled += 1
        if canceled:
            logger.debug(f"Canceled {canceled} in-flight request(s)")
        return canceled

    def keys(self) -> list[str]:
        """Keys currently holding a live request."""
        return [key for key, task in self._slots.items() if not task.done()]
