"""
Per-key in-process locks.

Serializes coroutines working on the same key (e.g. one event's capacity)
inside a single process. Holds nothing across processes: several workers
sharing one database still need a database-side guard.

A key's lock is dropped once its last holder leaves, so the registry only
grows with the number of keys in use at the same time.
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Hashable, Optional

import anyio

from src.platform.logging.loguru_io import Logger


class EventLockRegistry:
    def __init__(self) -> None:
        self._locks: dict[Hashable, anyio.Lock] = {}
        self._holders: dict[Hashable, int] = {}
        self._loop: Optional[asyncio.AbstractEventLoop] = None

    def __len__(self) -> int:
        return len(self._locks)

    def lock_for(self, key: Hashable) -> anyio.Lock:
        # Locks are loop-bound; a new loop (new TestClient, new anyio.run) starts clean
        current_loop = asyncio.get_running_loop()
        if self._loop is not current_loop:
            self._locks = {}
            self._holders = {}
            self._loop = current_loop
        if key not in self._locks:
            self._locks[key] = anyio.Lock()
        return self._locks[key]

    @asynccontextmanager
    async def hold(self, key: Hashable) -> AsyncIterator[None]:
        lock = self.lock_for(key)
        # Counted before acquiring so a waiter keeps the lock registered
        self._holders[key] = self._holders.get(key, 0) + 1
        try:
            if lock.locked():
                Logger.base.debug(f'⏳ [LOCK] Waiting for {key}')
            async with lock:
                yield
        finally:
            self._release(key, lock)

    def _release(self, key: Hashable, lock: anyio.Lock) -> None:
        remaining = self._holders.get(key, 0) - 1
        if remaining > 0:
            self._holders[key] = remaining
            return
        self._holders.pop(key, None)
        if self._locks.get(key) is lock:
            del self._locks[key]
