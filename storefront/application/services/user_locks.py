# Standard library imports
import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict

logger = logging.getLogger(__name__)


class UserLockRegistry:
    """
    Per-user asyncio locks for load-mutate-save sequences

    Holding the lock for a user id serializes cart and checkout updates of
    that user inside this process. Other processes are not coordinated.
    """

    def __init__(self) -> None:
        self._locks: Dict[str, asyncio.Lock] = {}

    def get_lock(self, user_id: str) -> asyncio.Lock:
        lock = self._locks.get(user_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[user_id] = lock
        return lock

    @asynccontextmanager
    async def hold(self, user_id: str) -> AsyncIterator[None]:
        """
        Acquire the lock of one user for the duration of the block

        Args:
            user_id: User whose aggregate is about to be modified
        """
        lock = self.get_lock(user_id)
        if lock.locked():
            logger.debug(f"Waiting for lock of user {user_id}")
        async with lock:
            yield

    def __len__(self) -> int:
        return len(self._locks)
