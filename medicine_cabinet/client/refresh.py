"""Periodic background task that keeps the session token fresh."""

import asyncio
import logging
from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)


class TokenRefresher:
    """
    Calls `callback` every `interval` seconds until stopped.

    A refresh already in flight when stop() is called may still complete;
    the callback must tolerate running after logout.
    """

    def __init__(self, callback: Callable[[], Awaitable[None]], interval: float) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._callback = callback
        self._interval = interval
        self._task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())

    def stop(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            try:
                await self._callback()
            except Exception:
                logger.exception("Token refresh failed")
