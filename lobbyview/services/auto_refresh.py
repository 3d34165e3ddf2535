"""
auto_refresh.py - Auto-refresh timer
Single responsibility: run a refresh callback on a fixed interval, cancelably.
"""
import asyncio
import logging
from typing import Awaitable, Callable, Optional

from lobbyview.config import AUTO_REFRESH_INTERVAL_MS

logger = logging.getLogger(__name__)


def _spawn_on_running_loop(coro_fn, *args):
    return asyncio.get_running_loop().create_task(coro_fn(*args))


class AutoRefresher:
    """
    At most one timer is alive: start() cancels any existing handle first.

    `spawn` schedules a coroutine function and returns a handle with
    cancel()/done(); in the app this is flet's page.run_task.
    """

    def __init__(
        self,
        callback: Callable[[], Awaitable[None]],
        interval_ms: int = AUTO_REFRESH_INTERVAL_MS,
        spawn: Optional[Callable] = None,
    ):
        self.callback = callback
        self.interval_ms = interval_ms
        self._spawn = spawn or _spawn_on_running_loop
        self._handle = None

    @property
    def running(self) -> bool:
        return self._handle is not None and not self._handle.done()

    async def _loop(self):
        interval = self.interval_ms / 1000
        while True:
            try:
                await asyncio.sleep(interval)
            except asyncio.CancelledError:
                return
            try:
                await self.callback()
            except asyncio.CancelledError:
                return
            except Exception:
                logger.exception("Auto-refresh tick failed")

    def start(self) -> None:
        self.stop()
        logger.info("Auto-refresh every %d ms", self.interval_ms)
        self._handle = self._spawn(self._loop)

    def stop(self) -> None:
        if self._handle is not None:
            if not self._handle.done():
                self._handle.cancel()
            logger.info("Auto-refresh stopped")
        self._handle = None

    def set_enabled(self, enabled: bool) -> None:
        if enabled:
            self.start()
        else:
            self.stop()
