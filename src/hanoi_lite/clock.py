"""Periodic asyncio ticker driving a session's elapsed-time counter."""
from __future__ import annotations

import asyncio
import logging
from typing import Optional

from .session import HanoiSession

logger = logging.getLogger(__name__)


class SessionClock:
    """
    Calls ``session.tick()`` every ``interval`` seconds.

    The clock itself never inspects the playing/solving flags; ``tick()``
    checks them in the same synchronous call that increments the counter.
    """

    def __init__(self, session: HanoiSession, interval: Optional[float] = None):
        self.session = session
        self.interval = session.config.tick_interval if interval is None else interval
        self.ticks = 0
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> asyncio.Task:
        """Start ticking on the running event loop (no-op if already running)."""
        if not self.running:
            self._task = asyncio.get_running_loop().create_task(self._run())
            logger.debug("clock started, interval %.3fs", self.interval)
        return self._task

    async def stop(self) -> None:
        if self._task is None:
            return
        task, self._task = self._task, None
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.debug("clock stopped after %d ticks", self.ticks)

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            if self.session.tick():
                self.ticks += 1
