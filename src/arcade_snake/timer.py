"""Re-schedulable repeating timers that drive the tick loop."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Protocol

logger = logging.getLogger(__name__)


class TickTimer(Protocol):
    """A repeating timer whose interval can be changed between firings."""

    @property
    def running(self) -> bool: ...

    @property
    def interval_ms(self) -> int | None: ...

    def start(self, interval_ms: int) -> None: ...

    def stop(self) -> None: ...

    def restart(self, interval_ms: int) -> None: ...


class AsyncioTickTimer:
    """Calls *callback* every ``interval_ms`` on the running event loop.

    Each schedule is one asyncio task. ``start`` replaces any existing
    schedule, and ``stop``/``restart`` may be called from inside the
    callback itself.
    """

    def __init__(self, callback: Callable[[], None]) -> None:
        self._callback = callback
        self._task: asyncio.Task | None = None
        self._interval_ms: int | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def interval_ms(self) -> int | None:
        return self._interval_ms

    def start(self, interval_ms: int) -> None:
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive.")
        self.stop()
        self._interval_ms = interval_ms
        self._task = asyncio.get_running_loop().create_task(
            self._run(interval_ms / 1000.0),
        )
        logger.debug("Tick timer scheduled every %d ms.", interval_ms)

    def stop(self) -> None:
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()
            logger.debug("Tick timer stopped.")

    def restart(self, interval_ms: int) -> None:
        self.stop()
        self.start(interval_ms)

    async def _run(self, interval: float) -> None:
        me = asyncio.current_task()
        try:
            while self._task is me:
                await asyncio.sleep(interval)
                self._callback()
        except asyncio.CancelledError:
            pass
        except Exception:
            logger.exception("Tick callback failed; stopping timer.")
            if self._task is me:
                self._task = None
