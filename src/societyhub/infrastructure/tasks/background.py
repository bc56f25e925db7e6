"""In-process runner for detached background tasks."""

import asyncio
import logging
from collections.abc import Coroutine
from typing import Any

logger = logging.getLogger(__name__)


class BackgroundTaskRunner:
    """Runs coroutines as fire-and-forget asyncio tasks.

    A failing task is logged and dropped. Tasks are not retried and callers
    never see their outcome. ``drain`` waits for in-flight tasks on shutdown.
    """

    def __init__(self) -> None:
        self._tasks: set[asyncio.Task[None]] = set()

    def spawn(self, coro: Coroutine[Any, Any, Any], name: str) -> None:
        """Start ``coro`` on the running loop without awaiting it."""
        task = asyncio.get_running_loop().create_task(self._guard(coro, name), name=name)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _guard(self, coro: Coroutine[Any, Any, Any], name: str) -> None:
        try:
            await coro
        except asyncio.CancelledError:
            logger.warning("Background task %s cancelled", name)
            raise
        except Exception:
            logger.exception("Background task %s failed", name)

    @property
    def pending(self) -> int:
        return len(self._tasks)

    async def drain(self, timeout: float | None = None) -> None:
        """Wait for in-flight tasks; tasks still running after ``timeout`` are cancelled."""
        if not self._tasks:
            return
        done, pending = await asyncio.wait(set(self._tasks), timeout=timeout)
        for task in pending:
            task.cancel()
        if pending:
            logger.warning("Cancelled %d background tasks on drain", len(pending))
            await asyncio.gather(*pending, return_exceptions=True)
