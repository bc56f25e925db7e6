"""Task scheduler port - detached background work."""

from collections.abc import Coroutine
from typing import Any, Protocol


class TaskScheduler(Protocol):
    """Port for running coroutines without awaiting them."""

    def spawn(self, coro: Coroutine[Any, Any, Any], name: str) -> None: ...
