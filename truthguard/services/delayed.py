import asyncio
import logging
from typing import Callable, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')


class DelayedAnalysis(Generic[T]):
    """Run ``compute`` after a fixed delay on the running event loop.

    The delay only simulates analysis latency; the computation itself is
    synchronous. Once scheduled the analysis runs to completion unless
    ``cancel()`` is called. ``on_complete`` receives the computed value;
    ``on_abort`` is called instead when the task is cancelled or
    ``compute`` raises. Awaiting the object returns the computed value.
    """

    def __init__(
        self,
        delay: float,
        compute: Callable[[], T],
        on_complete: Optional[Callable[[T], None]] = None,
        on_abort: Optional[Callable[[], None]] = None,
        name: Optional[str] = None,
    ):
        self.delay = max(0.0, delay)
        self._compute = compute
        self._on_complete = on_complete
        self._on_abort = on_abort
        self._task = asyncio.get_running_loop().create_task(self._run(), name=name)
        self._task.add_done_callback(self._finished)

    async def _run(self) -> T:
        await asyncio.sleep(self.delay)
        result = self._compute()
        if self._on_complete is not None:
            self._on_complete(result)
        return result

    def _finished(self, task: asyncio.Task) -> None:
        if task.cancelled():
            logger.debug(f"Delayed analysis {task.get_name()} cancelled")
        elif task.exception() is not None:
            logger.error(
                f"Delayed analysis {task.get_name()} failed",
                exc_info=task.exception(),
            )
        else:
            return
        if self._on_abort is not None:
            self._on_abort()

    @property
    def done(self) -> bool:
        return self._task.done()

    @property
    def cancelled(self) -> bool:
        return self._task.cancelled()

    def cancel(self) -> bool:
        """Cancel the pending analysis; returns False if it already finished"""
        return self._task.cancel()

    def __await__(self):
        return self._task.__await__()
