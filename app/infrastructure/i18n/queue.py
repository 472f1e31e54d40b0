"""Sequential async job queue.

Jobs are processed one at a time, in submission order, by a single worker
task running on the event loop of the first submitter.
"""

import asyncio
from typing import Any, Awaitable, Callable, Optional, Tuple

from infrastructure.logging import get_module_logger

logger = get_module_logger()

Job = Callable[[], Awaitable[Any]]


class SequentialQueue:
    """FIFO queue of coroutine jobs with at most one job running at a time.

    Each submission returns a future resolved with the job's result. A job
    that raises only fails its own future; the worker moves on to the next
    job.

    Attributes:
        name: Label used in log events and the worker task name.
    """

    def __init__(self, name: str = "sequential"):
        self.name = name
        self._queue: Optional["asyncio.Queue[Tuple[Job, asyncio.Future]]"] = None
        self._worker: Optional[asyncio.Task] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def size(self) -> int:
        """Number of jobs waiting to start."""
        return self._queue.qsize() if self._queue is not None else 0

    def enqueue(self, job: Job) -> asyncio.Future:
        """Append job to the queue.

        Must be called from a running event loop.

        Args:
            job: Zero-argument coroutine function.

        Returns:
            Future resolved with the job's result (or its exception).

        Raises:
            RuntimeError: If the queue is closed or no event loop is running.
        """
        if self._closed:
            raise RuntimeError(f"Queue {self.name!r} is closed")

        loop = asyncio.get_running_loop()
        self._ensure_worker(loop)

        future = loop.create_future()
        self._queue.put_nowait((job, future))
        return future

    async def join(self) -> None:
        """Wait until every job submitted so far has finished."""
        if self._queue is None:
            return
        await self._queue.join()

    def close(self) -> None:
        """Stop the worker and cancel jobs that have not started."""
        if self._closed:
            return
        self._closed = True

        if self._worker is not None and not self._worker.done():
            self._worker.cancel()

        cancelled = 0
        if self._queue is not None:
            while not self._queue.empty():
                _, future = self._queue.get_nowait()
                future.cancel()
                self._queue.task_done()
                cancelled += 1

        logger.debug("sequential_queue_closed", queue=self.name, cancelled=cancelled)

    def _ensure_worker(self, loop: asyncio.AbstractEventLoop) -> None:
        if self._loop is not loop:
            # Queue and worker are bound to a single loop
            self._loop = loop
            self._queue = asyncio.Queue()
            self._worker = None

        if self._worker is None or self._worker.done():
            self._worker = loop.create_task(
                self._run(), name=f"{self.name}-queue-worker"
            )

    async def _run(self) -> None:
        queue = self._queue
        while True:
            job, future = await queue.get()
            try:
                if future.cancelled():
                    continue
                try:
                    result = await job()
                except asyncio.CancelledError:
                    future.cancel()
                    raise
                except Exception as e:
                    if not future.done():
                        future.set_exception(e)
                else:
                    if not future.done():
                        future.set_result(result)
            finally:
                queue.task_done()
