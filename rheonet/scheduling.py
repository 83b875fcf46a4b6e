# Last-writer-wins background recomputation
"""
Inputs (tree edits, slider moves) can arrive faster than a recompute
finishes. LatestOnlyRunner runs each request on a worker thread and adopts
only the result of the most recent submission; anything older that
finishes later is dropped, never merged.

    runner = LatestOnlyRunner(on_result=update_plots)
    runner.submit(compute_responses, tree, params)
"""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class LatestOnlyRunner:
    """Background runner that keeps only the newest submission's result."""

    def __init__(
        self,
        on_result: Optional[Callable[[Any], None]] = None,
        on_error: Optional[Callable[[BaseException], None]] = None,
        max_workers: int = 1,
    ):
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="rheonet")
        self._lock = threading.Lock()
        self._deliver_lock = threading.Lock()
        self._generation = 0
        self._on_result = on_result
        self._on_error = on_error
        self.latest_result: Any = None
        self.latest_generation = 0

    def submit(self, fn: Callable[..., Any], *args, **kwargs) -> Future:
        """Schedule fn(*args, **kwargs); supersedes every earlier submission."""
        with self._lock:
            self._generation += 1
            generation = self._generation
        future = self._executor.submit(fn, *args, **kwargs)
        future.add_done_callback(lambda f: self._finish(generation, f))
        return future

    def is_current(self, generation: int) -> bool:
        with self._lock:
            return generation == self._generation

    def _finish(self, generation: int, future: Future) -> None:
        if future.cancelled():
            return
        error = future.exception()
        # Deliveries are serialized and the generation is re-checked inside,
        # so results reach the consumer in submission order or not at all.
        with self._deliver_lock:
            if not self.is_current(generation):
                logger.debug("Discarding stale result (generation %d)", generation)
                return
            if error is not None:
                logger.error("Recompute failed: %s", error)
                if self._on_error is not None:
                    self._on_error(error)
                return
            self.latest_result = future.result()
            self.latest_generation = generation
            if self._on_result is not None:
                self._on_result(self.latest_result)

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> "LatestOnlyRunner":
        return self

    def __exit__(self, *exc) -> None:
        self.shutdown(wait=True)
