from __future__ import annotations
import logging
import queue
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)

_STOP = object()


class BackgroundWriter:
    """
    Single worker thread that runs write jobs in submission order.

    submit() never blocks the caller and never raises: a failing job is logged
    and dropped, the next job runs as usual.
    """

    def __init__(self, name: str = "storage-writer"):
        self.name = name
        self.jobs: queue.Queue = queue.Queue()
        self.thread: Optional[threading.Thread] = None
        self._lock = threading.Lock()
        self._closed = False

    def _ensure_thread(self) -> None:
        with self._lock:
            if self.thread is None or not self.thread.is_alive():
                self.thread = threading.Thread(
                    target=self._run, name=self.name, daemon=True)
                self.thread.start()

    def submit(self, job: Callable[[], None]) -> bool:
        if self._closed:
            logger.debug("writer %s closed; dropping job", self.name)
            return False
        self.jobs.put(job)
        self._ensure_thread()
        return True

    def _run(self) -> None:
        while True:
            job = self.jobs.get()
            try:
                if job is _STOP:
                    return
                job()
            except Exception as e:
                logger.warning("background write failed: %s", e)
            finally:
                self.jobs.task_done()

    def flush(self, timeout: Optional[float] = 2.0) -> bool:
        """Wait until every submitted job has run. Returns False on timeout."""
        if self.thread is None:
            return True
        done = threading.Event()

        def _mark():
            done.set()

        if not self.submit(_mark):
            return self.jobs.unfinished_tasks == 0
        return done.wait(timeout)

    def close(self, timeout: Optional[float] = 2.0) -> None:
        if self._closed:
            return
        self.flush(timeout)
        self._closed = True
        if self.thread is not None and self.thread.is_alive():
            self.jobs.put(_STOP)
            self.thread.join(timeout)
        self.thread = None
