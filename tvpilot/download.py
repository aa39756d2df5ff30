"""Queue of show downloads served by a pool of worker threads."""

from __future__ import annotations

import logging
import threading
from collections import deque
from typing import Callable, Deque, List, Optional

NUM_WORKER_THREADS = 4

Fetch = Callable[[str], str]
ResultHandler = Callable[[str, Optional[str], Optional[BaseException]], None]
CompleteHandler = Callable[[], None]

_log = logging.getLogger(__name__)


class DownloadManager:
    """Downloads show pages in the background.

    ``fetch(url)`` retrieves one page. After every URL,
    ``on_result(url, page, error)`` is called with either the page or the
    exception that ``fetch`` raised. Once the queue is empty and no worker
    is busy, ``on_complete()`` is called.
    """

    def __init__(
        self,
        fetch: Fetch,
        on_result: Optional[ResultHandler] = None,
        on_complete: Optional[CompleteHandler] = None,
        workers: int = NUM_WORKER_THREADS,
    ) -> None:
        if workers < 1:
            raise ValueError("workers must be at least 1")
        self._fetch = fetch
        self._on_result = on_result
        self._on_complete = on_complete
        self._condition = threading.Condition()
        self._pending: Deque[str] = deque()
        self._busy = 0
        self._closed = False
        self._threads: List[threading.Thread] = [
            threading.Thread(target=self._worker, name=f"slot-{number}", daemon=True)
            for number in range(workers)
        ]
        for thread in self._threads:
            thread.start()

    def download_show(self, url: str) -> None:
        """Queue ``url`` for download."""
        with self._condition:
            if self._closed:
                raise RuntimeError("download manager is closed")
            self._pending.append(url)
            self._condition.notify()

    def in_progress(self) -> bool:
        """True while URLs are queued or a worker is downloading."""
        with self._condition:
            return bool(self._pending) or self._busy > 0

    def abort(self) -> int:
        """Drop every queued URL; downloads already running finish.

        Returns the number of URLs dropped.
        """
        with self._condition:
            dropped = len(self._pending)
            self._pending.clear()
            return dropped

    def close(self) -> None:
        """Stop the workers, discarding queued URLs, and wait for them."""
        with self._condition:
            self._closed = True
            self._pending.clear()
            self._condition.notify_all()
        for thread in self._threads:
            if thread is not threading.current_thread():
                thread.join()

    def __enter__(self) -> "DownloadManager":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def _next_url(self) -> Optional[str]:
        with self._condition:
            while not self._pending and not self._closed:
                self._condition.wait()
            if self._closed:
                return None
            self._busy += 1
            return self._pending.popleft()

    def _worker(self) -> None:
        while True:
            url = self._next_url()
            if url is None:
                return
            try:
                self._process(url)
            finally:
                with self._condition:
                    self._busy -= 1
                    finished = self._busy == 0 and not self._pending and not self._closed
            if finished and self._on_complete is not None:
                try:
                    self._on_complete()
                except Exception:
                    _log.exception("download completion handler failed")

    def _process(self, url: str) -> None:
        page: Optional[str] = None
        error: Optional[BaseException] = None
        try:
            page = self._fetch(url)
        except Exception as exc:
            error = exc
        if self._on_result is not None:
            try:
                self._on_result(url, page, error)
            except Exception:
                _log.exception("download result handler failed for %s", url)