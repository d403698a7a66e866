"""Bounded pool of reusable text buffers for rendering."""

import io
import threading
from contextlib import contextmanager
from typing import Iterator, List


class BufferPool:
    """
    Keeps up to `max_size` idle StringIO buffers.

    Use `borrow()`; the buffer is returned to the pool when the block exits,
    whether normally or through an exception.
    """

    def __init__(self, max_size: int = 8):
        self.max_size = max_size
        self._idle: List[io.StringIO] = []
        self._lock = threading.Lock()

    def acquire(self) -> io.StringIO:
        with self._lock:
            buf = self._idle.pop() if self._idle else None
        if buf is None:
            return io.StringIO()
        buf.seek(0)
        buf.truncate(0)
        return buf

    def release(self, buf: io.StringIO) -> None:
        with self._lock:
            if len(self._idle) < self.max_size:
                self._idle.append(buf)

    @contextmanager
    def borrow(self) -> Iterator[io.StringIO]:
        buf = self.acquire()
        try:
            yield buf
        finally:
            self.release(buf)

    @property
    def idle_count(self) -> int:
        with self._lock:
            return len(self._idle)
