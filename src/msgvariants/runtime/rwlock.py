"""Readers-writer lock guarding variant and catalog mappings.

MessageGroup.insert() both reads (duplicate check) and writes, so inserts
are serialized and exclude resolvers. MessageGroup.resolve() is read-only,
so any number of resolvers may run together. The same discipline applies
to MessageCatalog registration and lookup.

Properties:
- Multiple concurrent readers, one exclusive writer
- Writer preference: once a writer waits, new readers queue behind it
- Nested reads on one thread never block (the outer read already holds)
- Optional acquisition timeout (raises TimeoutError)

Read-to-write upgrade, write-to-read downgrade and nested writes raise
RuntimeError. None of the message model write paths need them, and an
upgrade would deadlock against the thread's own read hold.

Python 3.13+.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Generator

__all__ = ["RWLock"]


def _check_timeout(timeout: float | None) -> None:
    if timeout is not None and timeout < 0:
        msg = f"Timeout must be non-negative, got {timeout}"
        raise ValueError(msg)


class RWLock:
    """Readers-writer lock with writer preference.

    Example:
        >>> lock = RWLock()
        >>> with lock.read():
        ...     pass  # lookups
        >>> with lock.write(timeout=1.0):
        ...     pass  # mutation
    """

    __slots__ = ("_condition", "_local", "_readers", "_writer", "_writers_waiting")

    def __init__(self) -> None:
        self._condition = threading.Condition(threading.Lock())
        # Threads holding the read lock (nesting counts once)
        self._readers: int = 0
        # Thread id of the writer, if any
        self._writer: int | None = None
        self._writers_waiting: int = 0
        # Per-thread read nesting depth
        self._local = threading.local()

    def _read_depth(self) -> int:
        return getattr(self._local, "depth", 0)

    def _await(self, ready: Callable[[], bool], timeout: float | None, what: str) -> None:
        # Caller holds self._condition
        if not self._condition.wait_for(ready, timeout=timeout):
            msg = f"Timed out waiting for {what} lock"
            raise TimeoutError(msg)

    @contextmanager
    def read(self, timeout: float | None = None) -> Generator[None]:
        """Hold the lock shared for the duration of the block.

        Args:
            timeout: Seconds to wait; None waits forever, 0.0 does not block.
                Ignored for nested reads.

        Raises:
            RuntimeError: If the thread holds the write lock.
            TimeoutError: If the lock is not acquired in time.
            ValueError: If timeout is negative.
        """
        _check_timeout(timeout)
        depth = self._read_depth()
        if depth == 0:
            with self._condition:
                if self._writer == threading.get_ident():
                    msg = "Cannot acquire read lock while holding write lock"
                    raise RuntimeError(msg)
                self._await(
                    lambda: self._writer is None and self._writers_waiting == 0,
                    timeout,
                    "read",
                )
                self._readers += 1

        self._local.depth = depth + 1
        try:
            yield
        finally:
            self._local.depth = depth
            if depth == 0:
                with self._condition:
                    self._readers -= 1
                    if self._readers == 0:
                        self._condition.notify_all()

    @contextmanager
    def write(self, timeout: float | None = None) -> Generator[None]:
        """Hold the lock exclusively for the duration of the block.

        Args:
            timeout: Seconds to wait; None waits forever, 0.0 does not block.

        Raises:
            RuntimeError: If the thread already holds the read or write lock.
            TimeoutError: If the lock is not acquired in time.
            ValueError: If timeout is negative.
        """
        _check_timeout(timeout)
        if self._read_depth():
            msg = "Cannot upgrade read lock to write lock"
            raise RuntimeError(msg)

        thread_id = threading.get_ident()
        with self._condition:
            if self._writer == thread_id:
                msg = "Cannot acquire write lock: already holding write lock"
                raise RuntimeError(msg)
            self._writers_waiting += 1
            try:
                self._await(
                    lambda: self._writer is None and self._readers == 0,
                    timeout,
                    "write",
                )
            finally:
                self._writers_waiting -= 1
                # Readers queued behind this writer re-check on success or timeout.
                self._condition.notify_all()
            self._writer = thread_id

        try:
            yield
        finally:
            with self._condition:
                self._writer = None
                self._condition.notify_all()

    @property
    def reader_count(self) -> int:
        """Distinct threads currently holding the read lock."""
        with self._condition:
            return self._readers

    @property
    def writer_active(self) -> bool:
        """True if any thread currently holds the write lock."""
        with self._condition:
            return self._writer is not None
