"""Directory-scoped cross-process lock.

Every plugin invocation working on a network directory takes the same
exclusive advisory lock, held on a lock file inside that directory. Reads
and writes are serialized alike; there are no shared readers.
"""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from typing import Generator

from filelock import FileLock

from macstore.config import settings

logger = logging.getLogger(__name__)


class DirectoryLock:
    """Exclusive lock over a store directory.

    Acquisition blocks until the lock is free; there is no timeout.
    """

    def __init__(self, directory: str | os.PathLike, lock_file_name: str | None = None):
        self.directory = os.fspath(directory)
        self.lock_path = os.path.join(
            self.directory, lock_file_name or settings.lock_file_name
        )
        # Created up front so lock acquisition never adds a directory entry
        fd = os.open(self.lock_path, os.O_WRONLY | os.O_CREAT, settings.record_mode)
        os.close(fd)
        self._lock = FileLock(self.lock_path)

    @property
    def is_locked(self) -> bool:
        return self._lock.is_locked

    def lock(self) -> None:
        self._lock.acquire(timeout=-1)
        logger.debug(f"Acquired store lock {self.lock_path}")

    def unlock(self) -> None:
        self._lock.release()
        logger.debug(f"Released store lock {self.lock_path}")

    @contextmanager
    def held(self) -> Generator[None, None, None]:
        """Hold the lock for the body of a with-block.

        The lock is released however the body exits.
        """
        self.lock()
        try:
            yield
        finally:
            self.unlock()
