"""Advisory locking for samples.

Two invocations sharing a cache folder or a profile ledger are not safe to
run concurrently. The CLI takes this lock around a whole create run.
"""
import fcntl
import os
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Optional

from sampler.core.errors import LockError
from sampler.core.logger import get_logger

logger = get_logger(__name__)


class SampleLock:
    """File-based lock guarding the sample cache and profile ledger."""

    def __init__(self, lock_file: Path, timeout: int = 0):
        """Initialize lock.

        Args:
            lock_file: Path to lock file
            timeout: Seconds to wait for lock (0 = fail immediately)
        """
        self.lock_file = Path(lock_file)
        self.timeout = timeout
        self.lock_fd = None

    def acquire(self) -> bool:
        """Acquire the lock.

        Returns:
            True if lock acquired successfully

        Raises:
            LockError: If unable to acquire lock
        """
        self.lock_file.parent.mkdir(parents=True, exist_ok=True)

        # Append mode keeps the holder's info readable until we own the lock
        self.lock_fd = open(self.lock_file, 'a+')

        start_time = time.time()
        while True:
            try:
                fcntl.flock(self.lock_fd.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)

                self.lock_fd.seek(0)
                self.lock_fd.truncate()
                self.lock_fd.write(f"{os.getpid()}\n")
                self.lock_fd.write(f"{time.strftime('%Y-%m-%d %H:%M:%S')}\n")
                self.lock_fd.flush()

                logger.debug(f"Acquired lock: {self.lock_file}")
                return True

            except OSError:
                lock_info = self._read_lock_info()
                if self.timeout == 0:
                    self._close()
                    raise LockError(
                        f"Another sampler operation is in progress.\n"
                        f"Lock held by PID {lock_info['pid']} since {lock_info['time']}\n"
                        f"Wait for the other operation to complete, or remove {self.lock_file} if stale."
                    )

                if time.time() - start_time >= self.timeout:
                    self._close()
                    raise LockError(
                        f"Timeout waiting for lock after {self.timeout}s.\n"
                        f"Lock held by PID {lock_info['pid']} since {lock_info['time']}"
                    )

                time.sleep(0.5)

    def _close(self):
        if self.lock_fd is not None:
            self.lock_fd.close()
            self.lock_fd = None

    def release(self):
        """Release the lock."""
        if self.lock_fd is None:
            return

        try:
            fcntl.flock(self.lock_fd.fileno(), fcntl.LOCK_UN)
            logger.debug(f"Released lock: {self.lock_file}")
        except OSError as e:
            logger.warning(f"Error releasing lock: {e}")
        finally:
            self._close()

        try:
            if self.lock_file.exists():
                self.lock_file.unlink()
        except OSError as e:
            logger.warning(f"Error removing lock file: {e}")

    def _read_lock_info(self) -> dict:
        """Read info from lock file about who holds it."""
        try:
            with open(self.lock_file) as f:
                lines = f.readlines()
                if len(lines) >= 2:
                    return {
                        'pid': lines[0].strip(),
                        'time': lines[1].strip()
                    }
        except OSError:
            pass

        return {'pid': 'unknown', 'time': 'unknown'}

    def __enter__(self):
        self.acquire()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.release()
        return False


@contextmanager
def sample_lock(lock_dir: Path, name: str = "sampler", timeout: int = 0):
    """Hold a named lock for the duration of the block.

    Usage:
        with sample_lock(config.config_dir / "locks"):
            ...

    Raises:
        LockError: If unable to acquire lock
    """
    lock = SampleLock(lock_file=Path(lock_dir) / f"{name}.lock", timeout=timeout)
    try:
        lock.acquire()
        yield lock
    finally:
        lock.release()
