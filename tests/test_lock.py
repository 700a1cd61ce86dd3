"""Tests for the advisory sample lock."""
import os

import pytest

from sampler.core.errors import LockError
from sampler.core.lock import SampleLock, sample_lock


class TestSampleLock:

    def test_acquire_and_release(self, tmp_path):
        lock_file = tmp_path / "test.lock"
        lock = SampleLock(lock_file=lock_file)

        assert lock.acquire() is True
        assert lock_file.exists()

        lock.release()
        assert not lock_file.exists()

    def test_concurrent_lock_fails(self, tmp_path):
        lock_file = tmp_path / "test.lock"

        lock1 = SampleLock(lock_file=lock_file, timeout=0)
        lock1.acquire()

        lock2 = SampleLock(lock_file=lock_file, timeout=0)
        with pytest.raises(LockError) as exc_info:
            lock2.acquire()

        assert "Another sampler operation is in progress" in str(exc_info.value)
        assert f"PID {os.getpid()}" in str(exc_info.value)

        lock1.release()

    def test_context_manager(self, tmp_path):
        lock_file = tmp_path / "test.lock"

        with SampleLock(lock_file=lock_file):
            assert lock_file.exists()

        assert not lock_file.exists()

    def test_lock_timeout(self, tmp_path):
        lock_file = tmp_path / "test.lock"
        lock1 = SampleLock(lock_file=lock_file)
        lock1.acquire()

        with pytest.raises(LockError, match="Timeout waiting for lock"):
            SampleLock(lock_file=lock_file, timeout=1).acquire()

        lock1.release()


def test_sample_lock_helper(tmp_path):
    with sample_lock(tmp_path / "locks", "create"):
        assert (tmp_path / "locks" / "create.lock").exists()
    assert not (tmp_path / "locks" / "create.lock").exists()
