# tests/test_rwlock.py
"""
Read/Write Lock Tests - Unit Tests for ReadWriteLock

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- cambio.shared.rwlock (ReadWriteLock)
- pytest (testing framework)
"""
import threading  # Threads contending for the lock
import time  # Short waits to let contenders block

import pytest  # Testing framework for writing and running tests

from cambio.shared.rwlock import ReadWriteLock


class TestReadWriteLock:
    def test_readers_share_the_lock(self):
        lock = ReadWriteLock()
        barrier = threading.Barrier(3, timeout=5)
        seen = []

        def reader():
            with lock.read_locked():
                barrier.wait()  # all three readers inside at once
                seen.append(lock.readers)

        threads = [threading.Thread(target=reader) for _ in range(3)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=5)

        assert seen and max(seen) == 3
        assert lock.readers == 0

    def test_writer_waits_for_readers(self):
        lock = ReadWriteLock()
        order = []
        lock.acquire_read()

        def writer():
            with lock.write_locked():
                order.append("writer")

        t = threading.Thread(target=writer)
        t.start()
        time.sleep(0.1)
        order.append("reader done")
        lock.release_read()
        t.join(timeout=5)

        assert order == ["reader done", "writer"]

    def test_readers_wait_for_writer(self):
        lock = ReadWriteLock()
        order = []
        lock.acquire_write()

        def reader():
            with lock.read_locked():
                order.append("reader")

        t = threading.Thread(target=reader)
        t.start()
        time.sleep(0.1)
        order.append("writer done")
        lock.release_write()
        t.join(timeout=5)

        assert order == ["writer done", "reader"]

    def test_waiting_writer_blocks_new_readers(self):
        lock = ReadWriteLock()
        order = []
        lock.acquire_read()

        def writer():
            with lock.write_locked():
                order.append("writer")

        def late_reader():
            with lock.read_locked():
                order.append("late reader")

        w = threading.Thread(target=writer)
        w.start()
        time.sleep(0.1)
        r = threading.Thread(target=late_reader)
        r.start()
        time.sleep(0.1)
        lock.release_read()
        w.join(timeout=5)
        r.join(timeout=5)

        assert order == ["writer", "late reader"]

    def test_write_held_flag(self):
        lock = ReadWriteLock()
        assert lock.write_held is False
        with lock.write_locked():
            assert lock.write_held is True
        assert lock.write_held is False

    def test_unbalanced_release_raises(self):
        lock = ReadWriteLock()
        with pytest.raises(RuntimeError):
            lock.release_read()
        with pytest.raises(RuntimeError):
            lock.release_write()
