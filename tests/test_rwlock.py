import threading
import time

import pytest

from interner.sync.rwlock import ReadWriteLock


def test_readers_share_the_lock():
    lock = ReadWriteLock()
    n_readers = 4
    inside = threading.Barrier(n_readers, timeout=5)
    broken = []

    def reader():
        with lock.read():
            # Times out unless all readers are inside together
            try:
                inside.wait()
            except threading.BrokenBarrierError:
                broken.append(True)

    threads = [threading.Thread(target=reader) for _ in range(n_readers)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=5)
    assert not any(t.is_alive() for t in threads)
    assert broken == []
    assert lock.readers == 0


def test_writer_waits_for_readers():
    lock = ReadWriteLock()
    events = []
    reader_in = threading.Event()
    release_reader = threading.Event()

    def reader():
        with lock.read():
            reader_in.set()
            release_reader.wait(timeout=5)
            events.append("reader-out")

    def writer():
        with lock.write():
            events.append("writer-in")

    r = threading.Thread(target=reader)
    r.start()
    reader_in.wait(timeout=5)
    w = threading.Thread(target=writer)
    w.start()
    time.sleep(0.05)
    assert events == []
    release_reader.set()
    r.join(timeout=5)
    w.join(timeout=5)
    assert events == ["reader-out", "writer-in"]


def test_writer_excludes_readers_and_writers():
    lock = ReadWriteLock()
    active = []
    violations = []
    state_lock = threading.Lock()

    def enter(kind):
        with state_lock:
            if "w" in active or (kind == "w" and active):
                violations.append(list(active) + [kind])
            active.append(kind)

    def leave(kind):
        with state_lock:
            active.remove(kind)

    def reader():
        for _ in range(200):
            with lock.read():
                enter("r")
                leave("r")

    def writer():
        for _ in range(200):
            with lock.write():
                enter("w")
                leave("w")

    threads = [threading.Thread(target=reader) for _ in range(4)]
    threads += [threading.Thread(target=writer) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=10)
    assert violations == []


def test_waiting_writer_blocks_new_readers():
    lock = ReadWriteLock()
    lock.acquire_read()
    writer_done = threading.Event()
    second_reader_done = threading.Event()

    def writer():
        with lock.write():
            writer_done.set()

    def late_reader():
        with lock.read():
            second_reader_done.set()

    w = threading.Thread(target=writer)
    w.start()
    # Give the writer time to start waiting
    time.sleep(0.05)
    r = threading.Thread(target=late_reader)
    r.start()
    time.sleep(0.05)
    assert not second_reader_done.is_set()
    lock.release_read()
    w.join(timeout=5)
    r.join(timeout=5)
    assert writer_done.is_set()
    assert second_reader_done.is_set()


def test_lock_released_on_exception():
    lock = ReadWriteLock()
    with pytest.raises(KeyError):
        with lock.write():
            raise KeyError("boom")
    assert not lock.write_locked
    with pytest.raises(KeyError):
        with lock.read():
            raise KeyError("boom")
    assert lock.readers == 0
    with lock.write():
        assert lock.write_locked


def test_unbalanced_release_raises():
    lock = ReadWriteLock()
    with pytest.raises(RuntimeError):
        lock.release_read()
    with pytest.raises(RuntimeError):
        lock.release_write()
