from interner.sync.rwlock import ReadWriteLock

__all__ = ["ReadWriteLock"]
