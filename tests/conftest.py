import pytest

from chunkint.chunk import CHUNK_SIZE, Chunk


class AllocationTracker:
    def __init__(self):
        self.allocated = []
        self.released = []

    @property
    def live(self) -> int:
        return len({id(c) for c in self.allocated}) - len({id(c) for c in self.released})


@pytest.fixture
def tracker(monkeypatch):
    """Record every Chunk.allocate and Chunk.release call."""
    tracked = AllocationTracker()
    real_allocate = Chunk.allocate.__func__
    real_release = Chunk.release

    def allocate(cls, capacity=CHUNK_SIZE):
        chunk = real_allocate(cls, capacity)
        tracked.allocated.append(chunk)
        return chunk

    def release(self):
        tracked.released.append(self)
        real_release(self)

    monkeypatch.setattr(Chunk, "allocate", classmethod(allocate))
    monkeypatch.setattr(Chunk, "release", release)
    return tracked
