from __future__ import annotations

import weakref
from typing import Iterator

import numpy as np

from .exceptions import AllocationError, InvalidArgument

LIMB_BITS = 32
LIMB_BASE = 1 << LIMB_BITS
LIMB_MASK = LIMB_BASE - 1
HEX_WIDTH = LIMB_BITS // 4

# limbs per chunk unless a BigInt asks for something else
CHUNK_SIZE = 16


class Chunk:
    """
    Fixed-capacity block of uint32 limbs, one link in a BigInt chain.

    ``next`` is the owning forward link. ``prev`` is a weak back-link, so a
    chain is only kept alive from its head.
    """

    __slots__ = ("capacity", "used", "values", "next", "_prev", "__weakref__")

    def __init__(self, capacity: int = CHUNK_SIZE):
        self.capacity = capacity
        self.used = 0
        self.values = np.zeros(capacity, dtype=np.uint32)
        self.next: Chunk | None = None
        self._prev = None

    @classmethod
    def allocate(cls, capacity: int = CHUNK_SIZE) -> Chunk:
        if capacity < 1:
            raise InvalidArgument(f"chunk capacity must be positive, got {capacity}")
        try:
            return cls(capacity)
        except MemoryError as exc:
            raise AllocationError(f"cannot allocate chunk of {capacity} limbs") from exc

    @property
    def prev(self) -> Chunk | None:
        return self._prev() if self._prev is not None else None

    @prev.setter
    def prev(self, chunk: Chunk | None):
        self._prev = weakref.ref(chunk) if chunk is not None else None

    def truncate(self, used: int) -> int:
        """Keep the first ``used`` slots and release every chunk after this one.

        Returns the number of chunks released.
        """
        if not 0 <= used <= self.capacity:
            raise InvalidArgument(f"used count {used} outside 0..{self.capacity}")
        self.used = used

        released = 0
        chunk = self.next
        self.next = None
        while chunk is not None:
            following = chunk.next
            chunk.release()
            released += 1
            chunk = following
        return released

    def release(self):
        self.next = None
        self._prev = None
        self.used = 0
        self.values = None

    def __iter__(self) -> Iterator[int]:
        for i in range(self.used):
            yield int(self.values[i])

    def __repr__(self) -> str:
        return f"Chunk(used={self.used}, capacity={self.capacity}, values={list(self)})"
