from __future__ import annotations

import numbers
import operator
from typing import Iterable, Iterator

from .chunk import CHUNK_SIZE, Chunk
from .core import LimbEngine
from .exceptions import InvalidArgument
from .logging import CHAIN, get_logger
from .utils import check_limbs, int_to_limbs, limb_to_hex, limbs_to_int

logger = get_logger(__name__)

_shared_engine = LimbEngine()


class BigInt:
    """
    Unsigned arbitrary-precision integer stored as a chain of limb chunks.

    The head chunk holds the least-significant limbs. A BigInt owns its
    chunks exclusively and is not safe for concurrent mutation.
    """

    def __init__(self, capacity: int = CHUNK_SIZE):
        chunk = Chunk.allocate(capacity)
        chunk.used = 1

        self.capacity = capacity
        self.head: Chunk | None = chunk
        self.tail: Chunk | None = chunk
        self.chunk_count = 1

    @classmethod
    def from_limbs(cls, limbs: Iterable[int], capacity: int = CHUNK_SIZE) -> BigInt:
        obj = cls(capacity)
        obj.load(limbs)
        return obj

    @classmethod
    def from_int(cls, value: int, capacity: int = CHUNK_SIZE) -> BigInt:
        return cls.from_limbs(int_to_limbs(value), capacity)

    # ---- chain bookkeeping ----

    def _check_alive(self):
        if self.head is None:
            raise InvalidArgument("BigInt has been destroyed")

    def __len__(self) -> int:
        return self.chunk_count

    def chunks(self) -> Iterator[Chunk]:
        chunk = self.head
        while chunk is not None:
            yield chunk
            chunk = chunk.next

    def limbs(self) -> list[int]:
        return [v for chunk in self.chunks() for v in chunk]

    def append(self, chunk: Chunk):
        self._check_alive()
        chunk.prev = self.tail
        chunk.next = None
        self.tail.next = chunk
        self.tail = chunk
        self.chunk_count += 1

    def extend(self) -> Chunk:
        """Append a fresh chunk holding a single zero limb and return it.

        A partially-filled tail is never topped up: growth past the last used
        limb always starts a new chunk.
        """
        chunk = Chunk.allocate(self.capacity)
        chunk.used = 1
        self.append(chunk)
        return chunk

    # ---- lifecycle ----

    def load(self, limbs: Iterable[int]):
        """Replace the value with ``limbs``, least-significant first."""
        self._check_alive()
        values = check_limbs(limbs)

        count = len(values)
        # a chain is never empty; zero limbs still keeps the head chunk
        needed = max(1, -(-count // self.capacity))
        fresh = [Chunk.allocate(self.capacity) for _ in range(needed - self.chunk_count)]

        if self.chunk_count > needed:
            cutoff = self.head
            for _ in range(needed - 1):
                cutoff = cutoff.next
            released = cutoff.truncate(cutoff.used)
            self.tail = cutoff
            self.chunk_count = needed
            logger.debug(f"{CHAIN} load trimmed {released} chunks")

        for chunk in fresh:
            self.append(chunk)
        if fresh:
            logger.debug(f"{CHAIN} load appended {len(fresh)} chunks")

        pos = 0
        for chunk in self.chunks():
            n = min(self.capacity, count - pos)
            chunk.values[:n] = values[pos:pos + n]
            chunk.values[n:] = 0
            chunk.used = n
            pos += n

    def clear(self):
        """Reset to the value a fresh BigInt holds: one chunk, one zero limb."""
        self._check_alive()
        released = self.head.truncate(1)
        self.head.values[:] = 0
        self.tail = self.head
        self.chunk_count = 1
        if released:
            logger.debug(f"{CHAIN} clear released {released} chunks")

    def copy(self) -> BigInt:
        """Independent BigInt with the same value and the same chunk layout."""
        self._check_alive()
        dup = BigInt(self.capacity)
        target = dup.head
        for i, chunk in enumerate(self.chunks()):
            if i:
                target = Chunk.allocate(self.capacity)
                dup.append(target)
            target.values[:] = chunk.values
            target.used = chunk.used
        return dup

    def destroy(self):
        """Release every chunk. Destroying twice is harmless."""
        chunk = self.head
        while chunk is not None:
            following = chunk.next
            chunk.release()
            chunk = following

        self.head = None
        self.tail = None
        self.chunk_count = 0

    # ---- values ----

    def to_int(self) -> int:
        self._check_alive()
        return limbs_to_int(self.limbs())

    def to_string(self) -> str | None:
        """Raw hex dump: every used limb in chain order, 8 hex digits each.

        A destroyed BigInt has nothing to dump and gives None.
        """
        if self.head is None:
            return None
        return "".join(limb_to_hex(v) for chunk in self.chunks() for v in chunk)

    def add(self, other: BigInt) -> BigInt:
        return _shared_engine.add(self, other)

    def _coerce(self, other) -> BigInt | None:
        if isinstance(other, BigInt):
            return other
        if isinstance(other, numbers.Integral) and not isinstance(other, bool):
            return BigInt.from_int(operator.index(other), self.capacity)
        return None

    def __iadd__(self, other) -> BigInt:
        arg = self._coerce(other)
        if arg is None:
            return NotImplemented
        return _shared_engine.add(self, arg)

    def __add__(self, other) -> BigInt:
        arg = self._coerce(other)
        if arg is None:
            return NotImplemented
        return _shared_engine.add(self.copy(), arg)

    def __radd__(self, other) -> BigInt:
        arg = self._coerce(other)
        if arg is None:
            return NotImplemented
        return _shared_engine.add(arg, self)

    def __str__(self) -> str:
        return self.to_string() or ""

    def __repr__(self) -> str:
        if self.head is None:
            return "BigInt(<destroyed>)"
        return f"BigInt({self.to_int()})"


# ---- null-tolerant functional surface ----

def create(capacity: int = CHUNK_SIZE) -> BigInt:
    return BigInt(capacity)


def destroy(obj: BigInt | None):
    if obj is not None:
        obj.destroy()


def length(obj: BigInt | None) -> int:
    if obj is None:
        return 0
    return len(obj)


def load(obj: BigInt | None, limbs: Iterable[int]):
    if obj is None:
        raise InvalidArgument("cannot load into a missing BigInt")
    obj.load(limbs)


def to_string(obj: BigInt | None) -> str | None:
    if obj is None:
        return None
    return obj.to_string()


def add(left: BigInt | None, right: BigInt | None) -> BigInt:
    return _shared_engine.add(left, right)
