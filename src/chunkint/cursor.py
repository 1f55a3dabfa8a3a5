from __future__ import annotations

from typing import TYPE_CHECKING

from .chunk import Chunk, LIMB_MASK
from .exceptions import CursorExhaustedError, InvalidArgument
from .logging import CURSOR, get_logger

if TYPE_CHECKING:
    from .bigint import BigInt

logger = get_logger(__name__)


class Cursor:
    """
    Position over the limbs of one BigInt, least-significant first.

    A cursor never rests on an empty chunk. Once it runs off the chain it is
    exhausted and reads as an endless run of zero limbs. Only one cursor may
    mutate a given BigInt at a time, because ``step_with_extend`` appends to
    the chain behind any other cursor's back.
    """

    def __init__(self, owner: BigInt):
        if owner is None:
            raise InvalidArgument("cannot iterate over a missing BigInt")
        self.owner = owner
        self.chunk: Chunk | None = owner.head
        self.index = 0
        self._skip_empty()

    @property
    def exhausted(self) -> bool:
        return self.chunk is None

    def _skip_empty(self):
        while self.chunk is not None and self.chunk.used == 0:
            self.chunk = self.chunk.next

    def step(self) -> bool:
        """Advance one limb. Returns False once the cursor is exhausted."""
        if self.chunk is None:
            return False

        self.index += 1
        if self.index >= self.chunk.used:
            self.index = 0
            self.chunk = self.chunk.next
            self._skip_empty()

        return self.chunk is not None

    def step_with_extend(self):
        """Advance one limb, growing the owner when stepping past its end.

        Always leaves the cursor on a writable slot holding zero.
        """
        if not self.step():
            self.chunk = self.owner.extend()
            self.index = self.chunk.used - 1
            logger.debug(f"{CURSOR} extended owner to {len(self.owner)} chunks")
        return self

    def get(self) -> int:
        if self.chunk is None:
            return 0
        return int(self.chunk.values[self.index])

    def set(self, value: int):
        if self.chunk is None:
            raise CursorExhaustedError("cursor is past the end of its chain; extend before writing")
        if not 0 <= value <= LIMB_MASK:
            raise InvalidArgument(f"limb value outside 0..{LIMB_MASK:#x}: {value}")
        self.chunk.values[self.index] = value
        return self

    def __repr__(self) -> str:
        if self.chunk is None:
            return "Cursor(exhausted)"
        return f"Cursor(index={self.index}, chunk={self.chunk!r})"


def iterate(owner: BigInt | None) -> Cursor | None:
    """Cursor over ``owner``, or None when there is no BigInt to walk."""
    if owner is None:
        return None
    return Cursor(owner)
