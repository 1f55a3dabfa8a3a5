from __future__ import annotations

from typing import TYPE_CHECKING

from .chunk import LIMB_BITS, LIMB_MASK
from .cursor import Cursor, iterate
from .exceptions import InvalidArgument
from .logging import ADD, get_logger

if TYPE_CHECKING:
    from .bigint import BigInt

logger = get_logger(__name__)


class LimbEngine:
    """Limb-at-a-time arithmetic over BigInt chains, driven through cursors."""

    def add(self, left: BigInt, right: BigInt) -> BigInt:
        """In-place ``left += right``; returns ``left``.

        ``right`` is only read. It may be the same object as ``left``.
        """
        if left is None or right is None:
            raise InvalidArgument(
                "add() needs two BigInts, got "
                f"{'None' if left is None else 'BigInt'} + {'None' if right is None else 'BigInt'}"
            )
        left._check_alive()
        right._check_alive()

        if left is right:
            # the destination grows while we read it; add from a snapshot
            right = right.copy()

        logger.debug(f"{ADD} {len(left)} chunks += {len(right)} chunks")

        lc = iterate(left)
        rc = iterate(right)
        if lc.exhausted:
            lc.chunk = left.extend()
            lc.index = 0

        carry = 0
        while not rc.exhausted:
            lv = lc.get()
            rv = rc.get()

            # carry is whatever overflowed the limb width
            total = carry + lv + rv
            carry = total >> LIMB_BITS

            lc.set(total & LIMB_MASK)
            lc.step_with_extend()
            rc.step()

        if carry:
            self._propagate_carry(lc, carry)

        return left

    def _propagate_carry(self, cursor: Cursor, carry: int):
        steps = 0
        while carry:
            total = (carry + cursor.get()) & LIMB_MASK
            cursor.set(total)
            if total:
                carry = 0
            else:
                cursor.step_with_extend()
                steps += 1
        logger.debug(f"{ADD} trailing carry absorbed after {steps} extra limbs")
