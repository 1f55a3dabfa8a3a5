import operator
from typing import Iterable

import numpy as np

from .chunk import HEX_WIDTH, LIMB_BITS, LIMB_MASK
from .exceptions import InvalidArgument


def int_to_limbs(n: int) -> np.ndarray:
    """Convert a non-negative Python int to a uint32 limb array (little-endian)."""
    if n < 0:
        raise InvalidArgument(f"unsigned value required, got {n}")
    if n == 0:
        return np.array([0], dtype=np.uint32)

    # go through hex; cheapest split for very large ints
    hex_s = format(n, "x")
    pad_len = (HEX_WIDTH - len(hex_s) % HEX_WIDTH) % HEX_WIDTH
    hex_s = hex_s.zfill(len(hex_s) + pad_len)

    limbs = [int(hex_s[i:i + HEX_WIDTH], 16) for i in range(0, len(hex_s), HEX_WIDTH)]
    # most-significant group comes first in the hex string
    return np.array(limbs[::-1], dtype=np.uint32)


def limbs_to_int(limbs: Iterable[int]) -> int:
    """Convert a little-endian limb sequence back to a Python int."""
    out = 0
    for i, val in enumerate(limbs):
        out |= int(val) << (i * LIMB_BITS)
    return out


def limb_to_hex(value: int) -> str:
    """Fixed-width lowercase hex group for one limb, most-significant nibble first."""
    return format(int(value) & LIMB_MASK, f"0{HEX_WIDTH}x")


def check_limbs(limbs) -> np.ndarray:
    """Validate a limb sequence and return it as a uint32 array.

    Raises InvalidArgument for ``None``, for anything that is not an integer
    (floats and numeric text included) and for values outside ``0 .. 2**32 - 1``.
    """
    if limbs is None:
        raise InvalidArgument("limb sequence is required")
    if isinstance(limbs, (str, bytes)):
        raise InvalidArgument("limb sequence must hold integers, not text")

    try:
        values = [operator.index(v) for v in limbs]
    except TypeError as exc:
        raise InvalidArgument(f"limb sequence must hold integers: {exc}") from exc

    for i, v in enumerate(values):
        if not 0 <= v <= LIMB_MASK:
            raise InvalidArgument(f"limb {i} outside 0..{LIMB_MASK:#x}: {v}")
    return np.array(values, dtype=np.uint32)
