from .bigint import BigInt, add, create, destroy, length, load, to_string
from .chunk import CHUNK_SIZE, LIMB_BITS, LIMB_MASK, Chunk
from .cursor import Cursor
from .exceptions import AllocationError, ChunkIntError, CursorExhaustedError, InvalidArgument

__version__ = "0.1.0"

__all__ = [
    "BigInt",
    "Chunk",
    "Cursor",
    "create",
    "destroy",
    "length",
    "load",
    "to_string",
    "add",
    "CHUNK_SIZE",
    "LIMB_BITS",
    "LIMB_MASK",
    "ChunkIntError",
    "AllocationError",
    "InvalidArgument",
    "CursorExhaustedError",
]
