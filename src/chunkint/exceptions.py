"""
Unified import surface for all chunkint exceptions.
"""

from __future__ import annotations


class ChunkIntError(Exception):
    """Base class for every error raised by chunkint."""
    pass


class AllocationError(ChunkIntError, MemoryError):
    """Chunk storage could not be obtained."""
    pass


class InvalidArgument(ChunkIntError, ValueError):
    """A required BigInt or limb sequence was missing or out of range."""
    pass


class CursorExhaustedError(ChunkIntError, IndexError):
    """Write attempted through a cursor positioned past the end of its chain."""
    pass


__all__ = [
    "ChunkIntError",
    "AllocationError",
    "InvalidArgument",
    "CursorExhaustedError",
]
