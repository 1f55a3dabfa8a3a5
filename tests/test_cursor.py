import pytest

from chunkint import BigInt
from chunkint.cursor import Cursor, iterate
from chunkint.exceptions import CursorExhaustedError, InvalidArgument


def _walk(cursor):
    seen = []
    while not cursor.exhausted:
        seen.append(cursor.get())
        cursor.step()
    return seen


def test_walks_every_limb_across_chunks():
    b = BigInt.from_limbs([1, 2, 3, 4, 5], capacity=2)
    assert _walk(Cursor(b)) == [1, 2, 3, 4, 5]


def test_skips_empty_interior_chunk():
    b = BigInt.from_limbs([1, 2, 3, 4, 5], capacity=2)
    b.head.next.used = 0
    assert _walk(Cursor(b)) == [1, 2, 5]


def test_skips_empty_head_on_create():
    b = BigInt.from_limbs([1, 2, 3], capacity=2)
    b.head.used = 0
    c = Cursor(b)
    assert c.chunk is b.tail
    assert c.index == 0
    assert c.get() == 3


def test_all_empty_chain_starts_exhausted():
    b = BigInt(capacity=4)
    b.load([])
    assert Cursor(b).exhausted


def test_exhausted_cursor_reads_zero_and_stays_put():
    c = Cursor(BigInt.from_limbs([9], capacity=4))
    assert c.step() is False
    assert c.exhausted
    assert c.get() == 0
    assert c.step() is False
    assert c.exhausted


def test_set_on_exhausted_cursor_raises():
    c = Cursor(BigInt.from_limbs([9], capacity=4))
    c.step()
    with pytest.raises(CursorExhaustedError):
        c.set(1)


@pytest.mark.parametrize("value", [-1, 1 << 32])
def test_set_rejects_out_of_range(value):
    c = Cursor(BigInt())
    with pytest.raises(InvalidArgument):
        c.set(value)


def test_set_writes_through_to_chunk():
    b = BigInt.from_limbs([1, 2, 3], capacity=2)
    c = Cursor(b)
    c.step()
    c.step()
    c.set(0xCAFEBABE)
    assert b.limbs() == [1, 2, 0xCAFEBABE]


def test_step_with_extend_inside_chain_does_not_grow():
    b = BigInt.from_limbs([1, 2, 3], capacity=2)
    c = Cursor(b)
    c.step_with_extend()
    c.step_with_extend()
    assert len(b) == 2
    assert c.get() == 3


def test_step_with_extend_appends_new_chunk_past_partial_tail():
    # the tail has three spare slots, but growth still starts a new chunk
    b = BigInt.from_limbs([1], capacity=4)
    c = Cursor(b)
    c.step_with_extend()

    assert not c.exhausted
    assert len(b) == 2
    assert b.head.used == 1
    assert c.chunk is b.tail
    assert c.chunk.used == 1
    assert c.index == 0
    assert c.get() == 0
    assert b.tail.prev is b.head


def test_step_with_extend_never_exhausts():
    b = BigInt(capacity=3)
    c = Cursor(b)
    for _ in range(10):
        c.step_with_extend()
        assert not c.exhausted
    assert len(b) == 11
    assert b.limbs() == [0] * 11


def test_iterate_none():
    assert iterate(None) is None
    with pytest.raises(InvalidArgument):
        Cursor(None)


def test_repr():
    c = Cursor(BigInt())
    assert repr(c).startswith("Cursor(index=0")
    c.step()
    assert repr(c) == "Cursor(exhausted)"
