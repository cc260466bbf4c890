import pytest

from xvtools.umalloc import HEADER_SIZE, Allocator


def test_blocks_do_not_overlap():
    heap = Allocator()
    blocks = [(heap.malloc(n), n) for n in (100, 1, 500, 37)]
    spans = sorted(blocks)
    for (a, n), (b, _) in zip(spans, spans[1:]):
        assert a + n <= b
    for addr, n in blocks:
        assert heap.start <= addr and addr + n <= heap.brk


def test_first_allocation_grows_by_minimum():
    heap = Allocator()
    heap.malloc(10)
    assert heap.brk - heap.start == 4096 * HEADER_SIZE


def test_free_everything_returns_all_units():
    heap = Allocator()
    blocks = [heap.malloc(n) for n in (10, 2000, 300, 70000, 5)]
    for addr in reversed(blocks):
        heap.free(addr)
    assert heap.free_units() * HEADER_SIZE == heap.brk - heap.start


def test_freed_block_is_reused():
    heap = Allocator()
    first = heap.malloc(50)
    heap.free(first)
    assert heap.malloc(50) == first


def test_large_request_grows_heap_enough():
    heap = Allocator()
    heap.malloc(HEADER_SIZE * 5000)
    assert heap.brk - heap.start >= HEADER_SIZE * 5000


def test_exhaust_free_and_allocate_again():
    heap = Allocator(capacity=HEADER_SIZE * 4096 * 2)
    blocks = []
    with pytest.raises(MemoryError):
        while True:
            blocks.append(heap.malloc(10001))
    assert blocks
    for addr in blocks:
        heap.free(addr)
    assert heap.free_units() * HEADER_SIZE == heap.brk - heap.start
    big = heap.malloc(1024 * 20)
    assert heap.start <= big < heap.brk


def test_double_free_rejected():
    heap = Allocator()
    addr = heap.malloc(8)
    heap.free(addr)
    with pytest.raises(ValueError):
        heap.free(addr)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Allocator().malloc(-1)


def test_sbrk_limits():
    heap = Allocator(capacity=HEADER_SIZE * 10)
    old = heap.sbrk(HEADER_SIZE)
    assert old == heap.start
    assert heap.brk == heap.start + HEADER_SIZE
    with pytest.raises(MemoryError):
        heap.sbrk(HEADER_SIZE * 10)
    with pytest.raises(MemoryError):
        heap.sbrk(-HEADER_SIZE * 2)