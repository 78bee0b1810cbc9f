"""Tests for IdAllocator probing and escape behaviour."""

import logging
from typing import Set

import pytest

from contractgraph.config import AllocatorConfig
from contractgraph.utils.id_allocator import AllocatorExhaustedError, IdAllocator


def _allocator(allocated: Set[int], **config) -> IdAllocator:
    """Return an allocator probing the given set."""
    return IdAllocator(
        allocated.__contains__,
        config=AllocatorConfig(**config) if config else None,
    )


def _take(allocator: IdAllocator, allocated: Set[int]) -> int:
    """Allocate an id and mark it as used."""
    ident = allocator.allocate()
    allocated.add(ident)
    return ident


def test_sequential_allocation_and_rewind() -> None:
    """Fresh allocator hands out 1..5; after rewind the first free id is 6."""
    allocated: Set[int] = set()
    allocator = _allocator(allocated)

    assert [_take(allocator, allocated) for _ in range(5)] == [1, 2, 3, 4, 5]

    allocator.rewind()

    assert allocator.last_allocated == 0
    assert _take(allocator, allocated) == 6


def test_reuses_freed_ids_after_rewind() -> None:
    """Rewinding makes freed low ids available again."""
    allocated: Set[int] = set()
    allocator = _allocator(allocated)
    for _ in range(4):
        _take(allocator, allocated)
    allocated.discard(2)

    allocator.rewind()

    assert allocator.allocate() == 2


def test_dense_collisions_escape() -> None:
    """A run of 100 collisions jumps to the pseudorandom candidate."""
    allocated = set(range(1, 151))
    allocator = _allocator(allocated)

    ident = allocator.allocate()

    assert ident not in allocated
    # First escape candidate is the seed 3^30 multiplied once by 3.
    assert ident == 3**31
    assert allocator.last_allocated == ident


def test_rewind_keeps_generator_state() -> None:
    """Repeated dense episodes escape to new candidates instead of cycling."""
    allocated = set(range(1, 151))
    allocator = _allocator(allocated)

    first = _take(allocator, allocated)
    allocator.rewind()
    second = _take(allocator, allocated)

    assert first == 3**31
    assert second == 3**32
    assert first != second


def test_custom_streak_limit() -> None:
    """The collision streak limit comes from the configuration."""
    allocated = {1, 2, 3}
    allocator = _allocator(allocated, streak_limit=1)

    assert allocator.allocate() == 3**31


def test_cursor_wraps_past_max_id() -> None:
    """Probing past max_id starts over from 1."""
    allocated: Set[int] = {1, 2}
    allocator = _allocator(allocated, max_id=3)
    assert _take(allocator, allocated) == 3

    allocated.discard(1)

    assert allocator.allocate() == 1


def test_exhausted_by_count() -> None:
    """A full identifier space is reported instead of probing forever."""
    allocated = {1, 2, 3}
    allocator = IdAllocator(
        allocated.__contains__,
        lambda: len(allocated),
        AllocatorConfig(max_id=3),
    )

    with pytest.raises(AllocatorExhaustedError):
        allocator.allocate()


def test_exhausted_by_probe_budget() -> None:
    """Without a count, the probe budget bounds a single allocation."""
    allocator = IdAllocator(lambda ident: True, config=AllocatorConfig(max_probes=500))

    with pytest.raises(AllocatorExhaustedError, match="500 probes"):
        allocator.allocate()


def test_escape_logged_at_debug(caplog) -> None:
    """Escaping a collision run is logged at DEBUG, not as a warning."""
    allocator = _allocator(set(range(1, 151)))

    with caplog.at_level(logging.DEBUG, logger="contractgraph.utils.id_allocator"):
        allocator.allocate()

    escapes = [r for r in caplog.records if "escaping" in r.getMessage()]
    assert len(escapes) == 1
    assert escapes[0].levelno == logging.DEBUG
