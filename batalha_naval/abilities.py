"""Square masks describing the area hit by each special ability."""

from __future__ import annotations

from collections.abc import Callable

DEFAULT_SIZE = 5

Mask = tuple[tuple[int, ...], ...]


def _build(size: int, covers: Callable[[int, int, int], bool]) -> Mask:
    if size <= 0:
        raise ValueError(f"mask size must be positive, got {size}")
    half = size // 2
    return tuple(
        tuple(int(covers(i, j, half)) for j in range(size)) for i in range(size)
    )


def cone_mask(size: int = DEFAULT_SIZE) -> Mask:
    """A cone opening downwards from the top centre, filling the upper half."""
    return _build(size, lambda i, j, half: i <= half and half - i <= j <= half + i)


def cross_mask(size: int = DEFAULT_SIZE) -> Mask:
    """A cross through the centre row and centre column."""
    return _build(size, lambda i, j, half: i == half or j == half)


def octahedron_mask(size: int = DEFAULT_SIZE) -> Mask:
    """A diamond: every cell within Manhattan distance half of the centre."""
    return _build(size, lambda i, j, half: abs(i - half) + abs(j - half) <= half)