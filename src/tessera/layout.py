"""One-dimensional space distribution shared by ``Flex`` and ``Grid``.

Sizes are encoded the same way everywhere: a positive (or zero) entry is
a fixed number of cells, a negative entry ``-w`` is a proportional share
of weight ``w``.
"""

from __future__ import annotations

from itertools import accumulate
from typing import Sequence


def split_sizes(sizes: Sequence[int]) -> tuple[int, int]:
    """Return ``(fixed_total, weight_total)`` for an encoded size list."""
    fixed = 0
    weight = 0
    for size in sizes:
        if size < 0:
            weight -= size
        else:
            fixed += size
    return fixed, weight


def distribute(sizes: Sequence[int], total: int) -> list[int]:
    """Resolve encoded *sizes* into cell extents for *total* cells.

    Fixed entries are reserved first.  What is left is split between the
    proportional entries as ``floor(left * weight / total_weight)``, and
    the last proportional entry absorbs the truncation remainder, so the
    extents add up to *total* whenever there is a proportional entry and
    the fixed entries fit.  Entries are then clamped in order to the space
    still available: extents never add up to more than *total* and are
    never negative.
    """
    total = max(0, total)
    fixed, weight = split_sizes(sizes)
    left_for_weights = max(0, total - fixed)

    shares: list[int] = []
    last_proportional = -1
    handed_out = 0
    for index, size in enumerate(sizes):
        if size < 0:
            share = left_for_weights * -size // weight
            handed_out += share
            last_proportional = index
            shares.append(share)
        else:
            shares.append(size)
    if last_proportional >= 0:
        shares[last_proportional] += left_for_weights - handed_out

    extents: list[int] = []
    available = total
    for share in shares:
        extent = min(share, available)
        extents.append(extent)
        available -= extent
    return extents


def offsets(extents: Sequence[int]) -> list[int]:
    """Start position of each extent when laid out back to back from 0."""
    return [0, *accumulate(extents)][: len(extents)]
