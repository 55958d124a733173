"""A pair of integer indices with lexicographic ordering."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class IJ:
    """Row/column index pair, ordered first by ``i`` then by ``j``."""

    i: int
    j: int