# polygen/generators.py
"""
Random-access views of a generator's surface.

A streaming generator yields polygons that repeat every shared vertex once per
polygon touching it. Generators that also implement ``SharedVertex`` and
``IndexedPolygon`` describe the same surface as a deduplicated vertex table
plus polygons of indices into it, which is what an index/vertex buffer
builder wants:

    positions = list(sphere.shared_vertex_iter())
    faces = list(sphere.indexed_polygon_iter())

Both tables are pure functions of the generator's resolution; reading them
never moves the streaming cursor.
"""
from __future__ import annotations

from numbers import Integral
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")
P = TypeVar("P")


class SharedVertex(Generic[T]):
    """Table of the unique vertices of a generated surface."""

    def shared_vertex(self, idx: int) -> T:
        raise NotImplementedError

    def shared_vertex_count(self) -> int:
        raise NotImplementedError

    def shared_vertex_iter(self) -> Iterator[T]:
        for idx in range(self.shared_vertex_count()):
            yield self.shared_vertex(idx)


class IndexedPolygon(Generic[P]):
    """Table of polygons whose vertices are indices into ``SharedVertex``."""

    def indexed_polygon(self, idx: int) -> P:
        raise NotImplementedError

    def indexed_polygon_count(self) -> int:
        raise NotImplementedError

    def indexed_polygon_iter(self) -> Iterator[P]:
        for idx in range(self.indexed_polygon_count()):
            yield self.indexed_polygon(idx)


# -------------------------
# Small helpers
# -------------------------

def require_resolution(name: str, n: int, minimum: int) -> int:
    # bool is an Integral too but never a resolution
    if isinstance(n, bool) or not isinstance(n, Integral):
        raise TypeError(f"{name} must be an int (got {type(n).__name__})")
    if n < minimum:
        raise ValueError(f"{name} must be >= {minimum} (got {n})")
    return int(n)


def check_index(name: str, idx: int, count: int) -> None:
    if not 0 <= idx < count:
        raise IndexError(f"{name} index {idx} out of range [0, {count})")
