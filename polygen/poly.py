# polygen/poly.py
"""
Polygon value types and the per-vertex adapters built on top of them.

A generator produces a lazy sequence of polygons (triangles, quads, or the
``Polygon`` union when a generator mixes the two). Two capabilities are shared
by every shape:

- ``emit_vertices(sink)``: push each vertex to ``sink`` in declaration order
- ``map_vertex(f)``: rebuild the same kind of shape with ``f`` applied to each
  vertex

``vertices()`` and ``vertex()`` lift those capabilities over a whole polygon
sequence, so a generator can be fed straight into a vertex buffer builder:

    flat = list(vertices(SphereUV(16, 8)))
    scaled = vertex(SphereUV(16, 8), lambda p: (p[0] * 2, p[1] * 2, p[2] * 2))
"""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Deque, Generic, Iterable, Iterator, Tuple, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


# -------------
# Shape values
# -------------

@dataclass(frozen=True)
class Triangle(Generic[T]):
    """A polygon with 3 points. The slot order defines the winding."""
    x: T
    y: T
    z: T

    def emit_vertices(self, sink: Callable[[T], object]) -> None:
        sink(self.x)
        sink(self.y)
        sink(self.z)

    def map_vertex(self, f: Callable[[T], U]) -> "Triangle[U]":
        return Triangle(f(self.x), f(self.y), f(self.z))

    def triangulate(self) -> Tuple["Triangle[T]", ...]:
        return (self,)

    def __iter__(self) -> Iterator[T]:
        return iter((self.x, self.y, self.z))

    def __len__(self) -> int:
        return 3


@dataclass(frozen=True)
class Quad(Generic[T]):
    """A polygon with 4 points. The slot order defines winding and fan order."""
    x: T
    y: T
    z: T
    w: T

    def emit_vertices(self, sink: Callable[[T], object]) -> None:
        sink(self.x)
        sink(self.y)
        sink(self.z)
        sink(self.w)

    def map_vertex(self, f: Callable[[T], U]) -> "Quad[U]":
        return Quad(f(self.x), f(self.y), f(self.z), f(self.w))

    def triangulate(self) -> Tuple[Triangle[T], Triangle[T]]:
        """Split along the x-z diagonal, keeping the quad's winding."""
        return (Triangle(self.x, self.y, self.z), Triangle(self.z, self.w, self.x))

    def __iter__(self) -> Iterator[T]:
        return iter((self.x, self.y, self.z, self.w))

    def __len__(self) -> int:
        return 4


class PolyKind(Enum):
    # value is the arity of the wrapped shape
    TRI = 3
    QUAD = 4


_SHAPE_FOR_KIND = {PolyKind.TRI: Triangle, PolyKind.QUAD: Quad}


@dataclass(frozen=True)
class Polygon(Generic[T]):
    """Either a Triangle or a Quad.

    Exists because some generators (e.g. the poles of a UV sphere) produce
    both shapes from the same sequence. ``kind`` always agrees with the type
    of ``shape``.
    """
    kind: PolyKind
    shape: Union[Triangle[T], Quad[T]]

    def __post_init__(self) -> None:
        if not isinstance(self.kind, PolyKind):
            raise TypeError(f"kind must be a PolyKind (got {self.kind!r})")
        expected = _SHAPE_FOR_KIND[self.kind]
        if not isinstance(self.shape, expected):
            raise TypeError(
                f"{self.kind.name} polygon needs a {expected.__name__}, got {type(self.shape).__name__}"
            )

    @classmethod
    def tri(cls, x: T, y: T, z: T) -> "Polygon[T]":
        return cls(PolyKind.TRI, Triangle(x, y, z))

    @classmethod
    def quad(cls, x: T, y: T, z: T, w: T) -> "Polygon[T]":
        return cls(PolyKind.QUAD, Quad(x, y, z, w))

    @property
    def is_tri(self) -> bool:
        return self.kind is PolyKind.TRI

    @property
    def is_quad(self) -> bool:
        return self.kind is PolyKind.QUAD

    def emit_vertices(self, sink: Callable[[T], object]) -> None:
        self.shape.emit_vertices(sink)

    def map_vertex(self, f: Callable[[T], U]) -> "Polygon[U]":
        return Polygon(self.kind, self.shape.map_vertex(f))

    def triangulate(self) -> Tuple[Triangle[T], ...]:
        return self.shape.triangulate()

    def __iter__(self) -> Iterator[T]:
        return iter(self.shape)

    def __len__(self) -> int:
        return self.kind.value


Shape = Union[Triangle[T], Quad[T], Polygon[T]]


# ---------------------------
# Polygon sequence adapters
# ---------------------------

class VerticesIterator(Generic[T]):
    """Breaks a polygon sequence down into its individual vertices.

    Vertices of the polygon currently being unpacked wait in a FIFO buffer,
    so output order is source order, then emission order within a polygon.
    """

    def __init__(self, source: Iterable[Shape[T]]):
        self._source = iter(source)
        self._buffer: Deque[T] = deque()

    def __iter__(self) -> "VerticesIterator[T]":
        return self

    def __next__(self) -> T:
        while True:
            if self._buffer:
                return self._buffer.popleft()
            # StopIteration from the source ends this iterator too
            polygon = next(self._source)
            polygon.emit_vertices(self._buffer.append)


class MapToVerticesIterator(Generic[T, U]):
    """Polygon sequence in, polygon sequence out, each vertex passed through ``f``.

    Works much like a vertex shader: scale a mesh, or change the vertex type
    (positions to indices, tuples to numpy arrays, ...). Shapes are preserved.
    """

    def __init__(self, source: Iterable[Shape[T]], f: Callable[[T], U]):
        self._source = iter(source)
        self._f = f

    def __iter__(self) -> "MapToVerticesIterator[T, U]":
        return self

    def __next__(self) -> Shape[U]:
        return next(self._source).map_vertex(self._f)


def vertices(source: Iterable[Shape[T]]) -> VerticesIterator[T]:
    return VerticesIterator(source)


def vertex(source: Iterable[Shape[T]], f: Callable[[T], U]) -> MapToVerticesIterator[T, U]:
    return MapToVerticesIterator(source, f)


def triangulate(source: Iterable[Shape[T]]) -> Iterator[Triangle[T]]:
    """Lazily convert any polygon sequence into triangles (quads split in two)."""
    for polygon in source:
        yield from polygon.triangulate()
