# polygen/sphere.py
"""
UV sphere generator: a unit sphere centred on the origin, tessellated along
longitude (``sub_u`` steps around the equator) and colatitude (``sub_v`` steps
from pole to pole).

Highlights
---------
- Streams one ``Polygon`` per ``next()``: triangles in the two pole rows,
  quads in every band between them
- The same surface as a deduplicated vertex table plus index polygons, with
  the whole north (and south) pole collapsed into a single shared vertex
- Positions are single precision (``numpy.float32``) triples

Grid point ``(u, v)`` maps to

    (cos(2*pi*u/sub_u) * sin(pi*v/sub_v),
     sin(2*pi*u/sub_u) * sin(pi*v/sub_v),
     cos(pi*v/sub_v))

so ``v == 0`` is the north pole (+Z) and ``v == sub_v`` the south pole (-Z).
"""
from __future__ import annotations

import logging
import math
from typing import Tuple

import numpy as np

from .generators import IndexedPolygon, SharedVertex, check_index, require_resolution
from .poly import Polygon

log = logging.getLogger(__name__)

Vec3 = Tuple[np.float32, np.float32, np.float32]

_PI = np.float32(math.pi)
_TWO_PI = np.float32(2 * math.pi)


class SphereUV(SharedVertex[Vec3], IndexedPolygon[Polygon[int]]):
    """Sphere of radius 1 centred at (0, 0, 0).

    ``sub_u`` is the number of points around the equator, ``sub_v`` the number
    of steps from pole to pole. Iterating yields ``sub_u * sub_v`` polygons,
    row by row starting at the north pole; the instance is its own iterator
    and cannot be restarted.
    """

    def __init__(self, sub_u: int, sub_v: int):
        self.sub_u = require_resolution("sub_u", sub_u, 2)
        self.sub_v = require_resolution("sub_v", sub_v, 2)
        self.u = 0
        self.v = 0
        log.debug(f"[sphere] SphereUV sub_u={self.sub_u} sub_v={self.sub_v} "
                  f"polygons={self.indexed_polygon_count()} shared_vertices={self.shared_vertex_count()}")

    def __repr__(self) -> str:
        return f"SphereUV(sub_u={self.sub_u}, sub_v={self.sub_v}, u={self.u}, v={self.v})"

    def vert(self, u: int, v: int) -> Vec3:
        """Position of grid point ``(u, v)``; ``u`` may run one past ``sub_u``."""
        lon = np.float32(u) / np.float32(self.sub_u) * _TWO_PI
        colat = np.float32(v) / np.float32(self.sub_v) * _PI
        ring = np.sin(colat)
        return (np.cos(lon) * ring, np.sin(lon) * ring, np.cos(colat))

    # ---- streaming ----
    def __iter__(self) -> "SphereUV":
        return self

    def __next__(self) -> Polygon[Vec3]:
        if self.v == self.sub_v:
            raise StopIteration
        if self.u == self.sub_u:
            self.u = 0
            self.v += 1
            if self.v == self.sub_v:
                log.debug(f"[sphere] exhausted after {self.indexed_polygon_count()} polygons")
                raise StopIteration

        u, v = self.u, self.v
        x = self.vert(u, v)
        y = self.vert(u, v + 1)
        z = self.vert(u + 1, v + 1)
        w = self.vert(u + 1, v)
        self.u += 1

        if v == 0:
            return Polygon.tri(x, y, z)
        elif v == self.sub_v - 1:
            return Polygon.tri(z, w, x)
        return Polygon.quad(x, y, z, w)

    def __length_hint__(self) -> int:
        if self.v == self.sub_v:
            return 0
        return self.indexed_polygon_count() - (self.v * self.sub_u + self.u)

    # ---- shared vertices ----
    def shared_vertex_count(self) -> int:
        return (self.sub_v - 1) * self.sub_u + 2

    def shared_vertex(self, idx: int) -> Vec3:
        count = self.shared_vertex_count()
        check_index("shared_vertex", idx, count)
        if idx == 0:
            return self.vert(0, 0)
        elif idx == count - 1:
            return self.vert(0, self.sub_v)
        # every pole vertex shares one slot, so interior rows start at 1
        idx -= 1
        return self.vert(idx % self.sub_u, idx // self.sub_u + 1)

    def shared_index(self, u: int, v: int) -> int:
        """Index into the shared vertex table of grid point ``(u, v)``.

        ``u`` wraps modulo ``sub_u`` so the seam at longitude 0/2pi is closed.
        """
        if v == 0:
            return 0
        elif v == self.sub_v:
            return self.shared_vertex_count() - 1
        return (v - 1) * self.sub_u + (u % self.sub_u) + 1

    # ---- indexed polygons ----
    def indexed_polygon_count(self) -> int:
        return self.sub_u * self.sub_v

    def indexed_polygon(self, idx: int) -> Polygon[int]:
        check_index("indexed_polygon", idx, self.indexed_polygon_count())
        u, v = idx % self.sub_u, idx // self.sub_u
        f = self.shared_index

        if v == 0:
            return Polygon.tri(f(u, v), f(u, v + 1), f(u + 1, v + 1))
        elif v == self.sub_v - 1:
            return Polygon.tri(f(u + 1, v + 1), f(u + 1, v), f(u, v))
        return Polygon.quad(f(u, v), f(u, v + 1), f(u + 1, v + 1), f(u + 1, v))
