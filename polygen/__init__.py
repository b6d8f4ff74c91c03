from .generators import IndexedPolygon, SharedVertex
from .poly import (
    MapToVerticesIterator,
    Polygon,
    PolyKind,
    Quad,
    Triangle,
    VerticesIterator,
    triangulate,
    vertex,
    vertices,
)
from .sphere import SphereUV

__version__ = "0.1.0"

__all__ = [
    "IndexedPolygon",
    "MapToVerticesIterator",
    "PolyKind",
    "Polygon",
    "Quad",
    "SharedVertex",
    "SphereUV",
    "Triangle",
    "VerticesIterator",
    "triangulate",
    "vertex",
    "vertices",
]
