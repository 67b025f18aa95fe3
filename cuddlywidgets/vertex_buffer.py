"""Vertex and element arrays for boxes and ellipses."""

from __future__ import annotations

import math
from array import array
from typing import Sequence, Tuple

__all__ = ["VertexBuffer", "NO_TEXTURE"]

NO_TEXTURE = -1000.0

Vec2 = Tuple[float, float]
Color = Sequence[float]


class VertexBuffer:
    """Interleaved vertices (x, y, r, g, b, a, u, v) plus triangle indices."""

    no_texture = NO_TEXTURE
    FLOATS_PER_VERTEX = 8

    def __init__(self) -> None:
        self.vertex = array("f")
        self.element = array("I")

    def _vertex_count(self) -> int:
        return len(self.vertex) // self.FLOATS_PER_VERTEX

    def _add_vertex(self, x: float, y: float, color: Color) -> None:
        r, g, b, a = color
        self.vertex.extend((x, y, r, g, b, a, NO_TEXTURE, NO_TEXTURE))

    def _add_quad(self, points: Sequence[Vec2], color: Color) -> None:
        base = self._vertex_count()
        for x, y in points:
            self._add_vertex(x, y, color)
        self.element.extend((base, base + 2, base + 1,
                             base + 2, base + 3, base + 1))

    def generate_box(self, ul: Vec2, lr: Vec2, color: Color) -> None:
        """Append an axis-aligned box from upper-left ``ul`` to lower-right ``lr``."""
        (left, top), (right, bottom) = ul, lr
        self._add_quad(((left, top), (right, top), (left, bottom), (right, bottom)),
                       color)

    def generate_ellipse(self, center: Vec2, radius: Vec2, inner_pct: float,
                         segments: int, color: Color) -> None:
        """Append an elliptical ring; ``inner_pct`` is the inner radius fraction."""
        inner_pct = 0.0 if inner_pct < 0.0 else inner_pct
        inner_pct = 0.99 if inner_pct >= 1.0 else inner_pct
        segments = min(max(int(segments), 15), 720)

        cx, cy = center
        rx, ry = radius
        ix, iy = rx * inner_pct, ry * inner_pct
        increment = math.pi * 2.0 / segments
        start = self._vertex_count()

        for i in range(segments):
            angle = increment * i
            cos_a, sin_a = math.cos(angle), math.sin(angle)
            self._add_vertex(rx * cos_a + cx, ry * sin_a + cy, color)
            self._add_vertex(ix * cos_a + cx, iy * sin_a + cy, color)
            count = start + 2 * (i + 1)
            self.element.extend((count - 2, count - 1, count + 1,
                                 count - 2, count + 1, count))

        # The last segment wraps around to the first pair of vertices.
        self.element[-4] = start + 1
        self.element[-2] = start + 1
        self.element[-1] = start

    def generate_ellipse_divider(self, center: Vec2, radius: Vec2, pct: float,
                                 angle: float, color: Color) -> None:
        """Append a one-degree-wide radial divider starting at ``angle``."""
        cx, cy = center
        rx, ry = radius
        ix, iy = rx * pct, ry * pct
        points = []
        for a in (angle, angle + math.pi * 2.0 / 360):
            cos_a, sin_a = math.cos(a), math.sin(a)
            points.append((rx * cos_a + cx, ry * sin_a + cy))
            points.append((ix * cos_a + cx, iy * sin_a + cy))
        self._add_quad(points, color)

    def vertex_bytes(self) -> bytes:
        """Vertex data as native 32-bit floats."""
        return self.vertex.tobytes()

    def vertex_size(self) -> int:
        """Size of the vertex data in bytes."""
        return self.vertex.itemsize * len(self.vertex)

    def element_bytes(self) -> bytes:
        """Element data as native unsigned ints."""
        return self.element.tobytes()

    def element_size(self) -> int:
        """Size of the element data in bytes."""
        return self.element.itemsize * len(self.element)

    def element_count(self) -> int:
        """Number of element indices."""
        return len(self.element)