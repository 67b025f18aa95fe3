"""The basic drawable widget: position, size, border, margin and colours."""

from __future__ import annotations

import enum
from typing import List, Optional, Protocol, Sequence, Tuple, runtime_checkable

from .vertex_buffer import VertexBuffer

__all__ = ["Side", "ColorRole", "Parent", "Widget"]

Color = Tuple[float, float, float, float]

_SIDE_INDEX = {}


class Side(enum.IntFlag):
    """Sides of a widget's frame; combine them to set several at once."""

    TOP = 1
    LEFT = 2
    RIGHT = 4
    BOTTOM = 8
    ALL = TOP | LEFT | RIGHT | BOTTOM


_SIDE_INDEX.update({Side.TOP: 0, Side.LEFT: 1, Side.RIGHT: 2, Side.BOTTOM: 3})


class ColorRole(enum.IntFlag):
    """The colours a widget draws with."""

    FOREGROUND = 1
    BACKGROUND = 2
    ALL = FOREGROUND | BACKGROUND


@runtime_checkable
class Parent(Protocol):
    """What a widget needs from the container that holds it."""

    @property
    def size(self) -> Tuple[int, int]:
        """Width and height in pixels."""
        ...

    @property
    def pixel_size(self) -> Tuple[float, float]:
        """Size of one pixel in normalised device coordinates."""
        ...

    def add_child(self, child: "Widget") -> None:
        ...

    def remove_child(self, child: "Widget") -> None:
        ...

    def move_child(self, child: "Widget") -> None:
        ...


def _color(value: Sequence[float]) -> Color:
    r, g, b, a = value
    return (float(r), float(g), float(b), float(a))


class Widget:
    """The simplest thing that draws: a background box with optional borders."""

    def __init__(self, parent: Optional[Parent], width: int = 0, height: int = 0) -> None:
        if parent is None:
            raise ValueError("Widget must have a parent.")
        self.border: List[int] = [0, 0, 0, 0]
        self.margin: List[int] = [0, 0, 0, 0]
        self.width = int(width)
        self.height = int(height)
        self.pos: Tuple[int, int] = (0, 0)
        self.relative_pos: Tuple[int, int] = (0, 0)
        self.translation: Tuple[float, float] = (0.0, 0.0)
        self.foreground: Color = (1.0, 1.0, 1.0, 1.0)
        self.background: Color = (0.5, 0.5, 0.5, 1.0)
        self.visible = True
        self.element_count = 0
        self.buffer: Optional[VertexBuffer] = None
        self.parent = parent
        self.parent.add_child(self)
        self._populate_buffers()

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    # Position

    def get_position(self, absolute: bool = False) -> Tuple[int, int]:
        """Return the absolute position, or the one requested relative to the parent."""
        return self.pos if absolute else self.relative_pos

    def set_position(self, x: Optional[int] = None, y: Optional[int] = None) -> None:
        """Move the widget; negative values count from the parent's far edge."""
        if x is None and y is None:
            return
        rx, ry = self.relative_pos
        self.relative_pos = (rx if x is None else int(x), ry if y is None else int(y))
        self._recalculate_absolute_pos()
        self.parent.move_child(self)
        self._recalculate_translation()

    def reposition(self) -> None:
        """Recompute the placement after the parent was resized."""
        rx, ry = self.relative_pos
        if rx < 0 or ry < 0:
            self._recalculate_absolute_pos()
            self._recalculate_translation()

    def _recalculate_absolute_pos(self) -> None:
        if self.relative_pos == self.pos:
            return
        parent_w, parent_h = self.parent.size
        x, y = self.relative_pos
        if x < 0:
            x += parent_w - self.width
        if y < 0:
            y += parent_h - self.height
        self.pos = (x, y)

    def _recalculate_translation(self) -> None:
        px, py = self.parent.pixel_size[:2]
        x, y = self.pos
        self.translation = (px * x, -(py * y))

    # Frame

    @staticmethod
    def _side_index(side: Side) -> int:
        try:
            return _SIDE_INDEX[Side(side)]
        except (KeyError, ValueError):
            raise ValueError(f"not a single side: {side!r}") from None

    def get_border(self, side: Side) -> int:
        """Border width on one side."""
        return self.border[self._side_index(side)]

    def set_border(self, sides: Side, value: int) -> None:
        """Set the border width on every side named in ``sides``."""
        for side, index in _SIDE_INDEX.items():
            if sides & side:
                self.border[index] = int(value)
        self._populate_buffers()

    def get_margin(self, side: Side) -> int:
        """Margin width on one side."""
        return self.margin[self._side_index(side)]

    def set_margin(self, sides: Side, value: int) -> None:
        """Set the margin width on every side named in ``sides``."""
        for side, index in _SIDE_INDEX.items():
            if sides & side:
                self.margin[index] = int(value)
        self._populate_buffers()

    # Colours

    def get_color(self, role: ColorRole) -> Color:
        """The foreground or background colour."""
        if role == ColorRole.FOREGROUND:
            return self.foreground
        if role == ColorRole.BACKGROUND:
            return self.background
        raise ValueError(f"not a single colour role: {role!r}")

    def set_color(self, roles: ColorRole, value: Sequence[float]) -> None:
        """Set every colour named in ``roles``."""
        color = _color(value)
        if roles & ColorRole.FOREGROUND:
            self.foreground = color
        if roles & ColorRole.BACKGROUND:
            self.background = color
        self._populate_buffers()

    # Size and visibility

    def set_size(self, width: Optional[int] = None, height: Optional[int] = None) -> None:
        """Change the width, the height or both."""
        if width is not None:
            self.width = int(width)
        if height is not None:
            self.height = int(height)
        self._populate_buffers()
        self.parent.move_child(self)

    def set_visible(self, visible: bool) -> None:
        self.visible = bool(visible)
        self.parent.move_child(self)

    # Geometry

    def generate_points(self) -> VertexBuffer:
        """Build the background box and one box per non-zero border."""
        vb = VertexBuffer()
        px, py = self.parent.pixel_size[:2]
        py = -py
        w = self.width * px
        h = self.height * py
        m = (self.margin[0] * py, self.margin[1] * px,
             self.margin[2] * px, self.margin[3] * py)
        b = (self.border[0] * py, self.border[1] * px,
             self.border[2] * px, self.border[3] * py)

        vb.generate_box((-1.0, 1.0), (-1.0 + w, 1.0 + h), self.background)
        left, top = vb.vertex[0], vb.vertex[1]
        right, bottom = vb.vertex[8], vb.vertex[17]

        if self.border[0]:
            vb.generate_box((left + m[1], top + m[0]),
                            (right - m[2], top + m[0] + b[0]), self.foreground)
        if self.border[1]:
            vb.generate_box((left + m[1], top + m[0]),
                            (left + m[1] + b[1], bottom - m[3]), self.foreground)
        if self.border[2]:
            vb.generate_box((right - m[2] - b[2], top + m[0]),
                            (right - m[2], bottom - m[3]), self.foreground)
        if self.border[3]:
            vb.generate_box((left + m[1], bottom - m[3] - b[3]),
                            (right - m[2], bottom - m[3]), self.foreground)
        return vb

    def _populate_buffers(self) -> None:
        self.buffer = self.generate_points()
        self.element_count = self.buffer.element_count()

    def close(self) -> None:
        """Hide the widget and detach it from its parent."""
        self.visible = False
        self.parent.remove_child(self)