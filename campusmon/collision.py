"""Collision tests between transformed sprites.

A sprite is a rectangle cut out of an alpha mask, placed in the world by a
position, an origin, a scale and a rotation in degrees (clockwise on screen,
with y pointing down).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

Point = tuple[float, float]
Rect = tuple[float, float, float, float]


@dataclass
class Sprite:
    """A piece of an alpha mask placed in the world.

    ``alpha`` holds one row of alpha values per texture line.
    ``texture_rect`` is ``(left, top, width, height)`` in texture pixels and
    defaults to the whole mask.
    """

    alpha: Sequence[Sequence[int]]
    position: Point = (0.0, 0.0)
    origin: Point = (0.0, 0.0)
    scale: Point = (1.0, 1.0)
    rotation: float = 0.0
    texture_rect: Optional[tuple[int, int, int, int]] = None

    def __post_init__(self) -> None:
        if self.texture_rect is None:
            width, height = self.texture_size
            self.texture_rect = (0, 0, width, height)

    @property
    def texture_size(self) -> tuple[int, int]:
        """Width and height of the whole alpha mask."""
        if not self.alpha:
            return (0, 0)
        return (len(self.alpha[0]), len(self.alpha))

    def alpha_at(self, x: int, y: int) -> int:
        """Alpha of a texture pixel; pixels outside the mask are transparent."""
        width, height = self.texture_size
        if 0 <= x < width and 0 <= y < height:
            return self.alpha[y][x]
        return 0

    def _rotation(self) -> tuple[float, float]:
        angle = math.radians(self.rotation)
        return math.cos(angle), math.sin(angle)

    def transform_point(self, x: float, y: float) -> Point:
        """Map a point from sprite-local coordinates to the world."""
        cos, sin = self._rotation()
        local_x = (x - self.origin[0]) * self.scale[0]
        local_y = (y - self.origin[1]) * self.scale[1]
        return (
            local_x * cos - local_y * sin + self.position[0],
            local_x * sin + local_y * cos + self.position[1],
        )

    def inverse_transform_point(self, x: float, y: float) -> Point:
        """Map a world point back into sprite-local coordinates."""
        scale_x, scale_y = self.scale
        if scale_x == 0 or scale_y == 0:
            raise ValueError("a sprite with zero scale has no inverse transform")
        cos, sin = self._rotation()
        dx = x - self.position[0]
        dy = y - self.position[1]
        local_x = dx * cos + dy * sin
        local_y = -dx * sin + dy * cos
        return (local_x / scale_x + self.origin[0], local_y / scale_y + self.origin[1])

    def _corners(self) -> list[Point]:
        _, _, width, height = self.texture_rect
        return [
            self.transform_point(0.0, 0.0),
            self.transform_point(width, 0.0),
            self.transform_point(width, height),
            self.transform_point(0.0, height),
        ]

    def global_bounds(self) -> Rect:
        """Axis-aligned bounds in the world as ``(left, top, width, height)``."""
        corners = self._corners()
        xs = [p[0] for p in corners]
        ys = [p[1] for p in corners]
        left, top = min(xs), min(ys)
        return (left, top, max(xs) - left, max(ys) - top)

    def center(self) -> Point:
        """Centre of the global bounds."""
        left, top, width, height = self.global_bounds()
        return (left + width / 2.0, top + height / 2.0)

    def size(self) -> Point:
        """Scaled size of the texture rectangle, ignoring rotation."""
        _, _, width, height = self.texture_rect
        return (width * self.scale[0], height * self.scale[1])


def _intersection(first: Rect, second: Rect) -> Optional[Rect]:
    def span(rect: Rect) -> tuple[float, float, float, float]:
        left, top, width, height = rect
        return (
            min(left, left + width),
            min(top, top + height),
            max(left, left + width),
            max(top, top + height),
        )

    a_left, a_top, a_right, a_bottom = span(first)
    b_left, b_top, b_right, b_bottom = span(second)
    left = max(a_left, b_left)
    top = max(a_top, b_top)
    right = min(a_right, b_right)
    bottom = min(a_bottom, b_bottom)
    if left < right and top < bottom:
        return (left, top, right - left, bottom - top)
    return None


def _inside(local: Point, rect: tuple[int, int, int, int]) -> bool:
    return 0 < local[0] < rect[2] and 0 < local[1] < rect[3]


def pixel_perfect_test(first: Sprite, second: Sprite, alpha_limit: int = 0) -> bool:
    """True if an overlapping pixel is more opaque than ``alpha_limit`` in both sprites."""
    overlap = _intersection(first.global_bounds(), second.global_bounds())
    if overlap is None:
        return False
    left, top, width, height = overlap
    rect1 = first.texture_rect
    rect2 = second.texture_rect
    for i in range(int(left), math.ceil(left + width)):
        for j in range(int(top), math.ceil(top + height)):
            local1 = first.inverse_transform_point(i, j)
            local2 = second.inverse_transform_point(i, j)
            if not (_inside(local1, rect1) and _inside(local2, rect2)):
                continue
            alpha1 = first.alpha_at(int(local1[0]) + rect1[0], int(local1[1]) + rect1[1])
            alpha2 = second.alpha_at(int(local2[0]) + rect2[0], int(local2[1]) + rect2[1])
            if alpha1 > alpha_limit and alpha2 > alpha_limit:
                return True
    return False


def circle_test(first: Sprite, second: Sprite) -> bool:
    """Collision of the circles whose radii average each sprite's dimensions."""
    size1 = first.size()
    size2 = second.size()
    radius1 = (size1[0] + size1[1]) / 4
    radius2 = (size2[0] + size2[1]) / 4
    center1 = first.center()
    center2 = second.center()
    dx = center1[0] - center2[0]
    dy = center1[1] - center2[1]
    return dx * dx + dy * dy <= (radius1 + radius2) ** 2


class OrientedBoundingBox:
    """The four world corners of a transformed sprite."""

    def __init__(self, sprite: Sprite) -> None:
        self.points: list[Point] = sprite._corners()

    def project(self, axis: Point) -> tuple[float, float]:
        """Smallest and largest dot product of the corners with ``axis``."""
        projections = [p[0] * axis[0] + p[1] * axis[1] for p in self.points]
        return min(projections), max(projections)


def bounding_box_test(first: Sprite, second: Sprite) -> bool:
    """Separating-axis test between the oriented boxes of two sprites."""
    box1 = OrientedBoundingBox(first)
    box2 = OrientedBoundingBox(second)
    p1, p2 = box1.points, box2.points
    axes = [
        (p1[1][0] - p1[0][0], p1[1][1] - p1[0][1]),
        (p1[1][0] - p1[2][0], p1[1][1] - p1[2][1]),
        (p2[0][0] - p2[3][0], p2[0][1] - p2[3][1]),
        (p2[0][0] - p2[1][0], p2[0][1] - p2[1][1]),
    ]
    for axis in axes:
        min1, max1 = box1.project(axis)
        min2, max2 = box2.project(axis)
        if not (min2 <= max1 and max2 >= min1):
            return False
    return True