"""Points, sizes, rectangles and 3x2 affine matrices."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point:
    """A 2D point or vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, value: float) -> Point:
        return Point(self.x * value, self.y * value)

    def __truediv__(self, value: float) -> Point:
        return Point(self.x / value, self.y / value)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def to_size(self) -> Size:
        """Return a size with this point's coordinates."""
        return Size(self.x, self.y)

    @staticmethod
    def distance(p1: Point, p2: Point) -> float:
        """Euclidean distance between two points."""
        return math.hypot(p1.x - p2.x, p1.y - p2.y)


Vector2 = Point


@dataclass(frozen=True)
class Size:
    """A width and a height."""

    width: float = 0.0
    height: float = 0.0

    def __add__(self, other: Size) -> Size:
        return Size(self.width + other.width, self.height + other.height)

    def __sub__(self, other: Size) -> Size:
        return Size(self.width - other.width, self.height - other.height)

    def __mul__(self, value: float) -> Size:
        return Size(self.width * value, self.height * value)

    def __truediv__(self, value: float) -> Size:
        return Size(self.width / value, self.height / value)

    def __neg__(self) -> Size:
        return Size(-self.width, -self.height)

    def to_point(self) -> Point:
        """Return a point with this size's dimensions."""
        return Point(self.width, self.height)


@dataclass
class Rect:
    """An axis-aligned rectangle given by its origin and size."""

    origin: Point = field(default_factory=Point)
    size: Size = field(default_factory=Size)

    @staticmethod
    def from_values(x: float, y: float, width: float, height: float) -> Rect:
        return Rect(Point(x, y), Size(width, height))

    def set_rect(self, x: float, y: float, width: float, height: float) -> None:
        self.origin = Point(x, y)
        self.size = Size(width, height)

    def left_top(self) -> Point:
        return self.origin

    def right_top(self) -> Point:
        return Point(self.origin.x + self.size.width, self.origin.y)

    def left_bottom(self) -> Point:
        return Point(self.origin.x, self.origin.y + self.size.height)

    def right_bottom(self) -> Point:
        return Point(self.origin.x + self.size.width, self.origin.y + self.size.height)

    def contains_point(self, point: Point) -> bool:
        """True if the point lies inside or on the edge of the rectangle."""
        return (
            self.origin.x <= point.x <= self.origin.x + self.size.width
            and self.origin.y <= point.y <= self.origin.y + self.size.height
        )

    def intersects(self, other: Rect) -> bool:
        """True if the two rectangles overlap or touch."""
        return not (
            self.origin.x + self.size.width < other.origin.x
            or other.origin.x + other.size.width < self.origin.x
            or self.origin.y + self.size.height < other.origin.y
            or other.origin.y + other.size.height < self.origin.y
        )


@dataclass
class Matrix32:
    """A 3x2 affine transform in row-vector convention; angles are in degrees."""

    m11: float = 1.0
    m12: float = 0.0
    m21: float = 0.0
    m22: float = 1.0
    m31: float = 0.0
    m32: float = 0.0

    def __getitem__(self, index: int) -> float:
        return (self.m11, self.m12, self.m21, self.m22, self.m31, self.m32)[index]

    def identity(self) -> None:
        """Reset this matrix to the identity."""
        self.m11, self.m12 = 1.0, 0.0
        self.m21, self.m22 = 0.0, 1.0
        self.m31, self.m32 = 0.0, 0.0

    def transform_point(self, v: Point) -> Point:
        return Point(
            v.x * self.m11 + v.y * self.m21 + self.m31,
            v.x * self.m12 + v.y * self.m22 + self.m32,
        )

    def transform_rect(self, rect: Rect) -> Rect:
        """Return the bounding box of the transformed rectangle."""
        corners = [
            self.transform_point(corner)
            for corner in (rect.left_top(), rect.right_top(), rect.left_bottom(), rect.right_bottom())
        ]
        xs = [c.x for c in corners]
        ys = [c.y for c in corners]
        left, right = min(xs), max(xs)
        top, bottom = min(ys), max(ys)
        return Rect.from_values(left, top, right - left, bottom - top)

    def translate(self, x: float, y: float) -> None:
        self.m31 += self.m11 * x + self.m21 * y
        self.m32 += self.m12 * x + self.m22 * y

    def determinant(self) -> float:
        return self.m11 * self.m22 - self.m12 * self.m21

    def is_identity(self) -> bool:
        return (
            self.m11 == 1.0 and self.m12 == 0.0
            and self.m21 == 0.0 and self.m22 == 1.0
            and self.m31 == 0.0 and self.m32 == 0.0
        )

    def is_invertible(self) -> bool:
        return self.determinant() != 0

    @staticmethod
    def translation(x: float, y: float) -> Matrix32:
        return Matrix32(1.0, 0.0, 0.0, 1.0, x, y)

    @staticmethod
    def scaling(x: float, y: float, center: Point = Point()) -> Matrix32:
        return Matrix32(x, 0.0, 0.0, y, center.x - x * center.x, center.y - y * center.y)

    @staticmethod
    def rotation(angle: float, center: Point = Point()) -> Matrix32:
        s = math.sin(math.radians(angle))
        c = math.cos(math.radians(angle))
        return Matrix32(
            c, s,
            -s, c,
            center.x * (1 - c) + center.y * s,
            center.y * (1 - c) - center.x * s,
        )

    @staticmethod
    def skewing(angle_x: float, angle_y: float, center: Point = Point()) -> Matrix32:
        tx = math.tan(math.radians(angle_x))
        ty = math.tan(math.radians(angle_y))
        return Matrix32(1.0, -ty, -tx, 1.0, center.y * tx, center.x * ty)

    @staticmethod
    def invert(matrix: Matrix32) -> Matrix32:
        """Return the inverse; raises ZeroDivisionError for a singular matrix."""
        det = 1.0 / matrix.determinant()
        return Matrix32(
            det * matrix.m22,
            -det * matrix.m12,
            -det * matrix.m21,
            det * matrix.m11,
            det * (matrix.m21 * matrix.m32 - matrix.m22 * matrix.m31),
            det * (matrix.m12 * matrix.m31 - matrix.m11 * matrix.m32),
        )