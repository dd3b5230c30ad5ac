"""Plain geometry value types: sizes, points, rectangles and edge insets."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from pixelkit.errors import InvalidGeometry

DEFAULT_ORIENTATION_TOLERANCE = 0.01


class Orientation(str, Enum):
    SQUARE = "square"
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


@dataclass(frozen=True)
class EdgeInsets:
    """Four-sided inset, named by leading/trailing edge rather than left/right."""

    top: float = 0.0
    leading: float = 0.0
    bottom: float = 0.0
    trailing: float = 0.0

    @classmethod
    def each(cls, value: float) -> "EdgeInsets":
        return cls(value, value, value, value)

    @classmethod
    def symmetric(cls, vertical: float, horizontal: float) -> "EdgeInsets":
        return cls(top=vertical, leading=horizontal, bottom=vertical, trailing=horizontal)

    @classmethod
    def top_bottom(cls, top: float, horizontal: float, bottom: float) -> "EdgeInsets":
        return cls(top=top, leading=horizontal, bottom=bottom, trailing=horizontal)

    @property
    def horizontal(self) -> float:
        return self.leading + self.trailing

    @property
    def vertical(self) -> float:
        return self.top + self.bottom

    def __neg__(self) -> "EdgeInsets":
        return EdgeInsets(-self.top, -self.leading, -self.bottom, -self.trailing)


Margin = EdgeInsets


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0

    @property
    def first_dimension(self) -> float:
        return self.x

    @property
    def second_dimension(self) -> float:
        return self.y


@dataclass(frozen=True)
class Size:
    """Width/height pair. Sizes with a dimension <= 0 are degenerate."""

    width: float
    height: float

    @classmethod
    def from_width(cls, width: float, aspect_ratio: float) -> "Size":
        """Size with the given width, e.g. ``Size.from_width(1920, 16 / 9)`` for FHD."""
        return cls(width, width / aspect_ratio)

    @classmethod
    def from_height(cls, height: float, aspect_ratio: float) -> "Size":
        return cls(height * aspect_ratio, height)

    @property
    def first_dimension(self) -> float:
        return self.width

    @property
    def second_dimension(self) -> float:
        return self.height

    @property
    def is_degenerate(self) -> bool:
        return not (
            math.isfinite(self.width)
            and math.isfinite(self.height)
            and self.width > 0
            and self.height > 0
        )

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height."""
        if self.is_degenerate:
            raise InvalidGeometry(f"aspect ratio is undefined for {self.width}x{self.height}")
        return self.width / self.height

    def orientation(self, tolerance: float = DEFAULT_ORIENTATION_TOLERANCE) -> Orientation:
        ratio = self.aspect_ratio
        if abs(ratio - 1.0) < tolerance:
            return Orientation.SQUARE
        elif ratio < 1.0:
            return Orientation.PORTRAIT
        return Orientation.LANDSCAPE

    def centered_within(self, container: Union["Rect", "Size"]) -> "Rect":
        return center(self, container)

    def __mul__(self, other: Union["Size", float]) -> "Size":
        if isinstance(other, Size):
            return Size(self.width * other.width, self.height * other.height)
        return Size(self.width * other, self.height * other)

    def __truediv__(self, other: Union["Size", float]) -> "Size":
        if isinstance(other, Size):
            return Size(self.width / other.width, self.height / other.height)
        return Size(self.width / other, self.height / other)

    def __add__(self, other: EdgeInsets) -> "Size":
        if not isinstance(other, EdgeInsets):
            return NotImplemented
        return Size(self.width + other.horizontal, self.height + other.vertical)

    def __sub__(self, other: EdgeInsets) -> "Size":
        if not isinstance(other, EdgeInsets):
            return NotImplemented
        return self + -other


@dataclass(frozen=True)
class Rect:
    origin: Point = field(default_factory=Point)
    size: Size = field(default_factory=lambda: Size(0.0, 0.0))

    @classmethod
    def from_size(cls, size: Size) -> "Rect":
        return cls(Point(0.0, 0.0), size)

    @property
    def x(self) -> float:
        return self.origin.x

    @property
    def y(self) -> float:
        return self.origin.y

    @property
    def width(self) -> float:
        return self.size.width

    @property
    def height(self) -> float:
        return self.size.height

    @property
    def mid_x(self) -> float:
        return self.origin.x + self.size.width / 2.0

    @property
    def mid_y(self) -> float:
        return self.origin.y + self.size.height / 2.0

    def centered_within(self, container: Union["Rect", Size]) -> "Rect":
        return center(self, container)


def center(item: Union[Size, Rect], within: Union[Rect, Size]) -> Rect:
    """Place *item* at the midpoint of *within*.

    A :class:`Size` container is treated as a rectangle at the origin. No
    pixel-grid rounding happens here.
    """
    size = item.size if isinstance(item, Rect) else item
    container = within if isinstance(within, Rect) else Rect.from_size(within)
    origin = Point(
        container.origin.x + (container.size.width - size.width) / 2.0,
        container.origin.y + (container.size.height - size.height) / 2.0,
    )
    return Rect(origin, size)


def rounded_to_nearest_pixel(value: float) -> int:
    """Round half away from zero, so 2.5 -> 3 and -2.5 -> -3."""
    if value < 0:
        return -int(math.floor(-value + 0.5))
    return int(math.floor(value + 0.5))
