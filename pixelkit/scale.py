"""Proportional 1-D and 2-D scale values."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple, Union

DEFAULT_SCALE_TOLERANCE = 0.01


def _reciprocal(value: float) -> float:
    # Zero components invert to a signed infinity instead of raising.
    if value == 0:
        return math.copysign(math.inf, value)
    return 1.0 / value


class _ScaleChecks:
    """Classification shared by every scale type, written against ``all_dimensions``."""

    @property
    def all_dimensions(self) -> Tuple[float, ...]:  # pragma: no cover - overridden
        raise NotImplementedError

    def is_unscaled(self, tolerance: float = DEFAULT_SCALE_TOLERANCE) -> bool:
        """Return True when every component is within *tolerance* of 1."""
        return all(abs(value - 1.0) <= tolerance for value in self.all_dimensions)

    def is_integer(self, tolerance: float = DEFAULT_SCALE_TOLERANCE) -> bool:
        """Return True when every component is within *tolerance* of a whole number."""
        for value in self.all_dimensions:
            if not math.isfinite(value):
                return False
            if abs(value - round(value)) > tolerance:
                return False
        return True


@dataclass(frozen=True)
class Scale1D(_ScaleChecks):
    """A 1-dimensional scale, for stretching along a single axis.

    To scale a 2-dimensional object proportionally use :meth:`Scale2D.proportional`.
    """

    x: float

    @classmethod
    def proportional(cls, value: float) -> "Scale1D":
        return cls(float(value))

    @classmethod
    def unscaled(cls) -> "Scale1D":
        return cls(1.0)

    @property
    def inverted(self) -> "Scale1D":
        return Scale1D(_reciprocal(self.x))

    @property
    def all_dimensions(self) -> Tuple[float, ...]:
        return (self.x,)


@dataclass(frozen=True)
class Scale2D(_ScaleChecks):
    """A 2-dimensional scale with independent horizontal and vertical multipliers."""

    x: float
    y: float

    @classmethod
    def proportional(cls, value: Union[float, Scale1D]) -> "Scale2D":
        """Broadcast a single multiplier (or a :class:`Scale1D`) to both axes."""
        if isinstance(value, Scale1D):
            value = value.x
        both = float(value)
        return cls(both, both)

    @classmethod
    def from_scale1d(cls, scale: Scale1D) -> "Scale2D":
        return cls.proportional(scale)

    @classmethod
    def unscaled(cls) -> "Scale2D":
        return cls(1.0, 1.0)

    @property
    def inverted(self) -> "Scale2D":
        return Scale2D(_reciprocal(self.x), _reciprocal(self.y))

    @property
    def all_dimensions(self) -> Tuple[float, ...]:
        return (self.x, self.y)

    @property
    def first_dimension(self) -> float:
        return self.x

    @property
    def second_dimension(self) -> float:
        return self.y


def proportional(value: Union[float, Scale1D], *, dimensions: int = 2) -> Union[Scale1D, Scale2D]:
    """Build a proportional scale with the requested number of dimensions."""
    if dimensions == 1:
        if isinstance(value, Scale1D):
            return value
        return Scale1D.proportional(value)
    if dimensions == 2:
        return Scale2D.proportional(value)
    raise ValueError(f"Unsupported scale dimensions: {dimensions}")
