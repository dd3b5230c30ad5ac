"""Aspect-preserving fit/fill size calculations."""
from __future__ import annotations

import math
import operator
from enum import Enum
from typing import Optional, Union

from pixelkit.errors import InvalidGeometry
from pixelkit.geometry import EdgeInsets, Size
from pixelkit.logging_utils import get_logger
from pixelkit.scale import Scale1D

_LOGGER = get_logger("Aspect")


class AspectMode(str, Enum):
    FIT = "fit"
    FILL = "fill"


# Compares the cross products bound.w * source.h and bound.h * source.w, which
# order the width and height ratios without dividing.
_USE_WIDTH_RATIO = {
    AspectMode.FIT: operator.lt,
    AspectMode.FILL: operator.gt,
}


def _require_positive(size: Size, role: str) -> None:
    if size.is_degenerate:
        _LOGGER.debug("Rejecting degenerate %s size %sx%s", role, size.width, size.height)
        raise InvalidGeometry(f"{role} dimensions must be finite and positive, got {size.width}x{size.height}")


def _coerce_mode(mode: Union[AspectMode, str]) -> AspectMode:
    if isinstance(mode, AspectMode):
        return mode
    try:
        return AspectMode(str(mode).strip().lower())
    except ValueError:
        raise ValueError(f"Unsupported aspect mode: {mode}") from None


def _width_ratio_wins(source: Size, bound: Size, mode: Union[AspectMode, str]) -> bool:
    _require_positive(source, "source")
    _require_positive(bound, "bound")
    chooser = _USE_WIDTH_RATIO[_coerce_mode(mode)]
    return chooser(bound.width * source.height, bound.height * source.width)


def aspect_multiplier(source: Size, bound: Size, mode: Union[AspectMode, str]) -> Scale1D:
    """Return the single ratio that maps *source* onto *bound* for *mode*."""
    if _width_ratio_wins(source, bound, mode):
        return Scale1D(bound.width / source.width)
    return Scale1D(bound.height / source.height)


def resized(
    source: Size,
    bound: Size,
    mode: Union[AspectMode, str],
    margin: Optional[EdgeInsets] = None,
) -> Size:
    """Calculate the size *source* takes when scaled into *bound* under *mode*.

    The axis whose ratio wins takes the bound's whole-unit extent; the other
    axis is scaled by the same ratio and floored, multiplying before dividing
    so whole-number inputs never lose a unit to rounding. When *margin* is
    given it is subtracted from the bound first.
    """
    if margin is not None:
        bound = bound - margin
    if _width_ratio_wins(source, bound, mode):
        width = math.floor(bound.width)
        height = math.floor(source.height * bound.width / source.width)
    else:
        width = math.floor(source.width * bound.height / source.height)
        height = math.floor(bound.height)
    return Size(float(width), float(height))


def fit(source: Size, bound: Size, margin: Optional[EdgeInsets] = None) -> Size:
    """Largest aspect-preserving size fully contained in *bound* (no cropping)."""
    return resized(source, bound, AspectMode.FIT, margin)


def fill(source: Size, bound: Size, margin: Optional[EdgeInsets] = None) -> Size:
    """Smallest aspect-preserving size that fully covers *bound* (no letterboxing)."""
    return resized(source, bound, AspectMode.FILL, margin)
