"""PyQt6 adapters for the host-side collaborators (colours, colour spaces, display ratio)."""
from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple

from PyQt6.QtGui import QColor, QColorSpace, QGuiApplication

from pixelkit.color_convert import ColorComponents, StandardColor, TargetColorSpace
from pixelkit.color_space import ColorSpaceId, ColorSpaceKind, RgbKind
from pixelkit.logging_utils import get_logger

_LOGGER = get_logger("Qt")

_NAMED_SPACES: Tuple[Tuple[QColorSpace.NamedColorSpace, ColorSpaceId], ...] = (
    (QColorSpace.NamedColorSpace.SRgb, ColorSpaceId.SRGB),
    (QColorSpace.NamedColorSpace.SRgbLinear, ColorSpaceId.LINEAR_SRGB),
    (QColorSpace.NamedColorSpace.AdobeRgb, ColorSpaceId.ADOBE_RGB_1998),
    (QColorSpace.NamedColorSpace.DisplayP3, ColorSpaceId.DISPLAY_P3),
    (QColorSpace.NamedColorSpace.ProPhotoRgb, ColorSpaceId.ROMM_RGB),
)

_TARGET_SPACES = {
    TargetColorSpace.STANDARD: QColorSpace.NamedColorSpace.SRgb,
    TargetColorSpace.STANDARD_LINEAR: QColorSpace.NamedColorSpace.SRgbLinear,
    TargetColorSpace.WIDE_GAMUT: QColorSpace.NamedColorSpace.DisplayP3,
}

_EXTENDED_IDS = {
    ColorSpaceId.SRGB: ColorSpaceId.EXTENDED_SRGB,
    ColorSpaceId.LINEAR_SRGB: ColorSpaceId.EXTENDED_LINEAR_SRGB,
}


def color_space_id_from_qt(color_space: QColorSpace) -> Optional[ColorSpaceId]:
    """Map a named ``QColorSpace`` onto a host-neutral identifier (None for custom spaces)."""
    if not color_space.isValid():
        return None
    for named, identifier in _NAMED_SPACES:
        if color_space == QColorSpace(named):
            return identifier
    return None


def qt_color_space(target: TargetColorSpace) -> QColorSpace:
    return QColorSpace(_TARGET_SPACES[target])


def to_qcolor(color: StandardColor) -> QColor:
    """Build a ``QColor`` from converted components; pair it with :func:`qt_color_space`."""
    return QColor.fromRgbF(color.red, color.green, color.blue, color.alpha)


class QColorAdapter:
    """Presents a ``QColor`` (plus the space its RGB values live in) as a native colour."""

    def __init__(self, color: QColor, color_space: Optional[QColorSpace] = None) -> None:
        self._color = QColor(color)
        self._color_space = color_space

    @property
    def color(self) -> QColor:
        return QColor(self._color)

    def _rgb_space_id(self) -> Optional[ColorSpaceId]:
        if self._color_space is None:
            return ColorSpaceId.SRGB
        return color_space_id_from_qt(self._color_space)

    @property
    def color_space_id(self) -> Optional[ColorSpaceId]:
        spec = self._color.spec()
        if spec == QColor.Spec.Rgb:
            return self._rgb_space_id()
        if spec == QColor.Spec.ExtendedRgb:
            base = self._rgb_space_id()
            if base is None:
                return None
            return _EXTENDED_IDS.get(base, base)
        if spec == QColor.Spec.Cmyk:
            return ColorSpaceId.GENERIC_CMYK
        # HSV, HSL and invalid colours only convert through the interchange form.
        return None

    @property
    def components(self) -> Sequence[float]:
        spec = self._color.spec()
        if spec in (QColor.Spec.Rgb, QColor.Spec.ExtendedRgb):
            red, green, blue, _alpha = self._color.getRgbF()
            return (red, green, blue)
        if spec == QColor.Spec.Cmyk:
            cyan, magenta, yellow, black, _alpha = self._color.getCmykF()
            return (cyan, magenta, yellow, black)
        return ()

    @property
    def alpha(self) -> float:
        return float(self._color.alphaF())

    def interchange(self) -> Optional[ColorComponents]:
        if not self._color.isValid():
            return None
        red, green, blue, alpha = self._color.toRgb().getRgbF()
        return ColorComponents((red, green, blue, alpha), ColorSpaceKind.rgb(RgbKind.srgb()))


def primary_device_pixel_ratio() -> Optional[float]:
    """Pixel ratio of the primary screen, or None without a running GUI application."""
    app = QGuiApplication.instance()
    if not isinstance(app, QGuiApplication):
        return None
    screen = QGuiApplication.primaryScreen()
    if screen is None:
        return None
    ratio = float(screen.devicePixelRatio())
    if not math.isfinite(ratio) or ratio <= 0.0:
        _LOGGER.debug("Ignoring unusable primary screen pixel ratio %s", ratio)
        return None
    return ratio
