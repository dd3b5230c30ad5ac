"""Conversion of classified colour components into a small set of standard RGB spaces."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, Sequence, Tuple, Union

from pixelkit.color_space import (
    ColorModel,
    ColorSpaceId,
    ColorSpaceKind,
    RgbFamily,
    RgbKind,
    classify,
    classify_strict,
    coerce_identifier,
)
from pixelkit.errors import UnclassifiableColorSpace, UnsupportedColorConversion
from pixelkit.logging_utils import get_logger

_LOGGER = get_logger("Color")

MAX_COMPONENTS = 4


class TargetColorSpace(str, Enum):
    STANDARD = "standard"  # gamma-encoded sRGB
    STANDARD_LINEAR = "standard_linear"
    WIDE_GAMUT = "wide_gamut"  # Display P3


@dataclass(frozen=True)
class StandardColor:
    space: TargetColorSpace
    red: float
    green: float
    blue: float
    alpha: float = 1.0
    monochrome: bool = False

    @classmethod
    def white(cls, white: float, alpha: float = 1.0) -> "StandardColor":
        """Grey colour; linear and gamma greys both land in the standard space."""
        value = float(white)
        return cls(TargetColorSpace.STANDARD, value, value, value, float(alpha), monochrome=True)

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return self.red, self.green, self.blue, self.alpha


@dataclass(frozen=True)
class ColorComponents:
    """One to four channel values expressed in ``kind``; alpha is the trailing extra channel."""

    values: Tuple[float, ...]
    kind: ColorSpaceKind

    def __post_init__(self) -> None:
        values = tuple(float(value) for value in self.values)
        if not 1 <= len(values) <= MAX_COMPONENTS:
            raise ValueError(f"colour components need 1-{MAX_COMPONENTS} values, got {len(values)}")
        object.__setattr__(self, "values", values)

    @classmethod
    def for_identifier(
        cls,
        values: Sequence[float],
        identifier: Union[ColorSpaceId, str, None],
    ) -> Optional["ColorComponents"]:
        """Attach the classified kind of *identifier*, or return None when it is unknown."""
        kind = classify(identifier)
        if kind is None:
            return None
        return cls(tuple(values), kind)


class NativeColor(Protocol):
    """A host colour value that can be fed to :func:`convert_with_fallback`."""

    @property
    def color_space_id(self) -> Union[ColorSpaceId, str, None]: ...

    @property
    def components(self) -> Sequence[float]: ...

    @property
    def alpha(self) -> float: ...

    def interchange(self) -> Optional[ColorComponents]:
        """Device-independent RGBA re-derivation of the colour, when the host can produce one."""
        ...


def rgb_target(kind: RgbKind) -> TargetColorSpace:
    if kind.family is RgbFamily.P3:
        return TargetColorSpace.WIDE_GAMUT
    if kind.family is RgbFamily.ADOBE:
        return TargetColorSpace.STANDARD
    if kind.linear:
        return TargetColorSpace.STANDARD_LINEAR
    return TargetColorSpace.STANDARD


_DIRECT_RGB_TARGETS = {
    ColorSpaceId.DISPLAY_P3: TargetColorSpace.WIDE_GAMUT,
    ColorSpaceId.SRGB: TargetColorSpace.STANDARD,
    ColorSpaceId.EXTENDED_SRGB: TargetColorSpace.STANDARD,
    ColorSpaceId.LINEAR_SRGB: TargetColorSpace.STANDARD_LINEAR,
    ColorSpaceId.EXTENDED_LINEAR_SRGB: TargetColorSpace.STANDARD_LINEAR,
}


def rgb_target_for_identifier(identifier: Union[ColorSpaceId, str, None]) -> Optional[TargetColorSpace]:
    """Target space for identifiers with an unambiguous one-to-one standard analogue.

    Greyscale, CMYK and approximated RGB spaces (Adobe, ROMM, P3 variants
    other than Display P3) return None even though :func:`convert` accepts them.
    """
    known = coerce_identifier(identifier)
    if known is None:
        return None
    return _DIRECT_RGB_TARGETS.get(known)


def convert_strict(components: ColorComponents) -> StandardColor:
    """Like :func:`convert` but raise :class:`UnsupportedColorConversion` instead of returning None."""
    kind = components.kind
    values = components.values
    if kind.model is ColorModel.RGB:
        if len(values) < 3:
            raise UnsupportedColorConversion(f"RGB colours need 3 components, got {len(values)}")
        alpha = values[3] if len(values) >= 4 else 1.0
        return StandardColor(rgb_target(kind.rgb_kind), values[0], values[1], values[2], alpha)  # type: ignore[arg-type]
    if kind.model is ColorModel.GREYSCALE:
        alpha = values[1] if len(values) >= 2 else 1.0
        return StandardColor.white(values[0], alpha)
    raise UnsupportedColorConversion(f"no direct conversion from {kind.model.value}")


def convert(components: ColorComponents) -> Optional[StandardColor]:
    """Convert classified components, returning None for CMYK, Lab or missing channels."""
    try:
        return convert_strict(components)
    except UnsupportedColorConversion as exc:
        _LOGGER.debug("Colour conversion unavailable: %s", exc)
        return None


def _direct_native(native: NativeColor, kind: ColorSpaceKind) -> Optional[StandardColor]:
    values = tuple(native.components)
    if kind.is_rgb and len(values) >= 3:
        return StandardColor(
            rgb_target(kind.rgb_kind),  # type: ignore[arg-type]
            float(values[0]),
            float(values[1]),
            float(values[2]),
            float(native.alpha),
        )
    return None


def _monochrome_native(native: NativeColor, kind: ColorSpaceKind) -> Optional[StandardColor]:
    values = tuple(native.components)
    if kind.is_greyscale and len(values) >= 1:
        return StandardColor.white(float(values[0]), float(native.alpha))
    return None


def convert_with_fallback(native: NativeColor) -> Optional[StandardColor]:
    """Convert a host colour through an explicit three-step cascade.

    1. RGB-family colour spaces convert their red/green/blue components directly.
    2. Greyscale colour spaces convert their white component.
    3. Otherwise the colour is re-derived as device-independent RGBA
       components and converted once more.

    Returns None only when all three steps fail.
    """
    kind: Optional[ColorSpaceKind]
    try:
        kind = classify_strict(native.color_space_id)
    except UnclassifiableColorSpace:
        kind = None

    if kind is not None:
        direct = _direct_native(native, kind)
        if direct is not None:
            return direct
        monochrome = _monochrome_native(native, kind)
        if monochrome is not None:
            _LOGGER.debug("Converted %r through its white component", native.color_space_id)
            return monochrome

    interchange = native.interchange()
    if interchange is None:
        _LOGGER.debug("No interchange form for colour in %r; conversion failed", native.color_space_id)
        return None
    _LOGGER.debug("Re-deriving colour in %r through its interchange form", native.color_space_id)
    return convert(interchange)
