"""Classification of colour-space identifiers into a small taxonomy."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Union

from pixelkit.errors import UnclassifiableColorSpace
from pixelkit.logging_utils import get_logger

_LOGGER = get_logger("Color")


class ColorSpaceId(str, Enum):
    """Host-neutral names for the colour spaces a platform may report."""

    DISPLAY_P3 = "display-p3"
    DISPLAY_P3_HLG = "display-p3-hlg"
    DISPLAY_P3_PQ = "display-p3-pq"
    DCI_P3 = "dci-p3"
    EXTENDED_LINEAR_DISPLAY_P3 = "extended-linear-display-p3"
    SRGB = "srgb"
    EXTENDED_SRGB = "extended-srgb"
    LINEAR_SRGB = "linear-srgb"
    EXTENDED_LINEAR_SRGB = "extended-linear-srgb"
    EXTENDED_GRAY = "extended-gray"
    GENERIC_GRAY_GAMMA_2_2 = "generic-gray-gamma-2.2"
    LINEAR_GRAY = "linear-gray"
    EXTENDED_LINEAR_GRAY = "extended-linear-gray"
    ADOBE_RGB_1998 = "adobe-rgb-1998"
    GENERIC_CMYK = "generic-cmyk"
    GENERIC_RGB_LINEAR = "generic-rgb-linear"
    ROMM_RGB = "romm-rgb"
    GENERIC_LAB = "generic-lab"
    # Known to hosts but deliberately left out of the table below.
    GENERIC_XYZ = "generic-xyz"
    ITUR_709 = "itur-709"
    ITUR_2020 = "itur-2020"
    ACES_CG_LINEAR = "aces-cg-linear"


class ColorModel(str, Enum):
    GREYSCALE = "greyscale"
    RGB = "rgb"
    CMYK = "cmyk"
    LAB = "lab"


class RgbFamily(str, Enum):
    SRGB = "srgb"
    ADOBE = "adobe"
    P3 = "p3"
    OTHER = "other"


@dataclass(frozen=True)
class RgbKind:
    family: RgbFamily
    linear: bool = False

    def __post_init__(self) -> None:
        if self.family is RgbFamily.ADOBE and self.linear:
            raise ValueError("Adobe RGB has no linear variant")

    @classmethod
    def srgb(cls, linear: bool = False) -> "RgbKind":
        return cls(RgbFamily.SRGB, linear)

    @classmethod
    def adobe(cls) -> "RgbKind":
        return cls(RgbFamily.ADOBE)

    @classmethod
    def p3(cls, linear: bool = False) -> "RgbKind":
        return cls(RgbFamily.P3, linear)

    @classmethod
    def other(cls, linear: bool = False) -> "RgbKind":
        return cls(RgbFamily.OTHER, linear)


@dataclass(frozen=True)
class ColorSpaceKind:
    """Broad kind of a colour space.

    ``linear`` is only meaningful for greyscale; RGB linearity lives on
    ``rgb_kind``. The identifier a kind was derived from is not retained.
    """

    model: ColorModel
    linear: bool = False
    rgb_kind: Optional[RgbKind] = None

    def __post_init__(self) -> None:
        if self.model is ColorModel.RGB:
            if self.rgb_kind is None:
                raise ValueError("RGB colour space kinds need an RgbKind")
            if self.linear:
                raise ValueError("RGB linearity is carried by rgb_kind")
        elif self.rgb_kind is not None:
            raise ValueError(f"{self.model.value} colour space kinds do not take an RgbKind")
        if self.model in (ColorModel.CMYK, ColorModel.LAB) and self.linear:
            raise ValueError(f"{self.model.value} colour space kinds have no linear variant")

    @classmethod
    def greyscale(cls, linear: bool = False) -> "ColorSpaceKind":
        return cls(ColorModel.GREYSCALE, linear=linear)

    @classmethod
    def rgb(cls, kind: RgbKind) -> "ColorSpaceKind":
        return cls(ColorModel.RGB, rgb_kind=kind)

    @classmethod
    def cmyk(cls) -> "ColorSpaceKind":
        return cls(ColorModel.CMYK)

    @classmethod
    def lab(cls) -> "ColorSpaceKind":
        return cls(ColorModel.LAB)

    @property
    def is_rgb(self) -> bool:
        return self.model is ColorModel.RGB

    @property
    def is_greyscale(self) -> bool:
        return self.model is ColorModel.GREYSCALE


# Extended variants classify exactly like their non-extended counterparts.
_KIND_TABLE: Dict[ColorSpaceId, ColorSpaceKind] = {
    ColorSpaceId.DISPLAY_P3: ColorSpaceKind.rgb(RgbKind.p3(linear=False)),
    ColorSpaceId.DISPLAY_P3_HLG: ColorSpaceKind.rgb(RgbKind.p3(linear=False)),
    ColorSpaceId.DISPLAY_P3_PQ: ColorSpaceKind.rgb(RgbKind.p3(linear=False)),
    ColorSpaceId.DCI_P3: ColorSpaceKind.rgb(RgbKind.p3(linear=False)),
    ColorSpaceId.EXTENDED_LINEAR_DISPLAY_P3: ColorSpaceKind.rgb(RgbKind.p3(linear=True)),
    ColorSpaceId.SRGB: ColorSpaceKind.rgb(RgbKind.srgb(linear=False)),
    ColorSpaceId.EXTENDED_SRGB: ColorSpaceKind.rgb(RgbKind.srgb(linear=False)),
    ColorSpaceId.LINEAR_SRGB: ColorSpaceKind.rgb(RgbKind.srgb(linear=True)),
    ColorSpaceId.EXTENDED_LINEAR_SRGB: ColorSpaceKind.rgb(RgbKind.srgb(linear=True)),
    ColorSpaceId.EXTENDED_GRAY: ColorSpaceKind.greyscale(linear=False),
    ColorSpaceId.GENERIC_GRAY_GAMMA_2_2: ColorSpaceKind.greyscale(linear=False),
    ColorSpaceId.LINEAR_GRAY: ColorSpaceKind.greyscale(linear=True),
    ColorSpaceId.EXTENDED_LINEAR_GRAY: ColorSpaceKind.greyscale(linear=True),
    ColorSpaceId.ADOBE_RGB_1998: ColorSpaceKind.rgb(RgbKind.adobe()),
    ColorSpaceId.GENERIC_CMYK: ColorSpaceKind.cmyk(),
    ColorSpaceId.GENERIC_RGB_LINEAR: ColorSpaceKind.rgb(RgbKind.other(linear=True)),
    ColorSpaceId.ROMM_RGB: ColorSpaceKind.rgb(RgbKind.other(linear=False)),
    ColorSpaceId.GENERIC_LAB: ColorSpaceKind.lab(),
}


def coerce_identifier(identifier: Union[ColorSpaceId, str, None]) -> Optional[ColorSpaceId]:
    if identifier is None:
        return None
    if isinstance(identifier, ColorSpaceId):
        return identifier
    try:
        return ColorSpaceId(str(identifier).strip().lower())
    except ValueError:
        return None


def classify_strict(identifier: Union[ColorSpaceId, str, None]) -> ColorSpaceKind:
    """Like :func:`classify` but raise :class:`UnclassifiableColorSpace` for unknown identifiers."""
    known = coerce_identifier(identifier)
    kind = _KIND_TABLE.get(known) if known is not None else None
    if kind is None:
        raise UnclassifiableColorSpace(f"no classification for colour space {identifier!r}")
    return kind


def classify(identifier: Union[ColorSpaceId, str, None]) -> Optional[ColorSpaceKind]:
    """Return the kind of *identifier*, or None when no safe conversion exists."""
    try:
        return classify_strict(identifier)
    except UnclassifiableColorSpace:
        _LOGGER.debug("Unclassified colour space identifier: %r", identifier)
        return None
