from .aspect import AspectMode, fill, fit, resized
from .color_convert import (
    ColorComponents,
    StandardColor,
    TargetColorSpace,
    convert,
    convert_with_fallback,
)
from .color_space import ColorSpaceId, ColorSpaceKind, RgbKind, classify
from .config import EngineSettings, load_settings
from .engine import NormalizationEngine
from .errors import (
    BitWidthOverflow,
    InvalidGeometry,
    PixelKitError,
    UnclassifiableColorSpace,
    UnsupportedColorConversion,
)
from .geometry import EdgeInsets, Orientation, Point, Rect, Size, center
from .granular import GranularOptionSet, granule_enum
from .logging_utils import configure_logger
from .scale import Scale1D, Scale2D, proportional
from .scaling_factor import ScalingFactor, ScalingTier
from .version import __version__

__all__ = [
    "AspectMode",
    "fit",
    "fill",
    "resized",
    "ColorComponents",
    "StandardColor",
    "TargetColorSpace",
    "convert",
    "convert_with_fallback",
    "ColorSpaceId",
    "ColorSpaceKind",
    "RgbKind",
    "classify",
    "EngineSettings",
    "configure_logger",
    "load_settings",
    "NormalizationEngine",
    "PixelKitError",
    "InvalidGeometry",
    "UnclassifiableColorSpace",
    "UnsupportedColorConversion",
    "BitWidthOverflow",
    "EdgeInsets",
    "Orientation",
    "Point",
    "Rect",
    "Size",
    "center",
    "GranularOptionSet",
    "granule_enum",
    "Scale1D",
    "Scale2D",
    "proportional",
    "ScalingFactor",
    "ScalingTier",
    "__version__",
]
