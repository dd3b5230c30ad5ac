"""Settings-bound facade over the geometry, scale, colour and option-set helpers."""
from __future__ import annotations

from enum import IntEnum
from typing import Iterable, List, Optional, Type, Union

from pixelkit import aspect, color_convert, color_space, granular, scaling_factor
from pixelkit.aspect import AspectMode
from pixelkit.color_convert import ColorComponents, NativeColor, StandardColor
from pixelkit.color_space import ColorSpaceId, ColorSpaceKind
from pixelkit.config import EngineSettings
from pixelkit.geometry import EdgeInsets, Orientation, Rect, Size, center
from pixelkit.granular import GranularOptionSet
from pixelkit.logging_utils import get_logger
from pixelkit.qt_bridge import primary_device_pixel_ratio
from pixelkit.scale import Scale1D, Scale2D
from pixelkit.scaling_factor import ScalingFactor

_LOGGER = get_logger("Engine")

ScaleValue = Union[Scale1D, Scale2D]


class NormalizationEngine:
    """Applies one :class:`EngineSettings` to every call.

    Logging is left to the host; call :func:`pixelkit.configure_logger` from
    an entry point to get PixelKit's own stderr handler.
    """

    def __init__(self, settings: Optional[EngineSettings] = None) -> None:
        self._settings = settings or EngineSettings()
        _LOGGER.debug("Normalization engine settings: %s", self._settings.as_payload())

    @property
    def settings(self) -> EngineSettings:
        return self._settings

    # Scaling factors
    def classify_scale(self, raw_scale: float) -> ScalingFactor:
        return scaling_factor.classify(raw_scale, self._settings.scaling_factor_tolerance)

    def device_pixel_ratio(self) -> float:
        """Configured ratio, else the primary screen's, else 1.0."""
        if self._settings.device_pixel_ratio is not None:
            return self._settings.device_pixel_ratio
        ratio = primary_device_pixel_ratio()
        if ratio is None:
            _LOGGER.debug("No device pixel ratio available; defaulting to 1.0")
            return 1.0
        return ratio

    def resolve_scale(self, factor: ScalingFactor) -> float:
        return scaling_factor.resolve(factor, self.device_pixel_ratio())

    # Scales
    def is_unscaled(self, scale: ScaleValue) -> bool:
        return scale.is_unscaled(self._settings.scale_tolerance)

    def is_integer_scale(self, scale: ScaleValue) -> bool:
        return scale.is_integer(self._settings.scale_tolerance)

    # Geometry
    def resized(
        self,
        source: Size,
        bound: Size,
        mode: Union[AspectMode, str, None] = None,
        margin: Optional[EdgeInsets] = None,
    ) -> Size:
        return aspect.resized(source, bound, mode or self._settings.aspect_mode, margin)

    def fit(self, source: Size, bound: Size, margin: Optional[EdgeInsets] = None) -> Size:
        return aspect.fit(source, bound, margin)

    def fill(self, source: Size, bound: Size, margin: Optional[EdgeInsets] = None) -> Size:
        return aspect.fill(source, bound, margin)

    def orientation(self, size: Size) -> Orientation:
        return size.orientation(self._settings.orientation_tolerance)

    def center(self, item: Union[Size, Rect], within: Union[Rect, Size]) -> Rect:
        return center(item, within)

    # Colour
    def classify_color_space(self, identifier: Union[ColorSpaceId, str, None]) -> Optional[ColorSpaceKind]:
        return color_space.classify(identifier)

    def convert_color(self, components: ColorComponents) -> Optional[StandardColor]:
        return color_convert.convert(components)

    def convert_native_color(self, native: NativeColor) -> Optional[StandardColor]:
        return color_convert.convert_with_fallback(native)

    # Option sets
    def build_option_set(self, granule_type: Type[IntEnum], granules: Iterable[IntEnum]) -> GranularOptionSet:
        granular.validate_granules(granule_type, self._settings.granule_bit_width)
        return granular.construct(granule_type, granules)

    def option_granules(self, option_set: GranularOptionSet) -> List[IntEnum]:
        return granular.decode(option_set)
