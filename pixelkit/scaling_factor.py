"""Named display scaling tiers (device / 1x / 2x / 3x / custom)."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pixelkit.logging_utils import get_logger

DEFAULT_SCALING_TOLERANCE = 0.01

_LOGGER = get_logger("Scaling")


class ScalingTier(str, Enum):
    DEVICE = "device"  # resolved later to the host display's pixel ratio
    PER_PIXEL = "per_pixel"
    RETINA_2X = "retina_2x"
    RETINA_3X = "retina_3x"
    CUSTOM = "custom"


@dataclass(frozen=True)
class ScalingFactor:
    """A scaling tier, carrying an explicit multiplier only for ``CUSTOM``."""

    tier: ScalingTier
    custom_multiplier: Optional[float] = None

    def __post_init__(self) -> None:
        if self.tier is ScalingTier.CUSTOM:
            if self.custom_multiplier is None:
                raise ValueError("custom scaling factors need a multiplier")
        elif self.custom_multiplier is not None:
            raise ValueError(f"{self.tier.value} scaling factors do not take a multiplier")

    @classmethod
    def custom(cls, multiplier: float) -> "ScalingFactor":
        return cls(ScalingTier.CUSTOM, float(multiplier))

    @classmethod
    def from_cg_scale(cls, raw_scale: float, tolerance: float = DEFAULT_SCALING_TOLERANCE) -> "ScalingFactor":
        return classify(raw_scale, tolerance)

    @property
    def cg_scale(self) -> float:
        """The raw scale value, where ``0`` stands for the device tier."""
        if self.tier is ScalingTier.DEVICE:
            return 0.0
        if self.tier is ScalingTier.PER_PIXEL:
            return 1.0
        if self.tier is ScalingTier.RETINA_2X:
            return 2.0
        if self.tier is ScalingTier.RETINA_3X:
            return 3.0
        return float(self.custom_multiplier)  # type: ignore[arg-type]

    def multiplier(self, device_multiplier: float) -> float:
        return resolve(self, device_multiplier)


DEVICE = ScalingFactor(ScalingTier.DEVICE)
PER_PIXEL = ScalingFactor(ScalingTier.PER_PIXEL)
RETINA_2X = ScalingFactor(ScalingTier.RETINA_2X)
RETINA_3X = ScalingFactor(ScalingTier.RETINA_3X)


def classify(raw_scale: float, tolerance: float = DEFAULT_SCALING_TOLERANCE) -> ScalingFactor:
    """Map a raw multiplier onto the nearest named tier.

    Tiers are tested in the fixed order 0 (device), 1, 2, 3 and the first one
    strictly closer than ``tolerance`` wins, so a wide tolerance resolves
    overlaps toward the lower tier. ``0`` means the device tier, not a zero scale.
    """
    tolerance = abs(tolerance)
    raw = float(raw_scale)
    if abs(raw - 0.0) < tolerance:
        return DEVICE
    elif abs(raw - 1.0) < tolerance:
        return PER_PIXEL
    elif abs(raw - 2.0) < tolerance:
        return RETINA_2X
    elif abs(raw - 3.0) < tolerance:
        return RETINA_3X
    _LOGGER.debug("Scale %.4f is outside every named tier (tolerance=%s); using custom", raw, tolerance)
    return ScalingFactor.custom(raw)


def resolve(factor: ScalingFactor, device_multiplier: float) -> float:
    """Return the numeric multiplier, substituting *device_multiplier* for the device tier."""
    if factor.tier is ScalingTier.DEVICE:
        return float(device_multiplier)
    return factor.cg_scale
