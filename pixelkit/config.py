"""Configuration helpers for the normalisation engine."""
from __future__ import annotations

import json
import math
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

DEFAULT_SETTINGS_FILENAME = "pixelkit.json"
TOLERANCE_ENV_VAR = "PIXELKIT_TOLERANCE"
DEVICE_RATIO_ENV_VAR = "PIXELKIT_DEVICE_RATIO"

_MAX_TOLERANCE = 1.0
_MIN_BIT_WIDTH = 1
_MAX_BIT_WIDTH = 1024


def _coerce_tolerance(value: Any) -> Optional[float]:
    if value is None:
        return None
    try:
        numeric = abs(float(value))
    except (TypeError, ValueError):
        return None
    if not math.isfinite(numeric):
        return None
    return min(numeric, _MAX_TOLERANCE)


def _coerce_ratio(value: Any) -> Optional[float]:
    if value is None:
        return None
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(numeric) or numeric <= 0.0:
        return None
    return numeric


def _coerce_bit_width(value: Any, fallback: int) -> int:
    if value is None:
        return fallback
    try:
        numeric = int(value)
    except (TypeError, ValueError):
        return fallback
    return max(_MIN_BIT_WIDTH, min(numeric, _MAX_BIT_WIDTH))


@dataclass(frozen=True)
class EngineSettings:
    """Tolerances and defaults applied by :class:`pixelkit.engine.NormalizationEngine`."""

    scale_tolerance: float = 0.01
    scaling_factor_tolerance: float = 0.01
    orientation_tolerance: float = 0.01
    device_pixel_ratio: Optional[float] = None
    granule_bit_width: int = 64
    aspect_mode: str = "fit"

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "EngineSettings":
        """Create an instance from a loosely typed mapping, keeping defaults for bad values."""
        defaults = cls()

        def _tolerance(key: str, fallback: float) -> float:
            value = _coerce_tolerance(payload.get(key))
            return fallback if value is None else value

        mode_token = defaults.aspect_mode
        mode_value = payload.get("aspect_mode")
        if mode_value is not None:
            token = str(mode_value).strip().lower()
            if token in {"fit", "fill"}:
                mode_token = token

        return cls(
            scale_tolerance=_tolerance("scale_tolerance", defaults.scale_tolerance),
            scaling_factor_tolerance=_tolerance("scaling_factor_tolerance", defaults.scaling_factor_tolerance),
            orientation_tolerance=_tolerance("orientation_tolerance", defaults.orientation_tolerance),
            device_pixel_ratio=_coerce_ratio(payload.get("device_pixel_ratio")),
            granule_bit_width=_coerce_bit_width(payload.get("granule_bit_width"), defaults.granule_bit_width),
            aspect_mode=mode_token,
        )

    def as_payload(self) -> Dict[str, Any]:
        return {
            "scale_tolerance": self.scale_tolerance,
            "scaling_factor_tolerance": self.scaling_factor_tolerance,
            "orientation_tolerance": self.orientation_tolerance,
            "device_pixel_ratio": self.device_pixel_ratio,
            "granule_bit_width": self.granule_bit_width,
            "aspect_mode": self.aspect_mode,
        }


def apply_env_overrides(settings: EngineSettings) -> EngineSettings:
    """Apply ``PIXELKIT_TOLERANCE`` and ``PIXELKIT_DEVICE_RATIO`` on top of *settings*."""
    overrides: Dict[str, Any] = {}
    tolerance = _coerce_tolerance((os.getenv(TOLERANCE_ENV_VAR) or "").strip() or None)
    if tolerance is not None:
        overrides["scale_tolerance"] = tolerance
        overrides["scaling_factor_tolerance"] = tolerance
        overrides["orientation_tolerance"] = tolerance
    ratio = _coerce_ratio((os.getenv(DEVICE_RATIO_ENV_VAR) or "").strip() or None)
    if ratio is not None:
        overrides["device_pixel_ratio"] = ratio
    if not overrides:
        return settings
    return replace(settings, **overrides)


def load_settings(settings_path: Optional[Path] = None) -> EngineSettings:
    """Read engine settings from a JSON file, then apply environment overrides."""
    path = settings_path if settings_path is not None else Path.cwd() / DEFAULT_SETTINGS_FILENAME
    defaults = EngineSettings()
    try:
        raw = path.read_text(encoding="utf-8")
    except (FileNotFoundError, OSError):
        return apply_env_overrides(defaults)

    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        return apply_env_overrides(defaults)
    if not isinstance(data, dict):
        return apply_env_overrides(defaults)
    return apply_env_overrides(EngineSettings.from_payload(data))
