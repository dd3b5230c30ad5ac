"""PixelKit release identifier and the developer-mode switch."""
from __future__ import annotations

import os
import re
from typing import Optional

__all__ = ["__version__", "is_dev_build", "dev_mode_override", "DEV_MODE_ENV_VAR"]

__version__ = "0.3.0"
DEV_MODE_ENV_VAR = "PIXELKIT_DEV_MODE"

_ENABLED = frozenset({"1", "true", "yes", "on"})
_DISABLED = frozenset({"0", "false", "no", "off"})

# "dev" as its own release segment: 1.0-dev, 1.0.dev3, dev-1.0, 1.0+dev
_DEV_SEGMENT = re.compile(r"(?:^|[.+\-])dev\d*(?=$|[.+\-])")


def dev_mode_override() -> Optional[bool]:
    """``PIXELKIT_DEV_MODE`` as a bool, or None when it is unset or unrecognised."""
    token = os.getenv(DEV_MODE_ENV_VAR, "").strip().lower()
    if token in _ENABLED:
        return True
    if token in _DISABLED:
        return False
    return None


def is_dev_build(version: Optional[str] = None) -> bool:
    """True when debug logging should be forced on for this build."""
    override = dev_mode_override()
    if override is not None:
        return override
    return _DEV_SEGMENT.search((version or __version__).strip().lower()) is not None
