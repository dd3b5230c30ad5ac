"""Exceptions raised by the geometry, colour and option-set helpers."""
from __future__ import annotations


class PixelKitError(Exception):
    """Base class for every error raised by pixelkit."""


class InvalidGeometry(PixelKitError, ValueError):
    """A size with a zero, negative or non-finite dimension reached a calculation."""


class UnclassifiableColorSpace(PixelKitError, LookupError):
    """The colour space identifier is not in the classification table."""


class UnsupportedColorConversion(PixelKitError, ValueError):
    """The colour cannot be converted (CMYK, Lab, or missing components)."""


class BitWidthOverflow(PixelKitError, OverflowError):
    """A granule's raw identity does not fit in the option set's bit width."""
