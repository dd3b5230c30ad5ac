from __future__ import annotations

import pytest
from PyQt6.QtGui import QColor, QColorSpace, QGuiApplication

from pixelkit.color_convert import StandardColor, TargetColorSpace, convert_with_fallback
from pixelkit.color_space import ColorSpaceId
from pixelkit.qt_bridge import (
    QColorAdapter,
    color_space_id_from_qt,
    primary_device_pixel_ratio,
    qt_color_space,
    to_qcolor,
)


@pytest.mark.parametrize(
    "named, expected",
    [
        (QColorSpace.NamedColorSpace.SRgb, ColorSpaceId.SRGB),
        (QColorSpace.NamedColorSpace.SRgbLinear, ColorSpaceId.LINEAR_SRGB),
        (QColorSpace.NamedColorSpace.AdobeRgb, ColorSpaceId.ADOBE_RGB_1998),
        (QColorSpace.NamedColorSpace.DisplayP3, ColorSpaceId.DISPLAY_P3),
        (QColorSpace.NamedColorSpace.ProPhotoRgb, ColorSpaceId.ROMM_RGB),
    ],
)
def test_named_color_spaces_map_to_identifiers(named, expected) -> None:
    assert color_space_id_from_qt(QColorSpace(named)) is expected


def test_invalid_color_space_has_no_identifier() -> None:
    assert color_space_id_from_qt(QColorSpace()) is None


@pytest.mark.parametrize(
    "target, expected",
    [
        (TargetColorSpace.STANDARD, ColorSpaceId.SRGB),
        (TargetColorSpace.STANDARD_LINEAR, ColorSpaceId.LINEAR_SRGB),
        (TargetColorSpace.WIDE_GAMUT, ColorSpaceId.DISPLAY_P3),
    ],
)
def test_target_spaces_have_qt_equivalents(target, expected) -> None:
    assert color_space_id_from_qt(qt_color_space(target)) is expected


def test_to_qcolor_copies_channels() -> None:
    color = to_qcolor(StandardColor(TargetColorSpace.STANDARD, 1.0, 0.5, 0.0, 0.25))
    assert color.redF() == pytest.approx(1.0, abs=1e-3)
    assert color.greenF() == pytest.approx(0.5, abs=1e-3)
    assert color.blueF() == pytest.approx(0.0, abs=1e-3)
    assert color.alphaF() == pytest.approx(0.25, abs=1e-3)


def test_rgb_qcolor_converts_directly() -> None:
    adapter = QColorAdapter(QColor(255, 0, 0, 128))
    assert adapter.color_space_id is ColorSpaceId.SRGB
    result = convert_with_fallback(adapter)
    assert result is not None
    assert result.space is TargetColorSpace.STANDARD
    assert result.as_tuple() == pytest.approx((1.0, 0.0, 0.0, 128 / 255), abs=1e-3)


def test_rgb_qcolor_in_display_p3_keeps_wide_gamut() -> None:
    adapter = QColorAdapter(QColor(0, 255, 0), QColorSpace(QColorSpace.NamedColorSpace.DisplayP3))
    result = convert_with_fallback(adapter)
    assert result is not None
    assert result.space is TargetColorSpace.WIDE_GAMUT
    assert (result.red, result.green, result.blue) == pytest.approx((0.0, 1.0, 0.0), abs=1e-3)


def test_extended_rgb_qcolor_reports_extended_space() -> None:
    color = QColor.fromRgbF(1.2, 0.5, 0.0)
    assert color.spec() == QColor.Spec.ExtendedRgb
    adapter = QColorAdapter(color)
    assert adapter.color_space_id is ColorSpaceId.EXTENDED_SRGB
    result = convert_with_fallback(adapter)
    assert result is not None
    assert result.space is TargetColorSpace.STANDARD
    assert result.red == pytest.approx(1.2, abs=1e-2)


def test_cmyk_qcolor_falls_back_to_interchange() -> None:
    adapter = QColorAdapter(QColor.fromCmykF(0.0, 0.0, 0.0, 0.0))
    assert adapter.color_space_id is ColorSpaceId.GENERIC_CMYK
    assert len(adapter.components) == 4
    result = convert_with_fallback(adapter)
    assert result is not None
    assert result.space is TargetColorSpace.STANDARD
    assert result.as_tuple() == pytest.approx((1.0, 1.0, 1.0, 1.0), abs=1e-3)


def test_hsv_qcolor_has_no_identifier_but_converts() -> None:
    adapter = QColorAdapter(QColor.fromHsv(0, 255, 255))
    assert adapter.color_space_id is None
    assert tuple(adapter.components) == ()
    result = convert_with_fallback(adapter)
    assert result is not None
    assert result.as_tuple() == pytest.approx((1.0, 0.0, 0.0, 1.0), abs=1e-3)


def test_invalid_qcolor_fails_every_step() -> None:
    adapter = QColorAdapter(QColor())
    assert adapter.interchange() is None
    assert convert_with_fallback(adapter) is None


def test_adapter_copies_the_colour() -> None:
    source = QColor(10, 20, 30)
    adapter = QColorAdapter(source)
    source.setRed(200)
    assert adapter.color.red() == 10


def test_primary_ratio_needs_running_application() -> None:
    if QGuiApplication.instance() is not None:
        pytest.skip("a Qt application is already running")
    assert primary_device_pixel_ratio() is None
