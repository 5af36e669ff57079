"""Colour palette of the game, as 8-bit RGBA tuples."""

from __future__ import annotations

import math
import string

_CIE_EPSILON = 216.0 / 24389.0
_CIE_KAPPA = 24389.0 / 27.0
_D65_WHITE_X = 0.95047
_D65_WHITE_Y = 1.0
_D65_WHITE_Z = 1.08883


def _linear_to_nonlinear_srgb(value: float) -> float:
    if value <= 0.0:
        return value
    if value <= 0.0031308:
        return value * 12.92
    return 1.055 * value ** (1.0 / 2.4) - 0.055


def _to_byte(value: float) -> int:
    return int(round(min(max(value, 0.0), 1.0) * 255))


def lcha_to_rgba(lightness: float, chroma: float, hue: float, alpha: float) -> tuple[int, int, int, int]:
    """Convert an LCH colour (lightness and chroma in 0..1, hue in degrees) to sRGB bytes."""
    l = lightness * 100.0
    c = chroma * 100.0
    a = c * math.cos(math.radians(hue))
    b = c * math.sin(math.radians(hue))

    fy = (l + 16.0) / 116.0
    fx = a / 500.0 + fy
    fz = fy - b / 200.0

    fx3 = fx**3
    xr = fx3 if fx3 > _CIE_EPSILON else (116.0 * fx - 16.0) / _CIE_KAPPA
    yr = ((l + 16.0) / 116.0) ** 3 if l > _CIE_EPSILON * _CIE_KAPPA else l / _CIE_KAPPA
    fz3 = fz**3
    zr = fz3 if fz3 > _CIE_EPSILON else (116.0 * fz - 16.0) / _CIE_KAPPA

    x = xr * _D65_WHITE_X
    y = yr * _D65_WHITE_Y
    z = zr * _D65_WHITE_Z

    red = x * 3.2404542 + y * -1.5371385 + z * -0.4985314
    green = x * -0.969266 + y * 1.8760108 + z * 0.041556
    blue = x * 0.0556434 + y * -0.2040259 + z * 1.0572252

    return (
        _to_byte(_linear_to_nonlinear_srgb(red)),
        _to_byte(_linear_to_nonlinear_srgb(green)),
        _to_byte(_linear_to_nonlinear_srgb(blue)),
        _to_byte(alpha),
    )


def hex_to_rgba(text: str) -> tuple[int, int, int, int]:
    """Parse ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa`` into RGBA bytes."""
    digits = text[1:] if text.startswith("#") else text
    if not digits or any(ch not in string.hexdigits for ch in digits):
        raise ValueError(f"invalid hex colour: {text!r}")
    if len(digits) in (3, 4):
        channels = [int(ch * 2, 16) for ch in digits]
    elif len(digits) in (6, 8):
        channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
    else:
        raise ValueError(f"invalid hex colour length: {text!r}")
    if len(channels) == 3:
        channels.append(255)
    r, g, b, a = channels
    return (r, g, b, a)


BACKGROUND = hex_to_rgba("#1f2638")
BOARD = lcha_to_rgba(0.06, 0.088, 281.0, 1.0)
TILE_PLACEHOLDER = lcha_to_rgba(0.55, 0.5, 315.0, 1.0)
TILE = lcha_to_rgba(0.85, 0.5, 315.0, 1.0)
SCORE_BOX = lcha_to_rgba(0.55, 0.5, 315.0, 1.0)

BUTTON_NORMAL = lcha_to_rgba(0.15, 0.5, 281.0, 1.0)
BUTTON_HOVERED = lcha_to_rgba(0.55, 0.5, 281.0, 1.0)
BUTTON_PRESSED = lcha_to_rgba(0.75, 0.5, 281.0, 1.0)

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)
BUTTON_TEXT = (_to_byte(0.9), _to_byte(0.9), _to_byte(0.9), 255)