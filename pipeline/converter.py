"""
Color conversion with CIE XYZ (D65, scaled to 0-100) as the hub.
Every input type is converted to XYZ once, and every output type is
derived from that XYZ value, so no pairwise converters are needed.

Rounding: rgb/hex channels and hsl/cmyk percentages are whole numbers,
XYZ and OKLCH are kept to 3 decimals. rgb -> xyz -> rgb is stable to
within 1 per channel.
"""

import math
from typing import Dict, Tuple

from schemas.colors import (
    CMYKColor,
    Color,
    ColorType,
    HexColor,
    HSLColor,
    OKLCHColor,
    ParsedColor,
    RGBColor,
    XYZColor,
)
from pipeline.errors import UnsupportedColorTypeError
from pipeline.utils import clamp, round3, round_half_up, wrap_hue

DEG2RAD = math.pi / 180
RAD2DEG = 180 / math.pi

Matrix = Tuple[float, float, float, float, float, float, float, float, float]

# sRGB (D65) <-> XYZ
SRGB_TO_XYZ: Matrix = (
    0.4124564, 0.3575761, 0.1804375,
    0.2126729, 0.7151522, 0.0721750,
    0.0193339, 0.1191920, 0.9503041,
)
XYZ_TO_SRGB: Matrix = (
    3.2404542, -1.5371385, -0.4985314,
    -0.9692660, 1.8760108, 0.0415560,
    0.0556434, -0.2040259, 1.0572252,
)

# XYZ <-> LMS (Oklab)
XYZ_TO_LMS: Matrix = (
    0.8190224379967030, 0.3619062600528904, -0.1288737815209879,
    0.0329836539323885, 0.9292868615863434, 0.0361446663506424,
    0.0481771893596242, 0.2642395317527308, 0.6335478284694309,
)
LMS_TO_XYZ: Matrix = (
    1.2268798758459243, -0.5578149944602171, 0.2813910456659647,
    -0.0405757452148008, 1.1122868032803170, -0.0717110580655164,
    -0.0763729366746601, -0.4214933324022432, 1.5869240198367816,
)

# LMS' <-> Oklab
LMS_TO_OKLAB: Matrix = (
    0.2104542553, 0.7936177850, -0.0040720468,
    1.9779984951, -2.4285922050, 0.4505937099,
    0.0259040371, 0.7827717662, -0.8086757660,
)
OKLAB_TO_LMS: Matrix = (
    1.0, 0.3963377773761749, 0.2158037573099136,
    1.0, -0.1055613458156586, -0.0638541728258133,
    1.0, -0.0894841775298119, -1.2914855480194092,
)


def multiply_matrix3x3(m: Matrix, v: Tuple[float, float, float]) -> Tuple[float, float, float]:
    return (
        m[0] * v[0] + m[1] * v[1] + m[2] * v[2],
        m[3] * v[0] + m[4] * v[1] + m[5] * v[2],
        m[6] * v[0] + m[7] * v[1] + m[8] * v[2],
    )


def s_to_lin(c: int) -> float:
    """sRGB companding, channel in 0-255."""
    cs = c / 255
    return cs / 12.92 if cs <= 0.04045 else ((cs + 0.055) / 1.055) ** 2.4


def lin_to_s(v: float) -> int:
    """Linear to sRGB, clamped and rounded to 0-255."""
    if v > 0.0031308:
        v = 1.055 * (v ** (1 / 2.4)) - 0.055
    else:
        v = 12.92 * v
    return round_half_up(clamp(v, 0, 1) * 255)


def _xyz(x: float, y: float, z: float) -> XYZColor:
    return XYZColor(x=round3(x * 100), y=round3(y * 100), z=round3(z * 100))


# To XYZ ----------------------------------------------------------

def rgb_to_xyz(rgb: RGBColor) -> XYZColor:
    """sRGB D65 to XYZ."""
    lin = (s_to_lin(rgb.r), s_to_lin(rgb.g), s_to_lin(rgb.b))
    return _xyz(*multiply_matrix3x3(SRGB_TO_XYZ, lin))


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(hsl: HSLColor) -> RGBColor:
    """Convert HSL to RGB. h in deg, s,l in percent."""
    h = hsl.h / 360
    s = hsl.s / 100
    l = hsl.l / 100

    if s == 0:
        r = g = b = l  # achromatic
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_rgb(p, q, h + 1 / 3)
        g = _hue_to_rgb(p, q, h)
        b = _hue_to_rgb(p, q, h - 1 / 3)

    return RGBColor(r=round_half_up(r * 255), g=round_half_up(g * 255), b=round_half_up(b * 255))


def hex_to_rgb(hex_color: HexColor) -> RGBColor:
    h = hex_color.value.lstrip("#")
    return RGBColor(r=int(h[0:2], 16), g=int(h[2:4], 16), b=int(h[4:6], 16))


def cmyk_to_rgb(cmyk: CMYKColor) -> RGBColor:
    c, m, y, k = cmyk.c / 100, cmyk.m / 100, cmyk.y / 100, cmyk.k / 100
    return RGBColor(
        r=round_half_up(255 * (1 - c) * (1 - k)),
        g=round_half_up(255 * (1 - m) * (1 - k)),
        b=round_half_up(255 * (1 - y) * (1 - k)),
    )


def oklch_to_xyz(oklch: OKLCHColor) -> XYZColor:
    """OKLCH -> Oklab -> LMS' -> LMS -> XYZ."""
    a = oklch.c * math.cos(oklch.h * DEG2RAD)
    b = oklch.c * math.sin(oklch.h * DEG2RAD)
    l_, m_, s_ = multiply_matrix3x3(OKLAB_TO_LMS, (oklch.l, a, b))
    return _xyz(*multiply_matrix3x3(LMS_TO_XYZ, (l_ ** 3, m_ ** 3, s_ ** 3)))


# From XYZ --------------------------------------------------------

def xyz_to_rgb(xyz: XYZColor) -> RGBColor:
    """XYZ to sRGB, out-of-gamut channels clamped."""
    r, g, b = multiply_matrix3x3(XYZ_TO_SRGB, (xyz.x / 100, xyz.y / 100, xyz.z / 100))
    return RGBColor(r=lin_to_s(r), g=lin_to_s(g), b=lin_to_s(b))


def rgb_to_hsl(rgb: RGBColor) -> HSLColor:
    r, g, b = rgb.r / 255, rgb.g / 255, rgb.b / 255
    max_val = max(r, g, b)
    min_val = min(r, g, b)
    diff = max_val - min_val
    l = (max_val + min_val) / 2
    h = 0.0
    s = 0.0

    if diff != 0:
        s = diff / (2 - max_val - min_val) if l > 0.5 else diff / (max_val + min_val)
        if max_val == r:
            h = (g - b) / diff + (6 if g < b else 0)
        elif max_val == g:
            h = (b - r) / diff + 2
        else:
            h = (r - g) / diff + 4
        h /= 6

    return HSLColor(
        h=wrap_hue(round_half_up(h * 360)),
        s=round_half_up(s * 100),
        l=round_half_up(l * 100),
    )


def rgb_to_hex(rgb: RGBColor) -> HexColor:
    return HexColor(value=f"#{rgb.r:02x}{rgb.g:02x}{rgb.b:02x}")


def rgb_to_cmyk(rgb: RGBColor) -> CMYKColor:
    r, g, b = rgb.r / 255, rgb.g / 255, rgb.b / 255
    k = 1 - max(r, g, b)
    if k == 1:
        return CMYKColor(c=0, m=0, y=0, k=100)
    return CMYKColor(
        c=round_half_up((1 - r - k) / (1 - k) * 100),
        m=round_half_up((1 - g - k) / (1 - k) * 100),
        y=round_half_up((1 - b - k) / (1 - k) * 100),
        k=round_half_up(k * 100),
    )


def xyz_to_hsl(xyz: XYZColor) -> HSLColor:
    return rgb_to_hsl(xyz_to_rgb(xyz))


def xyz_to_hex(xyz: XYZColor) -> HexColor:
    return rgb_to_hex(xyz_to_rgb(xyz))


def xyz_to_cmyk(xyz: XYZColor) -> CMYKColor:
    return rgb_to_cmyk(xyz_to_rgb(xyz))


def xyz_to_oklch(xyz: XYZColor) -> OKLCHColor:
    """XYZ -> LMS -> LMS' -> Oklab -> OKLCH."""
    lms = multiply_matrix3x3(XYZ_TO_LMS, (xyz.x / 100, xyz.y / 100, xyz.z / 100))
    lms_ = tuple(math.copysign(abs(v) ** (1 / 3), v) for v in lms)
    L, a, b = multiply_matrix3x3(LMS_TO_OKLAB, lms_)
    C = math.sqrt(a * a + b * b)
    h = math.atan2(b, a) * RAD2DEG
    if h < 0:
        h += 360
    return OKLCHColor(l=clamp(round3(L), 0, 1), c=round3(C), h=wrap_hue(round3(h)))


# Dispatch --------------------------------------------------------

def to_xyz(parsed: ParsedColor) -> XYZColor:
    """Convert the parsed color to the XYZ hub."""
    color_type = parsed.color_type
    color = parsed.color
    if color_type == "rgb":
        return rgb_to_xyz(color)
    elif color_type == "hsl":
        return rgb_to_xyz(hsl_to_rgb(color))
    elif color_type == "hex":
        return rgb_to_xyz(hex_to_rgb(color))
    elif color_type == "cmyk":
        return rgb_to_xyz(cmyk_to_rgb(color))
    elif color_type == "oklch":
        return oklch_to_xyz(color)
    else:
        raise UnsupportedColorTypeError(color_type)


def convert_to_all_formats(parsed: ParsedColor) -> Dict[ColorType, Color]:
    """Produce every supported representation of a parsed color.

    Alpha below 1 is carried on the rgb and hsl outputs only.
    """
    xyz = to_xyz(parsed)
    rgb = xyz_to_rgb(xyz)
    colors: Dict[ColorType, Color] = {
        "rgb": rgb,
        "hsl": rgb_to_hsl(rgb),
        "hex": rgb_to_hex(rgb),
        "cmyk": rgb_to_cmyk(rgb),
        "oklch": xyz_to_oklch(xyz),
    }
    if parsed.alpha < 1:
        colors["rgb"] = colors["rgb"].model_copy(update={"a": parsed.alpha})
        colors["hsl"] = colors["hsl"].model_copy(update={"a": parsed.alpha})
    return colors
