"""
Parser: one Token -> one ParsedColor (typed color + alpha in [0, 1]).
Fails closed: malformed tokens give None instead of raising.
"""

import logging
import re
from typing import List, Optional, Tuple

from pydantic import ValidationError

from schemas.colors import (
    CMYKColor,
    HexColor,
    HSLColor,
    OKLCHColor,
    ParsedColor,
    RGBColor,
    Token,
)
from pipeline.patterns import CSS_VARIABLE_RE, NAMED, unum
from pipeline.utils import clamp, parse_alpha, pct, round_half_up, to_number, wrap_hue

logger = logging.getLogger(__name__)

ARGS_RE = re.compile(r"^[\w-]+\s*\(\s*([^()]*?)\s*\)", re.IGNORECASE)
HEX_DIGITS_RE = re.compile(r"^[0-9a-f]+$", re.IGNORECASE)
ANGLE_SUFFIX_RE = re.compile(r"(deg|grad|rad|turn)$", re.IGNORECASE)

# Delegation targets for custom property values, checked in order
VALUE_PREFIXES = [
    (re.compile(r"^#[0-9a-f]{3,8}\b", re.IGNORECASE), "hex"),
    (re.compile(r"^rgba?\s*\(", re.IGNORECASE), "rgb"),
    (re.compile(r"^hsla?\s*\(", re.IGNORECASE), "hsl"),
    (re.compile(r"^(?:device-)?cmyk\s*\(", re.IGNORECASE), "cmyk"),
    (re.compile(r"^oklch\s*\(", re.IGNORECASE), "oklch"),
]

UNWRAPPED_COMPONENT_RE = re.compile(f"{unum}%?")
UNWRAPPED_BASE_RE = re.compile(f"^{unum}%?(?:(?:\\s+|(?<=%)\\s*){unum}%?)*$")


def _function_args(raw: str) -> str:
    m = ARGS_RE.match(raw.strip())
    if not m:
        raise ValueError(f"not a color function: {raw!r}")
    return m.group(1)


def _split_args(args: str) -> Tuple[List[str], Optional[str]]:
    """Split "a, b, c" / "a b c / d" into components and an optional alpha.

    A fourth comma or space separated component is returned as the alpha.
    """
    alpha = None
    if "/" in args:
        args, alpha = args.split("/", 1)
        alpha = alpha.strip()
    if "," in args:
        parts = [p.strip() for p in args.split(",")]
    else:
        parts = args.split()
    if alpha is None and len(parts) == 4:
        alpha = parts.pop()
    if len(parts) != 3 or any(p == "" for p in parts):
        raise ValueError(f"expected 3 components, got {parts!r}")
    return parts, alpha


def _rgb_channel(t: str) -> int:
    t = t.strip()
    if t.lower() == "none":
        return 0
    if t.endswith("%"):
        return int(clamp(round_half_up(pct(t) / 100 * 255), 0, 255))
    return int(clamp(round_half_up(to_number(t)), 0, 255))


def _percent_value(t: str) -> float:
    """Saturation/lightness style component, "%" optional."""
    t = t.strip()
    if t.lower() == "none":
        return 0.0
    if t.endswith("%"):
        return pct(t)
    return to_number(t)


def _hue(t: str) -> float:
    # Unit suffix is dropped, the number is kept as degrees
    t = t.strip()
    if t.lower() == "none":
        return 0.0
    return wrap_hue(to_number(ANGLE_SUFFIX_RE.sub("", t)))


# HEX -------------------------------------------------------------

def parse_hex(raw: str) -> ParsedColor:
    h = raw.strip().lstrip("#").lower()
    if not HEX_DIGITS_RE.match(h) or len(h) not in (3, 4, 6, 8):
        raise ValueError(f"invalid hex color: {raw!r}")
    if len(h) in (3, 4):
        h = "".join(ch * 2 for ch in h)
    alpha = 1.0
    if len(h) == 8:
        alpha = int(h[6:8], 16) / 255
    return ParsedColor(color_type="hex", color=HexColor(value=f"#{h[:6]}"), alpha=alpha)


# RGB / HSL -------------------------------------------------------

def parse_rgb(raw: str) -> ParsedColor:
    parts, a = _split_args(_function_args(raw))
    r, g, b = (_rgb_channel(p) for p in parts)
    alpha = 1.0 if a is None else parse_alpha(a)
    return ParsedColor(color_type="rgb", color=RGBColor(r=r, g=g, b=b), alpha=alpha)


def parse_hsl(raw: str) -> ParsedColor:
    parts, a = _split_args(_function_args(raw))
    h = _hue(parts[0])
    s = clamp(_percent_value(parts[1]), 0, 100)
    l = clamp(_percent_value(parts[2]), 0, 100)
    alpha = 1.0 if a is None else parse_alpha(a)
    return ParsedColor(color_type="hsl", color=HSLColor(h=h, s=s, l=l), alpha=alpha)


# CMYK ------------------------------------------------------------

def _cmyk_component(t: str) -> float:
    t = t.strip()
    if t.endswith("%"):
        return clamp(pct(t), 0, 100)
    v = to_number(t)
    # Decimal notation 0-1 is scaled up to percent
    if v <= 1:
        v *= 100
    return clamp(v, 0, 100)


def parse_cmyk(raw: str) -> ParsedColor:
    args = _function_args(raw)
    parts = [p.strip() for p in args.split(",")] if "," in args else args.split()
    if len(parts) != 4:
        raise ValueError(f"cmyk needs 4 components, got {parts!r}")
    c, m, y, k = (_cmyk_component(p) for p in parts)
    return ParsedColor(color_type="cmyk", color=CMYKColor(c=c, m=m, y=y, k=k), alpha=1.0)


# OKLCH -----------------------------------------------------------

def parse_oklch(raw: str) -> ParsedColor:
    args = _function_args(raw)
    alpha = 1.0
    if "/" in args:
        args, a = args.split("/", 1)
        alpha = parse_alpha(a)
    parts = args.split()
    if len(parts) != 3:
        raise ValueError(f"oklch needs 3 components, got {parts!r}")
    l_val, c_val, h_val = parts

    if l_val.lower() == "none":
        l = 0.0
    elif l_val.endswith("%"):
        l = pct(l_val) / 100
    else:
        l = to_number(l_val)

    if c_val.lower() == "none":
        c = 0.0
    elif c_val.endswith("%"):
        # 100% chroma is 0.4
        c = pct(c_val) / 100 * 0.4
    else:
        c = to_number(c_val)

    h = _hue(h_val)
    return ParsedColor(
        color_type="oklch",
        color=OKLCHColor(l=clamp(l, 0, 1), c=max(c, 0.0), h=h),
        alpha=alpha,
    )


# NAMED -----------------------------------------------------------

def parse_named(raw: str) -> ParsedColor:
    hex_val = NAMED.get(raw.strip().lower())
    if hex_val is None:
        raise ValueError(f"unknown color name: {raw!r}")
    return parse_hex(hex_val)


# CSS VARIABLES ---------------------------------------------------

def parse_unwrapped(value: str) -> Optional[ParsedColor]:
    """Infer a color from a bare "h s% l%" or "r g b" custom property value.

    HSL when the first component is a plain number and the second and
    third carry "%"; RGB otherwise. Three bare percentages are read as RGB.
    """
    alpha = 1.0
    base = value.strip()
    if "/" in base:
        base, a = base.split("/", 1)
        alpha = parse_alpha(a)
        base = base.strip()
    if not UNWRAPPED_BASE_RE.match(base):
        return None
    parts = UNWRAPPED_COMPONENT_RE.findall(base)
    if len(parts) == 4 and "/" not in value:
        alpha = parse_alpha(parts.pop())
    if len(parts) != 3:
        return None

    if not parts[0].endswith("%") and parts[1].endswith("%") and parts[2].endswith("%"):
        return ParsedColor(
            color_type="hsl",
            color=HSLColor(
                h=wrap_hue(to_number(parts[0])),
                s=clamp(pct(parts[1]), 0, 100),
                l=clamp(pct(parts[2]), 0, 100),
            ),
            alpha=alpha,
        )

    r, g, b = (_rgb_channel(p) for p in parts)
    return ParsedColor(color_type="rgb", color=RGBColor(r=r, g=g, b=b), alpha=alpha)


def parse_css_variable(raw: str) -> Optional[ParsedColor]:
    m = CSS_VARIABLE_RE.match(raw.strip())
    if not m:
        return None
    name = m.group(1)
    value = m.group(2).strip().rstrip(";").strip()

    parsed = None
    for prefix_re, color_type in VALUE_PREFIXES:
        if prefix_re.match(value):
            parsed = PARSERS[color_type](value)
            break
    else:
        parsed = parse_unwrapped(value)

    if parsed is None:
        return None
    return parsed.model_copy(update={"css_variable": name})


PARSERS = {
    "hex": parse_hex,
    "rgb": parse_rgb,
    "hsl": parse_hsl,
    "cmyk": parse_cmyk,
    "oklch": parse_oklch,
    "named": parse_named,
    "css-variable": parse_css_variable,
}


def parse_token(token: Token) -> Optional[ParsedColor]:
    """Resolve a token into a typed color, or None if it is malformed."""
    parser = PARSERS.get(token.type)
    if parser is None:
        return None
    try:
        return parser(token.raw)
    except (ValueError, IndexError, ArithmeticError, ValidationError) as e:
        logger.debug("Failed to parse token %r: %s", token.raw, e)
        return None


def parse_tokens(tokens: List[Token]) -> List[ParsedColor]:
    """Parse every token, dropping the ones that fail."""
    parsed = (parse_token(token) for token in tokens)
    return [p for p in parsed if p is not None]
