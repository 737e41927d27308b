"""Numeric helpers shared by the parser and the converter."""

import math
import re

num = r"[+-]?(?:\d+(?:\.\d+)?|\.\d+)"

NUMBER_RE = re.compile(f"^{num}$")
PERCENT_RE = re.compile(f"^{num}%$")


def clamp(v: float, lo: float, hi: float) -> float:
    """Clamp value between lo and hi."""
    return max(lo, min(hi, v))


def round_half_up(x: float) -> int:
    """Round to the nearest integer, halves away from -inf (JS Math.round)."""
    return int(math.floor(x + 0.5))


def round3(x: float) -> float:
    """Round to 3 decimal places."""
    return math.floor(x * 1000 + 0.5) / 1000


def to_number(s: str) -> float:
    """Parse a bare CSS number. Raises ValueError on anything else."""
    s = s.strip()
    if not NUMBER_RE.match(s):
        raise ValueError(f"not a number: {s!r}")
    v = float(s)
    if not math.isfinite(v):
        raise ValueError(f"number out of range: {s!r}")
    return v


def pct(x: str) -> float:
    """Parse a percentage string ("50%") to its numeric part (50.0)."""
    x = x.strip()
    if not PERCENT_RE.match(x):
        raise ValueError(f"not a percentage: {x!r}")
    v = float(x[:-1])
    if not math.isfinite(v):
        raise ValueError(f"percentage out of range: {x!r}")
    return v


def wrap_hue(h: float) -> float:
    """Wrap a hue into [0, 360)."""
    h = h % 360
    return 0.0 if h >= 360 else h


def parse_alpha(value: str) -> float:
    """Normalize an alpha component into [0, 1].

    "50%" -> 0.5. A bare number above 1 is read on a 0-100 scale
    ("80" -> 0.8); a bare number up to 1 is taken as is. The boundary
    value 1 therefore means fully opaque, not 1%.
    """
    v = value.strip()
    if v.lower() == "none":
        return 1.0
    if v.endswith("%"):
        return clamp(pct(v) / 100, 0, 1)
    alpha = to_number(v)
    if alpha > 1:
        return clamp(alpha / 100, 0, 1)
    return clamp(alpha, 0, 1)
