"""
Recognizer rules for color literals in free-form text.
One recognizer per color syntax, each tagged with the token type it emits
and a priority. Higher priority wins when two candidate matches overlap.
"""

import re
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from schemas.colors import TokenType

# Regular expression pieces
unum = r"(?:\d+(?:\.\d+)?|\.\d+)"
ws = r"\s*"

# Full CSS Color 4 keyword table
NAMED: Dict[str, str] = {
    "aliceblue": "#f0f8ff",
    "antiquewhite": "#faebd7",
    "aqua": "#00ffff",
    "aquamarine": "#7fffd4",
    "azure": "#f0ffff",
    "beige": "#f5f5dc",
    "bisque": "#ffe4c4",
    "black": "#000000",
    "blanchedalmond": "#ffebcd",
    "blue": "#0000ff",
    "blueviolet": "#8a2be2",
    "brown": "#a52a2a",
    "burlywood": "#deb887",
    "cadetblue": "#5f9ea0",
    "chartreuse": "#7fff00",
    "chocolate": "#d2691e",
    "coral": "#ff7f50",
    "cornflowerblue": "#6495ed",
    "cornsilk": "#fff8dc",
    "crimson": "#dc143c",
    "cyan": "#00ffff",
    "darkblue": "#00008b",
    "darkcyan": "#008b8b",
    "darkgoldenrod": "#b8860b",
    "darkgray": "#a9a9a9",
    "darkgreen": "#006400",
    "darkgrey": "#a9a9a9",
    "darkkhaki": "#bdb76b",
    "darkmagenta": "#8b008b",
    "darkolivegreen": "#556b2f",
    "darkorange": "#ff8c00",
    "darkorchid": "#9932cc",
    "darkred": "#8b0000",
    "darksalmon": "#e9967a",
    "darkseagreen": "#8fbc8f",
    "darkslateblue": "#483d8b",
    "darkslategray": "#2f4f4f",
    "darkslategrey": "#2f4f4f",
    "darkturquoise": "#00ced1",
    "darkviolet": "#9400d3",
    "deeppink": "#ff1493",
    "deepskyblue": "#00bfff",
    "dimgray": "#696969",
    "dimgrey": "#696969",
    "dodgerblue": "#1e90ff",
    "firebrick": "#b22222",
    "floralwhite": "#fffaf0",
    "forestgreen": "#228b22",
    "fuchsia": "#ff00ff",
    "gainsboro": "#dcdcdc",
    "ghostwhite": "#f8f8ff",
    "gold": "#ffd700",
    "goldenrod": "#daa520",
    "gray": "#808080",
    "green": "#008000",
    "greenyellow": "#adff2f",
    "grey": "#808080",
    "honeydew": "#f0fff0",
    "hotpink": "#ff69b4",
    "indianred": "#cd5c5c",
    "indigo": "#4b0082",
    "ivory": "#fffff0",
    "khaki": "#f0e68c",
    "lavender": "#e6e6fa",
    "lavenderblush": "#fff0f5",
    "lawngreen": "#7cfc00",
    "lemonchiffon": "#fffacd",
    "lightblue": "#add8e6",
    "lightcoral": "#f08080",
    "lightcyan": "#e0ffff",
    "lightgoldenrodyellow": "#fafad2",
    "lightgray": "#d3d3d3",
    "lightgreen": "#90ee90",
    "lightgrey": "#d3d3d3",
    "lightpink": "#ffb6c1",
    "lightsalmon": "#ffa07a",
    "lightseagreen": "#20b2aa",
    "lightskyblue": "#87cefa",
    "lightslategray": "#778899",
    "lightslategrey": "#778899",
    "lightsteelblue": "#b0c4de",
    "lightyellow": "#ffffe0",
    "lime": "#00ff00",
    "limegreen": "#32cd32",
    "linen": "#faf0e6",
    "magenta": "#ff00ff",
    "maroon": "#800000",
    "mediumaquamarine": "#66cdaa",
    "mediumblue": "#0000cd",
    "mediumorchid": "#ba55d3",
    "mediumpurple": "#9370db",
    "mediumseagreen": "#3cb371",
    "mediumslateblue": "#7b68ee",
    "mediumspringgreen": "#00fa9a",
    "mediumturquoise": "#48d1cc",
    "mediumvioletred": "#c71585",
    "midnightblue": "#191970",
    "mintcream": "#f5fffa",
    "mistyrose": "#ffe4e1",
    "moccasin": "#ffe4b5",
    "navajowhite": "#ffdead",
    "navy": "#000080",
    "oldlace": "#fdf5e6",
    "olive": "#808000",
    "olivedrab": "#6b8e23",
    "orange": "#ffa500",
    "orangered": "#ff4500",
    "orchid": "#da70d6",
    "palegoldenrod": "#eee8aa",
    "palegreen": "#98fb98",
    "paleturquoise": "#afeeee",
    "palevioletred": "#db7093",
    "papayawhip": "#ffefd5",
    "peachpuff": "#ffdab9",
    "peru": "#cd853f",
    "pink": "#ffc0cb",
    "plum": "#dda0dd",
    "powderblue": "#b0e0e6",
    "purple": "#800080",
    "rebeccapurple": "#663399",
    "red": "#ff0000",
    "rosybrown": "#bc8f8f",
    "royalblue": "#4169e1",
    "saddlebrown": "#8b4513",
    "salmon": "#fa8072",
    "sandybrown": "#f4a460",
    "seagreen": "#2e8b57",
    "seashell": "#fff5ee",
    "sienna": "#a0522d",
    "silver": "#c0c0c0",
    "skyblue": "#87ceeb",
    "slateblue": "#6a5acd",
    "slategray": "#708090",
    "slategrey": "#708090",
    "snow": "#fffafa",
    "springgreen": "#00ff7f",
    "steelblue": "#4682b4",
    "tan": "#d2b48c",
    "teal": "#008080",
    "thistle": "#d8bfd8",
    "tomato": "#ff6347",
    "turquoise": "#40e0d0",
    "violet": "#ee82ee",
    "wheat": "#f5deb3",
    "white": "#ffffff",
    "whitesmoke": "#f5f5f5",
    "yellow": "#ffff00",
    "yellowgreen": "#9acd32",
    "transparent": "#00000000",
}

# CSS custom property: --name: value (value stops at ; } or end of line)
CSS_VARIABLE_RE = re.compile(r"(--[\w-]+)\s*:\s*([^;}\n]+)")

# Value starts with a color function or a hex literal
FUNCTION_PREFIX_RE = re.compile(
    r"^(?:#[0-9a-f]{3,8}\b|(?:rgba?|hsla?|oklch|(?:device-)?cmyk)\s*\()",
    re.IGNORECASE,
)

# Bare "20 14.3% 4.1%" style value, 2-4 numbers with an optional "/ alpha"
UNWRAPPED_RE = re.compile(
    f"^{unum}%?(?:(?:\\s+|(?<=%){ws}){unum}%?){{1,3}}(?:{ws}/{ws}{unum}%?)?$"
)

RGB_RE = re.compile(r"\brgba?\s*\(\s*[^()]+\)", re.IGNORECASE)
HSL_RE = re.compile(r"\bhsla?\s*\(\s*[^()]+\)", re.IGNORECASE)
CMYK_RE = re.compile(r"\b(?:device-)?cmyk\s*\(\s*[^()]+\)", re.IGNORECASE)
OKLCH_RE = re.compile(r"\boklch\s*\(\s*[^()]+\)", re.IGNORECASE)

HEX_RE = re.compile(
    r"#(?:[0-9a-f]{8}|[0-9a-f]{6}|[0-9a-f]{4}|[0-9a-f]{3})\b", re.IGNORECASE
)

# Longest names first so "lightgoldenrodyellow" never stops at "light..."
NAMED_RE = re.compile(
    r"(?<![\w.#-])(?:"
    + "|".join(sorted(NAMED, key=len, reverse=True))
    + r")(?![\w-])",
    re.IGNORECASE,
)

Span = Tuple[int, int]


def is_likely_color_value(value: str) -> bool:
    """Check if a custom property value looks like a color."""
    trimmed = value.strip()
    if UNWRAPPED_RE.match(trimmed):
        return True
    return FUNCTION_PREFIX_RE.match(trimmed) is not None


def _css_variable_spans(text: str) -> Iterator[Span]:
    for m in CSS_VARIABLE_RE.finditer(text):
        if not is_likely_color_value(m.group(2)):
            continue
        end = m.start(2) + len(m.group(2).rstrip())
        yield m.start(), end


@dataclass(frozen=True)
class Recognizer:
    """A matcher for one color syntax."""

    token_type: TokenType
    priority: int
    pattern: Optional[re.Pattern] = None
    scan: Optional[Callable[[str], Iterator[Span]]] = None

    def find(self, text: str) -> Iterator[Span]:
        """Yield every candidate [start, end) span in text."""
        if self.scan is not None:
            yield from self.scan(text)
            return
        for m in self.pattern.finditer(text):
            yield m.start(), m.end()


RECOGNIZERS: List[Recognizer] = [
    Recognizer("css-variable", 40, scan=_css_variable_spans),
    Recognizer("rgb", 30, pattern=RGB_RE),
    Recognizer("hsl", 30, pattern=HSL_RE),
    Recognizer("cmyk", 30, pattern=CMYK_RE),
    Recognizer("oklch", 30, pattern=OKLCH_RE),
    Recognizer("hex", 20, pattern=HEX_RE),
]

NAMED_RECOGNIZER = Recognizer("named", 10, pattern=NAMED_RE)


def get_recognizers(include_named: bool = False) -> List[Recognizer]:
    """Recognizers ordered highest priority first."""
    recognizers = list(RECOGNIZERS)
    if include_named:
        recognizers.append(NAMED_RECOGNIZER)
    return sorted(recognizers, key=lambda r: -r.priority)
