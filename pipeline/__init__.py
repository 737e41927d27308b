from .tokenizer import tokenize, tokens_by_type
from .parser import parse_token, parse_tokens
from .converter import convert_to_all_formats, rgb_to_xyz, xyz_to_rgb
from .build import build_color_object, convert_color_code, summarize
from .errors import ColorPipelineError, UnsupportedColorTypeError

__all__ = [
    "tokenize",
    "tokens_by_type",
    "parse_token",
    "parse_tokens",
    "convert_to_all_formats",
    "rgb_to_xyz",
    "xyz_to_rgb",
    "build_color_object",
    "convert_color_code",
    "summarize",
    "ColorPipelineError",
    "UnsupportedColorTypeError",
]
