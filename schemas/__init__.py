from .colors import ColorObject, ColorType, ParsedColor, Token
from .requests import ColorConvertRequest, ColorExtractRequest
from .responses import (
    ColorConvertResponse,
    ColorExtractResponse,
    ErrorResponse,
    ExtractionSummary,
    SuccessResponse,
    TokenizeResponse,
)

__all__ = [
    "ColorObject",
    "ColorType",
    "ParsedColor",
    "Token",
    "ColorConvertRequest",
    "ColorExtractRequest",
    "ColorConvertResponse",
    "ColorExtractResponse",
    "ErrorResponse",
    "ExtractionSummary",
    "SuccessResponse",
    "TokenizeResponse",
]
