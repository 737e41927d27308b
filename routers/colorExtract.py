"""
Color extraction routes: scan text for color literals and convert them
to hex, rgb, hsl, cmyk and oklch through the XYZ hub.
Exposed as MCP tools through fastapi_mcp (see main.py).
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from config import Settings, get_settings
from pipeline import build_color_object, convert_color_code, summarize, tokenize
from schemas.requests import ColorConvertRequest, ColorExtractRequest
from schemas.responses import (
    ColorConvertResponse,
    ColorExtractResponse,
    ExtractionSummary,
    TokenizeResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _include_named(request: ColorExtractRequest, settings: Settings) -> bool:
    if request.include_named is None:
        return settings.named_colors
    return request.include_named


@router.post("/extract_colors", response_model=ColorExtractResponse, operation_id="extract_colors", description="Find every color in a piece of text and convert each to all supported formats")
async def extract_colors(request: ColorExtractRequest, settings: Settings = Depends(get_settings)):
    """Tokenize, parse and convert all colors in the text."""
    colors = build_color_object(request.text, include_named=_include_named(request, settings))
    return ColorExtractResponse(colors=colors, summary=ExtractionSummary(**summarize(colors)))


@router.post("/tokenize_colors", response_model=TokenizeResponse, operation_id="tokenize_colors", description="List the positioned color tokens found in a piece of text")
async def tokenize_colors(request: ColorExtractRequest, settings: Settings = Depends(get_settings)):
    """Return color tokens without parsing them."""
    tokens = tokenize(request.text, include_named=_include_named(request, settings))
    return TokenizeResponse(tokens=tokens)


@router.post("/convert_color_code", response_model=ColorConvertResponse, operation_id="convert_color_code", description="Convert a single color code to every supported format, or to one target format")
async def parse_and_convert(request: ColorConvertRequest):
    """Parse one color literal and convert it."""
    converted = convert_color_code(request.code, request.target)
    if converted is None:
        logger.info("No color found in %r", request.code)
        raise HTTPException(status_code=400, detail="Invalid or unsupported color code")
    return ColorConvertResponse(colors=converted)
