"""
Pipeline facade: text -> tokens -> parsed colors -> every representation.
A token that fails to parse or convert is skipped; the rest still resolve.
"""

import logging
from collections import Counter
from typing import Dict, List, Optional, Union

from schemas.colors import Color, ColorObject, ColorType
from pipeline.converter import convert_to_all_formats
from pipeline.errors import ColorPipelineError
from pipeline.parser import parse_token
from pipeline.tokenizer import tokenize

logger = logging.getLogger(__name__)


def build_color_object(text: str, include_named: bool = False) -> List[ColorObject]:
    """Resolve every color literal in text, in token order."""
    tokens = tokenize(text, include_named=include_named)
    color_objects: List[ColorObject] = []

    for token in tokens:
        parsed_color = parse_token(token)
        if parsed_color is None:
            continue
        try:
            converted_colors = convert_to_all_formats(parsed_color)
        except (ColorPipelineError, ValueError, ArithmeticError) as e:
            logger.warning("Failed to convert color %r: %s", token.raw, e)
            continue
        color_objects.append(ColorObject(
            token=token,
            parsed_color=parsed_color,
            converted_colors=converted_colors,
        ))

    logger.debug("Resolved %d of %d color tokens", len(color_objects), len(tokens))
    return color_objects


def summarize(color_objects: List[ColorObject]) -> Dict[str, object]:
    """Counts for a set of resolved colors."""
    by_type = Counter(obj.parsed_color.color_type for obj in color_objects)
    return {
        "total_colors": len(color_objects),
        "colors_by_type": dict(by_type),
        "has_variables": any(obj.parsed_color.css_variable for obj in color_objects),
    }


def convert_color_code(
    code: str, target: Optional[ColorType] = None, include_named: bool = True
) -> Optional[Union[Color, Dict[ColorType, Color]]]:
    """Convert a single color literal.

    Returns every representation, or only `target` when given. None when
    the code holds no color.
    """
    color_objects = build_color_object(code.strip(), include_named=include_named)
    if not color_objects:
        return None
    converted = color_objects[0].converted_colors
    if target is None:
        return converted
    return converted[target]
