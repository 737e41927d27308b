from pydantic import BaseModel, Field
from typing import Dict, List, Optional, Union

from .colors import Color, ColorObject, ColorType, Token


class SuccessResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None


class ErrorResponse(BaseModel):
    success: bool = False
    detail: str


class ExtractionSummary(BaseModel):
    total_colors: int = 0
    colors_by_type: Dict[ColorType, int] = Field(default_factory=dict)
    has_variables: bool = False


class ColorExtractResponse(SuccessResponse):
    colors: List[ColorObject]
    summary: ExtractionSummary


class TokenizeResponse(SuccessResponse):
    tokens: List[Token]


class ColorConvertResponse(SuccessResponse):
    colors: Union[Dict[ColorType, Color], Color]
