from pydantic import BaseModel, Field
from typing import Optional

from .colors import ColorType


class ColorExtractRequest(BaseModel):
    text: str = Field(..., description="Free-form text (plain values, CSS, custom properties) to scan for colors")
    include_named: Optional[bool] = Field(None, description="Also recognize CSS named colors; defaults to the server setting")


class ColorConvertRequest(BaseModel):
    code: str = Field(..., description="The color literal to convert")
    target: Optional[ColorType] = Field(None, description="Only return this format instead of all five")
