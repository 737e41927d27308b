"""
Color data model shared by the tokenizer, parser, converter and routes.
The Color union is discriminated on `kind`, one model per color type.
"""

from typing import Annotated, Dict, Literal, Optional, Union, get_args

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Type definitions
ColorType = Literal["hex", "rgb", "hsl", "cmyk", "oklch"]
TokenType = Literal["hex", "rgb", "hsl", "cmyk", "oklch", "css-variable", "named"]

COLOR_TYPES = get_args(ColorType)


class RGBColor(BaseModel):
    kind: Literal["rgb"] = "rgb"
    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)
    a: Optional[float] = Field(default=None, ge=0.0, le=1.0)


class HSLColor(BaseModel):
    kind: Literal["hsl"] = "hsl"
    h: float = Field(ge=0, lt=360)
    s: float = Field(ge=0, le=100)
    l: float = Field(ge=0, le=100)
    a: Optional[float] = Field(default=None, ge=0.0, le=1.0)


class HexColor(BaseModel):
    kind: Literal["hex"] = "hex"
    value: str = Field(pattern=r"^#[0-9a-f]{6}$")


class CMYKColor(BaseModel):
    kind: Literal["cmyk"] = "cmyk"
    c: float = Field(ge=0, le=100)
    m: float = Field(ge=0, le=100)
    y: float = Field(ge=0, le=100)
    k: float = Field(ge=0, le=100)


class OKLCHColor(BaseModel):
    kind: Literal["oklch"] = "oklch"
    l: float = Field(ge=0, le=1)
    c: float = Field(ge=0)
    h: float = Field(ge=0, lt=360)


Color = Annotated[
    Union[RGBColor, HSLColor, HexColor, CMYKColor, OKLCHColor],
    Field(discriminator="kind"),
]


class XYZColor(BaseModel):
    """CIE 1931 XYZ (D65), scaled to 0-100. Internal conversion hub."""
    x: float
    y: float
    z: float


class TokenContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    property: Optional[str] = None
    variable_name: Optional[str] = None


class Token(BaseModel):
    """A color literal found in the source text, spanning [start, end)."""
    model_config = ConfigDict(frozen=True)

    id: str
    type: TokenType
    raw: str
    start: int = Field(ge=0)
    end: int = Field(ge=0)
    line: int = Field(default=1, ge=1)
    column: int = Field(default=1, ge=1)
    context: Optional[TokenContext] = None

    def overlaps(self, other: "Token") -> bool:
        return not (self.end <= other.start or other.end <= self.start)


class ParsedColor(BaseModel):
    css_variable: Optional[str] = None
    color_type: ColorType
    color: Color
    alpha: float = Field(default=1.0, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def _check_kind(self) -> "ParsedColor":
        if self.color.kind != self.color_type:
            raise ValueError(
                f"color of kind {self.color.kind!r} does not match color_type {self.color_type!r}"
            )
        return self


class ColorObject(BaseModel):
    token: Token
    parsed_color: ParsedColor
    converted_colors: Dict[ColorType, Color]
