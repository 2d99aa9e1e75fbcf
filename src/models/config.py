"""
Configuration file models

Pydantic models describing the declarative pdf-markup configuration file.
Keys are camelCase to match the file format:

    pageSize: [595, 842]
    fontSize: 14
    lineHeight: 24
    color:
      hex: "#333333"
    margin:
      top: 50
      left: 50
    fontPaths:
      normal: fonts/Inter-Regular.ttf
    documentName: report
    outputDir: out/pdf
"""

import re
from typing import Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Strict(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class RGBChannels(_Strict):
    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)


class RGBColor(_Strict):
    """Colour given as {rgb: {r, g, b}} with 0-255 channels"""
    rgb: RGBChannels


class HexColor(_Strict):
    """Colour given as {hex: "#RRGGBB"} (leading '#' optional)"""
    hex: str

    @field_validator("hex")
    @classmethod
    def hex_validate(cls, value: str) -> str:
        if not re.fullmatch(r"#?[0-9A-Fa-f]{6}", value):
            raise ValueError(f"not a 6-digit hex colour: {value!r}")
        return value


PdfColor = Union[RGBColor, HexColor]


class PageMargin(_Strict):
    """Outer page margin from the top and left edges, in points"""
    top: float = Field(ge=0)
    left: float = Field(ge=0)


class FontPaths(_Strict):
    """Optional TrueType file per font variant"""
    normal: Optional[str] = None
    bold: Optional[str] = None
    italic: Optional[str] = None
    boldItalic: Optional[str] = None


class PdfConfig(_Strict):
    """
    Contents of a pdf-markup configuration file

    Every field is optional; unset fields fall back to built-in defaults
    when options are resolved for a render.
    """
    pageSize: Optional[Tuple[float, float]] = None
    fontSize: Optional[float] = Field(default=None, gt=0)
    lineHeight: Optional[float] = Field(default=None, ge=0)
    fontPaths: Optional[FontPaths] = None
    color: Optional[PdfColor] = None
    margin: Optional[PageMargin] = None
    documentName: Optional[str] = None
    outputDir: Optional[str] = None

    @field_validator("pageSize")
    @classmethod
    def pageSize_validate(
        cls, value: Optional[Tuple[float, float]]
    ) -> Optional[Tuple[float, float]]:
        if value is not None and (value[0] <= 0 or value[1] <= 0):
            raise ValueError("pageSize entries must be positive")
        return value
