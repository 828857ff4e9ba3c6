from pydantic import BaseModel, Field

from color_core import TargetFormat

class ColorConvertRequest(BaseModel):
    code: str = Field(..., description="The color code to convert (hex, rgb, hsl or oklch)")
    target: TargetFormat = Field(..., description="The target color code format to convert to")

class ColorParseRequest(BaseModel):
    code: str = Field(..., description="The color code to parse (hex, rgb, hsl or oklch)")

class ColorExtractRequest(BaseModel):
    text: str = Field(..., description="Free-form text that may contain color codes")
    target: TargetFormat = Field("hex", description="The format to render each extracted color in")
