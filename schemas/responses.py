from pydantic import BaseModel, Field
from typing import List, Optional

class SuccessResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None

class ColorResponse(BaseModel):
    success: bool = True
    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)
    a: float = Field(ge=0.0, le=1.0)
    hex: str
    rgb: str
    hsl: str
    oklch: str

class ColorListResponse(BaseModel):
    success: bool = True
    count: int
    colors: List[str]
