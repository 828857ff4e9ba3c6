from .requests import ColorConvertRequest, ColorParseRequest, ColorExtractRequest
from .responses import SuccessResponse, ColorResponse, ColorListResponse

__all__ = [
    "ColorConvertRequest",
    "ColorParseRequest",
    "ColorExtractRequest",
    "SuccessResponse",
    "ColorResponse",
    "ColorListResponse",
]
