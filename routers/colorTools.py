"""
Color tools endpoints: parse, convert and extract color codes.
Every endpoint is also exposed as an MCP tool (operation_id is the tool name).
"""

import logging

from fastapi import APIRouter, HTTPException

from color_core import Color, ColorParseError, extract_colors_from_text, parse, serialize
from schemas.requests import (
    ColorConvertRequest,
    ColorExtractRequest,
    ColorParseRequest,
)
from schemas.responses import ColorListResponse, ColorResponse, SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def parse_or_400(code: str) -> Color:
    """Parse a color code, turning failure into an HTTP 400."""
    try:
        return parse(code)
    except ColorParseError as e:
        logger.info("Rejected color code %r", e.input)
        raise HTTPException(status_code=400, detail=str(e)) from e


@router.post("/convert_color_code", response_model=SuccessResponse, operation_id="convert_color_code", description="Convert a color code (hex, rgb, hsl or oklch) to a target format")
async def parse_and_convert(request: ColorConvertRequest):
    """Parse a color code and convert it to the target format."""
    color = parse_or_400(request.code)
    return SuccessResponse(success=True, message=serialize(color, request.target))


@router.post("/parse_color", response_model=ColorResponse, operation_id="parse_color", description="Parse a color code into its channels and every supported notation")
async def parse_color(request: ColorParseRequest):
    """Parse a color code and describe it in every notation."""
    color = parse_or_400(request.code)
    return ColorResponse(
        r=color.r,
        g=color.g,
        b=color.b,
        a=color.a,
        hex=color.to_hex(),
        rgb=color.to_rgb(),
        hsl=color.to_hsl(),
        oklch=color.to_oklch(),
    )


@router.post("/extract_colors", response_model=ColorListResponse, operation_id="extract_colors", description="Find every color code in a piece of text")
async def extract_colors(request: ColorExtractRequest):
    """Extract color codes from text, grouped by notation (hex, rgb, hsl, oklch)."""
    colors = extract_colors_from_text(request.text)
    logger.debug("Extracted %d colors from %d characters", len(colors), len(request.text))
    return ColorListResponse(
        count=len(colors),
        colors=[serialize(c, request.target) for c in colors],
    )
