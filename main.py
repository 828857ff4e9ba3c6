"""
Color Tools MCP Server - FastAPI implementation
Provides endpoints for parsing, converting and extracting color codes
"""

import logging

from fastapi import FastAPI
import uvicorn
from fastapi_mcp import FastApiMCP

from config import get_settings
from routers import colorTools_router

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Color Tools MCP Server",
    description="A FastAPI server for hex, rgb, hsl and oklch color codes",
    version="1.0.0"
)

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}

# Color tools endpoints
app.include_router(colorTools_router)

if __name__ == "__main__":
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if settings.mount_mcp:
        mcp = FastApiMCP(app, exclude_operations=[])
        mcp.mount_http()
    logger.info("Starting color tools server on %s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
