"""
Color Extract MCP Server - FastAPI implementation
Finds color literals in free-form text and converts them between formats
"""

import logging
import sys
from pathlib import Path
from fastapi import FastAPI
import uvicorn
from fastapi_mcp import FastApiMCP

# Ensure project root is on sys.path for package imports
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.append(str(project_root))

from config import get_settings, setup_logging
from routers import colorExtract_router

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Color Extract MCP Server",
    description="Extracts colors from text and converts them to hex, rgb, hsl, cmyk and oklch",
    version="1.0.0"
)

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}

# Mount routers
app.include_router(colorExtract_router)

if __name__ == "__main__":
    settings = get_settings()
    setup_logging(settings.log_level)
    mcp = FastApiMCP(app, exclude_operations=[])
    mcp.mount_http()
    logger.info("Starting server on %s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
