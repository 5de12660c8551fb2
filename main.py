"""
Recolor Tools MCP Server - FastAPI implementation
Maps the colors of a graphic onto a fixed palette

Environment (read only when run as a script):
  HOST       bind address (default 0.0.0.0)
  PORT       bind port (default 8973)
  LOG_LEVEL  logging level (default INFO)
"""

import logging
import os

from fastapi import FastAPI
import uvicorn
from fastapi_mcp import FastApiMCP

from recolor import __version__
from routers import recolorTools_router

app = FastAPI(
    title="Recolor Tools MCP Server",
    description="A FastAPI server mapping graphic colors onto a palette",
    version=__version__
)

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "version": __version__}

app.include_router(recolorTools_router)

if __name__ == "__main__":
    host = os.environ.get("HOST", "0.0.0.0")
    port = int(os.environ.get("PORT", "8973"))
    log_level = os.environ.get("LOG_LEVEL", "INFO").upper()

    logging.basicConfig(level=log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    mcp = FastApiMCP(app, exclude_operations=[])
    mcp.mount_http()
    uvicorn.run(app, host=host, port=port, log_level=log_level.lower())
