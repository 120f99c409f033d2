"""FastAPI application entry point."""

import os
import sys
import logging
import tomllib
from pathlib import Path
from fastapi import FastAPI
from dotenv import load_dotenv

# Load environment variables from .env file
# Must be called before importing modules that read env vars (like the dictionary adapter)
load_dotenv()

# Add src to path
# main.py is at src/api/main.py, so src is two levels up
_src_path = Path(__file__).parent.parent
sys.path.insert(0, str(_src_path))

from api.routes import health, tools
from utils.logging import setup_structured_logging

# Set up structured JSON logging
setup_structured_logging()

logger = logging.getLogger(__name__)

# Read version from pyproject.toml (single source of truth)
_project_root = _src_path.parent
with open(_project_root / "pyproject.toml", "rb") as f:
    VERSION = tomllib.load(f)["project"]["version"]

SERVICE_NAME = "Galician Dictionary Lookup"


app = FastAPI(
    title=SERVICE_NAME,
    description="Looks up words in the Real Academia Galega dictionary and exposes the lookup as a tool",
    version=VERSION,
)

# Register routes
app.include_router(health.router)
app.include_router(tools.router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": SERVICE_NAME,
        "version": VERSION,
        "status": "running"
    }


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 8000))
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=port,
        access_log=False  # Application logs go through structured logging
    )
