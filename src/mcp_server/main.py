"""MCP server entry point — serves the lookup tool over stdio.

Usage:
    PYTHONPATH=src python -m mcp_server.main
"""

import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

load_dotenv()

_src_path = Path(__file__).parent.parent
sys.path.insert(0, str(_src_path))

from api.dependencies import get_dictionary_port
from domain.model.errors import MarkupParseError, ValidationError
from port.dictionary import DictionaryFetchError
from services.tool_catalog import (
    INVALID_ARGUMENTS_MESSAGE,
    LOOKUP_FAILED_MESSAGE,
    LOOKUP_TOOL_DESCRIPTION,
    LOOKUP_TOOL_NAME,
    call_tool,
)
from utils.logging import setup_structured_logging

logger = logging.getLogger(__name__)

SERVER_NAME = "galician-dictionary-lookup"


async def lookup_galician_word(word: str) -> str:
    """Look up a Galician word and return its definitions as text."""
    logger.info("Tool call received", extra={"tool": LOOKUP_TOOL_NAME, "word": word})
    try:
        return await call_tool(get_dictionary_port(), LOOKUP_TOOL_NAME, word)
    except ValidationError as e:
        raise ToolError(INVALID_ARGUMENTS_MESSAGE.format(details=f"word: {e}")) from e
    except (DictionaryFetchError, MarkupParseError) as e:
        logger.error(
            "Dictionary lookup failed",
            extra={"word": word, "error": str(e)},
            exc_info=True,
        )
        raise ToolError(LOOKUP_FAILED_MESSAGE) from e


def build_server() -> FastMCP:
    server = FastMCP(SERVER_NAME)
    server.tool(name=LOOKUP_TOOL_NAME, description=LOOKUP_TOOL_DESCRIPTION)(lookup_galician_word)
    return server


if __name__ == "__main__":
    setup_structured_logging()
    logger.info("Galician dictionary MCP server running on stdio")
    build_server().run(transport="stdio")
