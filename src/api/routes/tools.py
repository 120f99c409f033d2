"""Tool-call routes.

Exposes the dictionary lookup as a callable tool for language-model agents:
- GET /tools: List available tools with their input schema
- POST /tools/call: Invoke a tool and return its text result
"""

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import ValidationError as PydanticValidationError

from api.dependencies import get_dictionary_port
from api.models import LookupArguments, TextContent, ToolCallRequest, ToolCallResponse, ToolListResponse
from domain.model.errors import MarkupParseError, UnknownToolError, ValidationError
from port.dictionary import DictionaryFetchError, DictionaryPort
from services.tool_catalog import (
    INVALID_ARGUMENTS_MESSAGE,
    LOOKUP_FAILED_MESSAGE,
    LOOKUP_TOOL_NAME,
    UNKNOWN_TOOL_MESSAGE,
    call_tool,
    list_tools,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tools", tags=["tools"])


def _format_validation_errors(error: PydanticValidationError) -> str:
    return ", ".join(
        f"{'.'.join(str(part) for part in e['loc'])}: {e['msg']}"
        for e in error.errors()
    )


@router.get("", response_model=ToolListResponse)
async def get_tools():
    """List the tools this service provides."""
    logger.info("Tool listing requested")
    return ToolListResponse(tools=list_tools())


@router.post("/call", response_model=ToolCallResponse)
async def call(
    request: ToolCallRequest,
    dictionary: DictionaryPort = Depends(get_dictionary_port),
):
    """Invoke a tool by name.

    Args:
        request: Envelope with call ID, tool name and arguments.
        dictionary: Dictionary port used by the lookup tool.

    Returns:
        ToolCallResponse echoing the call ID with the tool's text result.
    """
    logger.info("Tool call received", extra={"tool": request.name, "callId": request.id})

    if request.name != LOOKUP_TOOL_NAME:
        logger.warning("Unknown tool requested", extra={"tool": request.name})
        raise HTTPException(status_code=404, detail=UNKNOWN_TOOL_MESSAGE.format(name=request.name))

    try:
        arguments = LookupArguments(**request.arguments)
    except PydanticValidationError as e:
        raise HTTPException(
            status_code=422,
            detail=INVALID_ARGUMENTS_MESSAGE.format(details=_format_validation_errors(e)),
        )

    try:
        text = await call_tool(dictionary, request.name, arguments.word)
    except UnknownToolError:
        raise HTTPException(status_code=404, detail=UNKNOWN_TOOL_MESSAGE.format(name=request.name))
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=INVALID_ARGUMENTS_MESSAGE.format(details=str(e)))
    except (DictionaryFetchError, MarkupParseError) as e:
        logger.error(
            "Dictionary lookup failed",
            extra={"word": arguments.word, "callId": request.id, "error": str(e)},
            exc_info=True,
        )
        raise HTTPException(status_code=502, detail=LOOKUP_FAILED_MESSAGE)

    return ToolCallResponse(id=request.id, content=[TextContent(text=text)])
