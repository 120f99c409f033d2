"""Pydantic models for API request/response."""

from typing import Any, Literal, Optional, Union
from pydantic import BaseModel, Field, field_validator

from services.tool_catalog import EMPTY_WORD_MESSAGE, WORD_ARGUMENT_DESCRIPTION


class LookupArguments(BaseModel):
    """Arguments of the lookup tool."""
    word: str = Field(..., description=WORD_ARGUMENT_DESCRIPTION)

    @field_validator("word")
    @classmethod
    def word_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError(EMPTY_WORD_MESSAGE)
        return v.strip()


class ToolCallRequest(BaseModel):
    """Tool invocation envelope."""
    id: Optional[Union[str, int]] = Field(None, description="Caller-chosen call ID, echoed back")
    name: str = Field(..., description="Tool name")
    arguments: dict[str, Any] = Field(default_factory=dict)


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ToolCallResponse(BaseModel):
    """Tool result envelope."""
    id: Optional[Union[str, int]] = None
    content: list[TextContent]


class ToolDefinition(BaseModel):
    name: str
    description: str
    inputSchema: dict[str, Any]


class ToolListResponse(BaseModel):
    tools: list[ToolDefinition]
