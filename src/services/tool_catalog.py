"""Tool definitions shared by the HTTP and MCP protocol layers."""

from typing import Any

from domain.model.errors import UnknownToolError, ValidationError
from port.dictionary import DictionaryPort
from services.dictionary_service import describe_word

LOOKUP_TOOL_NAME = "lookup-galician-word"
LOOKUP_TOOL_DESCRIPTION = (
    "Busca unha palabra no dicionario da Real Academia Galega e devolve as "
    "súas definicións, exemplos e expresións."
)
WORD_ARGUMENT_DESCRIPTION = "A palabra en galego a buscar no dicionario."
EMPTY_WORD_MESSAGE = "A palabra non pode estar baleira."

# User-facing messages; internal error details are never included.
UNKNOWN_TOOL_MESSAGE = "Ferramenta descoñecida: {name}"
INVALID_ARGUMENTS_MESSAGE = "Argumentos inválidos: {details}"
LOOKUP_FAILED_MESSAGE = "Erro ao buscar a palabra no dicionario."

LOOKUP_TOOL_INPUT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "word": {
            "type": "string",
            "description": WORD_ARGUMENT_DESCRIPTION,
        },
    },
    "required": ["word"],
}


def list_tools() -> list[dict[str, Any]]:
    return [{
        "name": LOOKUP_TOOL_NAME,
        "description": LOOKUP_TOOL_DESCRIPTION,
        "inputSchema": LOOKUP_TOOL_INPUT_SCHEMA,
    }]


async def call_tool(dictionary: DictionaryPort, name: str, word: str) -> str:
    """Run a tool by name.

    Raises:
        UnknownToolError: If ``name`` is not a provided tool.
        ValidationError: If the word is blank.
    """
    if name != LOOKUP_TOOL_NAME:
        raise UnknownToolError(name)
    if not word or not word.strip():
        raise ValidationError(EMPTY_WORD_MESSAGE)
    return await describe_word(dictionary, word)
