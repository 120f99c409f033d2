"""Domain-level exceptions.

Services raise these errors to express conditions a caller must handle.
Protocol layers (HTTP routes, MCP tools) catch them and map them to
user-facing errors without leaking internal details.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainError):
    """Input violates a validation rule (e.g. blank word)."""


class MarkupParseError(DomainError):
    """Fragment could not be parsed as markup at all."""


class UnknownToolError(DomainError):
    """Requested tool is not provided by this service."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")
