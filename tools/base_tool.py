#!/usr/bin/env python3
"""Base tool class for MCP tools."""

from abc import ABC, abstractmethod
from typing import Dict, Any, List
from mcp.types import CallToolResult, Tool, TextContent
from api.errors import ValidationError

_JSON_TYPES = {
    "string": (str,),
    "boolean": (bool,),
    "integer": (int,),
    "number": (int, float),
}

_TYPE_NAMES = {
    "string": "a string",
    "boolean": "a boolean",
    "integer": "an integer",
    "number": "a number",
}


class BaseTool(ABC):
    """Base class for MCP tools."""

    def __init__(self, name: str, description: str):
        self.name = name
        self.description = description

    @abstractmethod
    def get_schema(self) -> Dict[str, Any]:
        """Get the JSON schema for this tool's input parameters."""
        pass

    @abstractmethod
    async def execute(self, arguments: Dict[str, Any]) -> List[TextContent]:
        """Execute the tool with already validated arguments."""
        pass

    def to_mcp_tool(self) -> Tool:
        """Convert this tool to an MCP Tool object."""
        return Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.get_schema()
        )

    def validate_arguments(self, arguments: Dict[str, Any]) -> Dict[str, Any]:
        """Check arguments against the schema and return them with defaults applied.

        Raises ValidationError naming the first offending field.
        """
        schema = self.get_schema()
        properties = schema.get("properties", {})
        required = schema.get("required", [])
        arguments = arguments or {}

        for field in required:
            if arguments.get(field) is None:
                raise ValidationError(field, f"Invalid arguments: missing required argument '{field}'")

        if schema.get("additionalProperties") is False:
            for field in arguments:
                if field not in properties:
                    raise ValidationError(field, f"Invalid arguments: unexpected argument '{field}'")

        validated = {}
        for field, spec in properties.items():
            value = arguments.get(field)
            if value is None:
                if "default" in spec:
                    validated[field] = spec["default"]
                continue

            json_type = spec.get("type")
            expected = _JSON_TYPES.get(json_type)
            is_bool = isinstance(value, bool)
            if expected and (not isinstance(value, expected) or (is_bool and json_type != "boolean")):
                raise ValidationError(
                    field, f"Invalid arguments: '{field}' must be {_TYPE_NAMES[json_type]}"
                )
            validated[field] = value

        return validated

    def format_text(self, text: str) -> List[TextContent]:
        return [TextContent(type="text", text=text)]

    def format_error(self, error: str) -> CallToolResult:
        """Format an error message as an error tool result."""
        return error_result(error)


def error_result(message: str) -> CallToolResult:
    return CallToolResult(
        content=[TextContent(type="text", text=f"Error: {message}")],
        isError=True,
    )
