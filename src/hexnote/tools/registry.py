"""Tool registry for routing tool calls to card operations."""

from dataclasses import dataclass, field
from typing import Any, Callable

from hexnote.core.types import ToolResult
from hexnote.tools.card_tools import CardTools, get_card_tools


@dataclass
class ToolDefinition:
    """Definition of a tool."""

    name: str
    description: str
    handler: Callable[..., ToolResult]
    input_schema: dict[str, Any] = field(
        default_factory=lambda: {"type": "object", "properties": {}}
    )
    category: str = "cards"

    @property
    def required(self) -> list[str]:
        return list(self.input_schema.get("required", []))

    def to_schema(self) -> dict[str, Any]:
        """Describe the tool in the shape tool-calling APIs expect."""
        return {
            "name": self.name,
            "description": self.description,
            "input_schema": self.input_schema,
        }


def _string_params(**descriptions: str) -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            name: {"type": "string", "description": description}
            for name, description in descriptions.items()
        },
        "required": list(descriptions),
    }


class ToolRegistry:
    """Registry for available tools."""

    def __init__(self, card_tools: CardTools | None = None):
        """
        Initialize tool registry.

        Args:
            card_tools: Card tools to register (defaults to the shared instance)
        """
        self.tools: dict[str, ToolDefinition] = {}
        self._register_card_tools(card_tools or get_card_tools())

    def _register_card_tools(self, card_tools: CardTools) -> None:
        """Register the note card tools."""
        self.register(
            ToolDefinition(
                name="create_note",
                description="Create a new sticky note with markdown content.",
                handler=card_tools.create_note,
                input_schema=_string_params(
                    content="The markdown content for the new note"
                ),
            )
        )
        self.register(
            ToolDefinition(
                name="list_notes",
                description=(
                    "List all sticky notes with a preview of each note's content."
                ),
                handler=card_tools.list_notes,
            )
        )
        self.register(
            ToolDefinition(
                name="read_note",
                description="Read a specific sticky note by ID.",
                handler=card_tools.read_note,
                input_schema=_string_params(id="The UUID of the note to read"),
            )
        )
        self.register(
            ToolDefinition(
                name="update_note",
                description="Update the content of an existing sticky note.",
                handler=card_tools.update_note,
                input_schema=_string_params(
                    id="The UUID of the note to update",
                    content="The new markdown content for the note",
                ),
            )
        )
        self.register(
            ToolDefinition(
                name="delete_note",
                description="Delete a sticky note permanently.",
                handler=card_tools.delete_note,
                input_schema=_string_params(id="The UUID of the note to delete"),
            )
        )

    def register(self, tool: ToolDefinition) -> None:
        """Register a tool."""
        self.tools[tool.name] = tool

    def unregister(self, name: str) -> None:
        """Unregister a tool."""
        self.tools.pop(name, None)

    def get(self, name: str) -> ToolDefinition | None:
        """Get a tool by name."""
        return self.tools.get(name)

    def list_tools(self, category: str | None = None) -> list[ToolDefinition]:
        """List all tools, optionally filtered by category."""
        if category is None:
            return list(self.tools.values())
        return [t for t in self.tools.values() if t.category == category]

    def get_tool_names(self) -> list[str]:
        """Get list of tool names."""
        return list(self.tools.keys())

    def schemas(self) -> list[dict[str, Any]]:
        """Schemas of all registered tools."""
        return [t.to_schema() for t in self.tools.values()]

    def dispatch(self, name: str, arguments: dict[str, Any] | None = None) -> ToolResult:
        """
        Run a tool call.

        Args:
            name: Tool name
            arguments: Tool input as decoded from the call

        Returns:
            The tool's result, or an error result for unknown tools and
            missing or non-string arguments
        """
        tool = self.get(name)
        if tool is None:
            return ToolResult(f"Unknown tool: {name}", is_error=True)

        arguments = arguments or {}
        missing = [p for p in tool.required if p not in arguments]
        if missing:
            return ToolResult(
                f"Missing required argument(s) for {name}: {', '.join(missing)}",
                is_error=True,
            )

        properties = tool.input_schema.get("properties", {})
        kwargs = {}
        for param in properties:
            if param not in arguments:
                continue
            value = arguments[param]
            if not isinstance(value, str):
                return ToolResult(
                    f"Argument '{param}' for {name} must be a string",
                    is_error=True,
                )
            kwargs[param] = value

        return tool.handler(**kwargs)


# Default instance
_registry: ToolRegistry | None = None


def get_tool_registry() -> ToolRegistry:
    """Get or create the default tool registry."""
    global _registry
    if _registry is None:
        _registry = ToolRegistry()
    return _registry


def set_tool_registry(registry: ToolRegistry | None) -> None:
    """Set the default tool registry (for testing)."""
    global _registry
    _registry = registry
