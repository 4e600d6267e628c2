"""Tool subsystem - card operations for tool-calling agents."""

from hexnote.tools.card_tools import CardTools
from hexnote.tools.registry import ToolDefinition, ToolRegistry

__all__ = [
    "CardTools",
    "ToolDefinition",
    "ToolRegistry",
]
