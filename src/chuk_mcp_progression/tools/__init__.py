"""
MCP tool implementations.

Tools are organized by domain:
- progression - Progression lifecycle and slot editing
- suggestions - Generated chord suggestions
"""

from chuk_mcp_progression.tools.progression import register_progression_tools
from chuk_mcp_progression.tools.suggestions import register_suggestion_tools

__all__ = [
    "register_progression_tools",
    "register_suggestion_tools",
]
