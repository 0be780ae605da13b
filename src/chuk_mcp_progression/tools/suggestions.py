"""
Suggestion tools - MCP tools for generated chord suggestions.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_progression.constants import DEFAULT_TIMEOUT, ErrorMessages
from chuk_mcp_progression.progression import ProgressionManager
from chuk_mcp_progression.suggestions import SuggestionPipeline
from chuk_mcp_progression.tools.responses import error, success

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_suggestion_tools(
    mcp: ChukMCPServer,
    manager: ProgressionManager,
    pipeline: SuggestionPipeline,
    timeout: float = DEFAULT_TIMEOUT,
) -> dict[str, Any]:
    """
    Register suggestion tools with the MCP server.

    Args:
        mcp: The MCP server instance
        manager: The progression manager
        pipeline: Pipeline used for every suggestion request
        timeout: Seconds to wait for one request before giving up

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def progression_suggest_chords(name: str, position: int) -> str:
        """
        Suggest chords for a slot in a progression.

        The suggestions come from a language model and are ordered from most
        to least preferred. The current chord at the position, if any, is
        ignored. Failed requests are not retried; call again to retry.

        Args:
            name: Progression name
            position: Zero-based slot index

        Returns:
            JSON string with the suggested chord symbols

        Example:
            progression_suggest_chords(name="verse", position=2)
        """
        deadline = asyncio.timeout(timeout)
        try:
            snapshot = await manager.snapshot(name)
            async with deadline:
                suggestions = await pipeline.suggest_chords(snapshot, position)
            return success(
                position=position,
                progression=snapshot.to_dict(),
                suggestions=suggestions,
            )
        except TimeoutError as e:
            # Only our own deadline is reported as a request timeout
            if not deadline.expired():
                return error(e, logger, "suggest chords")
            return error(
                TimeoutError(ErrorMessages.SUGGESTION_TIMEOUT.format(timeout=timeout)),
                logger,
                "suggest chords",
            )
        except Exception as e:
            return error(e, logger, "suggest chords")

    tools["progression_suggest_chords"] = progression_suggest_chords

    return tools
