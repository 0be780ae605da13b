"""
Progression tools - MCP tools for building progressions.

Tools for creating progressions and editing their chord slots.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_progression.constants import DEFAULT_KEY, SuccessMessages
from chuk_mcp_progression.errors import ProgressionNotFound
from chuk_mcp_progression.progression import ProgressionManager
from chuk_mcp_progression.tools.responses import error, progression_payload, success

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_progression_tools(
    mcp: ChukMCPServer,
    manager: ProgressionManager,
) -> dict[str, Any]:
    """
    Register progression tools with the MCP server.

    Args:
        mcp: The MCP server instance
        manager: The progression manager

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def progression_create(name: str, key: str = DEFAULT_KEY) -> str:
        """
        Create a new empty progression.

        Args:
            name: Progression name
            key: Tonal center, free-form (e.g., 'B major', 'A minor')

        Returns:
            JSON string with the created progression

        Example:
            progression_create(name="verse", key="A minor")
        """
        try:
            progression = await manager.create(name, key)
            return success(
                message=SuccessMessages.PROGRESSION_CREATED.format(name=name, key=key),
                progression=progression_payload(name, progression),
            )
        except Exception as e:
            return error(e, logger, "create progression")

    tools["progression_create"] = progression_create

    @mcp.tool  # type: ignore[arg-type]
    async def progression_get(name: str) -> str:
        """
        Get a progression's key and slots.

        Empty slots are returned as null.

        Args:
            name: Progression name

        Returns:
            JSON string with the progression and a readable listing
        """
        try:
            progression = await manager.get(name)
            if progression is None:
                return error(ProgressionNotFound(name), logger, "get progression")
            return success(
                progression=progression_payload(name, progression),
                listing=progression.describe(),
            )
        except Exception as e:
            return error(e, logger, "get progression")

    tools["progression_get"] = progression_get

    @mcp.tool  # type: ignore[arg-type]
    async def progression_list() -> str:
        """
        List progressions in this session.

        Returns:
            JSON string with progression summaries
        """
        try:
            progressions = await manager.list_progressions()
            return success(
                progressions=[
                    {
                        "name": p.name,
                        "key": p.key,
                        "slots": p.slot_count,
                        "filled": p.filled_count,
                        "modified": p.modified.isoformat(),
                    }
                    for p in progressions
                ]
            )
        except Exception as e:
            return error(e, logger, "list progressions")

    tools["progression_list"] = progression_list

    @mcp.tool  # type: ignore[arg-type]
    async def progression_delete(name: str) -> str:
        """
        Delete a progression.

        Args:
            name: Progression name
        """
        try:
            if not await manager.delete(name):
                return error(ProgressionNotFound(name), logger, "delete progression")
            return success(message=SuccessMessages.PROGRESSION_DELETED.format(name=name))
        except Exception as e:
            return error(e, logger, "delete progression")

    tools["progression_delete"] = progression_delete

    @mcp.tool  # type: ignore[arg-type]
    async def progression_duplicate(name: str, new_name: str) -> str:
        """
        Copy a progression under a new name for experimenting with variations.

        Args:
            name: Original progression name
            new_name: Name for the copy
        """
        try:
            copy = await manager.duplicate(name, new_name)
            return success(
                message=SuccessMessages.PROGRESSION_DUPLICATED.format(new_name=new_name),
                progression=progression_payload(new_name, copy),
            )
        except Exception as e:
            return error(e, logger, "duplicate progression")

    tools["progression_duplicate"] = progression_duplicate

    @mcp.tool  # type: ignore[arg-type]
    async def progression_set_key(name: str, key: str) -> str:
        """
        Change the key of a progression. Any spelling is accepted.

        Args:
            name: Progression name
            key: New tonal center
        """
        try:
            progression = await manager.set_key(name, key)
            return success(
                message=SuccessMessages.KEY_SET.format(key=key),
                progression=progression_payload(name, progression),
            )
        except Exception as e:
            return error(e, logger, "set key")

    tools["progression_set_key"] = progression_set_key

    @mcp.tool  # type: ignore[arg-type]
    async def progression_add_slot(name: str, position: int | None = None) -> str:
        """
        Add an empty chord slot.

        Without a position the slot is appended. With a position it is
        inserted before the slot currently there; the position must be an
        existing index.

        Args:
            name: Progression name
            position: Optional zero-based insert position

        Example:
            progression_add_slot(name="verse")
            progression_add_slot(name="verse", position=0)
        """
        try:
            progression = await manager.add_slot(name, position)
            index = len(progression) - 1 if position is None else position
            return success(
                message=SuccessMessages.SLOT_ADDED.format(position=index),
                progression=progression_payload(name, progression),
            )
        except Exception as e:
            return error(e, logger, "add slot")

    tools["progression_add_slot"] = progression_add_slot

    @mcp.tool  # type: ignore[arg-type]
    async def progression_add_chord(name: str, position: int, chord: str) -> str:
        """
        Put a chord in an existing slot, replacing any chord already there.

        Args:
            name: Progression name
            position: Zero-based slot index
            chord: Chord symbol (e.g., 'Am7', 'F#dim', 'G/B')

        Example:
            progression_add_chord(name="verse", position=0, chord="Am")
        """
        try:
            progression = await manager.add_chord(name, position, chord)
            return success(
                message=SuccessMessages.CHORD_ADDED.format(position=position, chord=chord),
                progression=progression_payload(name, progression),
            )
        except Exception as e:
            return error(e, logger, "add chord")

    tools["progression_add_chord"] = progression_add_chord

    @mcp.tool  # type: ignore[arg-type]
    async def progression_remove_slot(name: str, position: int) -> str:
        """
        Delete a slot. Later slots move down one position.

        Args:
            name: Progression name
            position: Zero-based slot index
        """
        try:
            progression = await manager.remove_slot(name, position)
            return success(
                message=SuccessMessages.SLOT_REMOVED.format(position=position),
                progression=progression_payload(name, progression),
            )
        except Exception as e:
            return error(e, logger, "remove slot")

    tools["progression_remove_slot"] = progression_remove_slot

    @mcp.tool  # type: ignore[arg-type]
    async def progression_remove_chord(name: str, position: int) -> str:
        """
        Clear the chord in a slot, keeping the slot.

        Args:
            name: Progression name
            position: Zero-based slot index
        """
        try:
            progression = await manager.remove_chord(name, position)
            return success(
                message=SuccessMessages.CHORD_REMOVED.format(position=position),
                progression=progression_payload(name, progression),
            )
        except Exception as e:
            return error(e, logger, "remove chord")

    tools["progression_remove_chord"] = progression_remove_chord

    return tools
