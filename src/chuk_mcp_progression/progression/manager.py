"""
Progression Manager - handles progression lifecycle.

Keeps named progressions in memory for the life of the session and
forwards edits to the Progression model. Nothing is written to disk.
"""

from __future__ import annotations

from datetime import UTC, datetime

from chuk_mcp_progression.constants import DEFAULT_KEY, ErrorMessages
from chuk_mcp_progression.errors import ProgressionNotFound
from chuk_mcp_progression.models.progression import Progression, ProgressionSnapshot


class ProgressionMetadata:
    """Lightweight metadata for listing progressions."""

    def __init__(
        self,
        name: str,
        key: str,
        slot_count: int,
        filled_count: int,
        modified: datetime,
    ):
        self.name = name
        self.key = key
        self.slot_count = slot_count
        self.filled_count = filled_count
        self.modified = modified

    def __repr__(self) -> str:
        return f"ProgressionMetadata({self.name!r}, {self.key}, {self.slot_count} slots)"


class ProgressionManager:
    """
    Manages progression lifecycle.

    Each edit goes through the named Progression, so bounds checks and
    the all-or-nothing failure behavior live in one place.
    """

    def __init__(self) -> None:
        self._progressions: dict[str, Progression] = {}
        self._modified: dict[str, datetime] = {}

    async def create(self, name: str, key: str = DEFAULT_KEY) -> Progression:
        """
        Create a new empty progression.

        Args:
            name: Progression name
            key: Tonal center (e.g., 'B major')

        Returns:
            The created Progression

        Raises:
            ValueError: A progression with this name already exists
        """
        if name in self._progressions:
            raise ValueError(ErrorMessages.PROGRESSION_EXISTS.format(name=name))

        progression = Progression(key=key)
        self._progressions[name] = progression
        self._touch(name)
        return progression

    async def get(self, name: str) -> Progression | None:
        """Get a progression by name, or None."""
        return self._progressions.get(name)

    async def require(self, name: str) -> Progression:
        """
        Get a progression by name.

        Raises:
            ProgressionNotFound: No progression has this name
        """
        progression = self._progressions.get(name)
        if progression is None:
            raise ProgressionNotFound(name)
        return progression

    async def list_progressions(self) -> list[ProgressionMetadata]:
        """List progressions, most recently modified first."""
        result = [
            ProgressionMetadata(
                name=name,
                key=progression.key,
                slot_count=len(progression),
                filled_count=progression.filled_count(),
                modified=self._modified[name],
            )
            for name, progression in self._progressions.items()
        ]
        return sorted(result, key=lambda m: m.modified, reverse=True)

    async def delete(self, name: str) -> bool:
        """
        Delete a progression.

        Returns:
            True if deleted, False if not found
        """
        if name not in self._progressions:
            return False
        del self._progressions[name]
        del self._modified[name]
        return True

    async def duplicate(self, name: str, new_name: str) -> Progression:
        """
        Copy a progression under a new name.

        The copy shares no slot list with the original.
        """
        original = await self.require(name)
        if new_name in self._progressions:
            raise ValueError(ErrorMessages.PROGRESSION_EXISTS.format(name=new_name))

        copy = Progression(key=original.key, chords=list(original.chords))
        self._progressions[new_name] = copy
        self._touch(new_name)
        return copy

    async def snapshot(self, name: str) -> ProgressionSnapshot:
        """Immutable copy of a progression's current state."""
        progression = await self.require(name)
        return progression.snapshot()

    def _touch(self, name: str) -> None:
        self._modified[name] = datetime.now(UTC)

    # Convenience methods for progression edits

    async def set_key(self, name: str, key: str) -> Progression:
        """Set the key of a progression."""
        progression = await self.require(name)
        progression.set_key(key)
        self._touch(name)
        return progression

    async def add_slot(self, name: str, position: int | None = None) -> Progression:
        """
        Add an empty slot.

        Args:
            name: Progression name
            position: Optional insert position (default: append at end)

        Returns:
            The updated Progression
        """
        progression = await self.require(name)
        progression.add_slot(position)
        self._touch(name)
        return progression

    async def add_chord(self, name: str, position: int, chord: str) -> Progression:
        """Put a chord symbol in an existing slot."""
        progression = await self.require(name)
        progression.add_chord(position, chord)
        self._touch(name)
        return progression

    async def remove_slot(self, name: str, position: int) -> Progression:
        """Delete a slot."""
        progression = await self.require(name)
        progression.remove_slot(position)
        self._touch(name)
        return progression

    async def remove_chord(self, name: str, position: int) -> Progression:
        """Empty a slot."""
        progression = await self.require(name)
        progression.remove_chord(position)
        self._touch(name)
        return progression
