"""
Progression model - the chord slots being built.

A Progression contains:
- A key (free-form tonal center such as 'B major')
- An ordered list of slots, each a chord symbol or None when empty

Slots are addressed by zero-based position. Every position-based operation
checks bounds first and raises InvalidPosition without touching state.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, Field

from chuk_mcp_progression.constants import DEFAULT_KEY
from chuk_mcp_progression.errors import InvalidPosition

# A slot value: a chord symbol, or None for an empty slot
Chord = str | None


def check_position(position: int, length: int) -> None:
    """Raise InvalidPosition unless 0 <= position < length."""
    if position < 0 or position >= length:
        raise InvalidPosition(position, length)


class ProgressionSnapshot(BaseModel):
    """
    Immutable copy of a progression at a point in time.

    The suggestion pipeline works from a snapshot so that edits to the
    live progression cannot change a request already in flight.
    """

    key: str = Field(..., description="Tonal center (e.g., 'B major')")
    chords: tuple[Chord, ...] = Field(default=(), description="Slots in order")

    model_config = {"frozen": True}

    def __len__(self) -> int:
        return len(self.chords)

    def validate_position(self, position: int) -> None:
        """Check that position addresses an existing slot."""
        check_position(position, len(self.chords))

    def to_dict(self) -> dict[str, Any]:
        """Convert to the plain ``{key, chords}`` form."""
        return {"key": self.key, "chords": list(self.chords)}

    def describe(self) -> str:
        """Human-readable listing with empty slots shown as null."""
        return f"Key: {self.key}\nChords: {json.dumps(list(self.chords))}"


class Progression(BaseModel):
    """
    A chord progression under construction.

    Owns the live slot list. Use snapshot() to hand state to anything
    that must not observe later edits.
    """

    key: str = Field(DEFAULT_KEY, description="Tonal center (e.g., 'C major')")
    chords: list[Chord] = Field(default_factory=list, description="Slots in order")

    def __len__(self) -> int:
        return len(self.chords)

    def validate_position(self, position: int) -> None:
        """Check that position addresses an existing slot."""
        check_position(position, len(self.chords))

    def set_key(self, key: str) -> None:
        """Replace the key. The spelling is not checked."""
        self.key = key

    def add_slot(self, position: int | None = None) -> int:
        """
        Add an empty slot.

        Args:
            position: Insert before the slot currently at this index.
                None appends at the end. An explicit position must address
                an existing slot, so add_slot(len(progression)) is rejected.

        Returns:
            Index of the new slot
        """
        if position is None:
            self.chords.append(None)
            return len(self.chords) - 1

        self.validate_position(position)
        self.chords.insert(position, None)
        return position

    def add_chord(self, position: int, chord: str) -> None:
        """
        Put a chord symbol in an existing slot, replacing what was there.

        The symbol is stored as given; only generated suggestions are
        checked against the chord grammar.
        """
        self.validate_position(position)
        self.chords[position] = chord

    def remove_slot(self, position: int) -> None:
        """Delete a slot; later slots move down one index."""
        self.validate_position(position)
        del self.chords[position]

    def remove_chord(self, position: int) -> None:
        """Empty a slot without changing the length."""
        self.validate_position(position)
        self.chords[position] = None

    def filled_count(self) -> int:
        """Number of slots holding a chord."""
        return sum(1 for chord in self.chords if chord is not None)

    def snapshot(self) -> ProgressionSnapshot:
        """Take an independent immutable copy of the current state."""
        return ProgressionSnapshot(key=self.key, chords=tuple(self.chords))

    def describe(self) -> str:
        """Human-readable listing of the key and slots."""
        return self.snapshot().describe()

    def to_dict(self) -> dict[str, Any]:
        """Convert to the plain ``{key, chords}`` form."""
        return {"key": self.key, "chords": list(self.chords)}
