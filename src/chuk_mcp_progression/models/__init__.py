"""
Pydantic models for the progression system.

This module provides:
- Progression: Mutable chord slots keyed to a tonal center
- ProgressionSnapshot: Immutable copy handed to the suggestion pipeline
- Chord: A slot value (chord symbol or None for an empty slot)
"""

from chuk_mcp_progression.models.progression import Chord, Progression, ProgressionSnapshot

__all__ = [
    "Chord",
    "Progression",
    "ProgressionSnapshot",
]
