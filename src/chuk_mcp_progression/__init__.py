"""
CHUK Progression - LLM-assisted chord progression building.

Keep a progression of chord slots keyed to a tonal center, ask a text
generator for chords that fit a slot, and accept only replies that pass
strict format, count and notation checks.
"""

from chuk_mcp_progression.errors import (
    ExternalGenerationError,
    InvalidPosition,
    InvalidResponse,
    ProgressionError,
)
from chuk_mcp_progression.models import Progression, ProgressionSnapshot
from chuk_mcp_progression.suggestions import SuggestionPipeline

__all__ = [
    "ExternalGenerationError",
    "InvalidPosition",
    "InvalidResponse",
    "Progression",
    "ProgressionError",
    "ProgressionSnapshot",
    "SuggestionPipeline",
]
