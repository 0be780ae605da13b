"""
Progression management - named progressions for a session.

This module provides:
- ProgressionManager: In-memory lifecycle and editing of progressions
- ProgressionMetadata: Lightweight listing entry
"""

from chuk_mcp_progression.progression.manager import ProgressionManager, ProgressionMetadata

__all__ = [
    "ProgressionManager",
    "ProgressionMetadata",
]
