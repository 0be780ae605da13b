"""
Prompt construction for chord suggestions.

Encodes a progression snapshot as a natural-language request that asks the
generator for a JSON object holding a fixed number of chord symbols.
"""

from __future__ import annotations

import json

from chuk_mcp_progression.constants import NUM_SUGGESTIONS
from chuk_mcp_progression.models.progression import ProgressionSnapshot

RESPONSE_KEY = "chordSuggestions"

PROMPT_TEMPLATE = """\
You are an expert harmony assistant specializing in Western tonal music (pop, rock, folk, and classical).
Your task is to suggest chords that fit harmonically within a given chord progression and key. Focus on common, simple chords rather than complex or extended jazz chords.

INPUT INFORMATION:
Key: {key}
Progression: {progression}
Position: {position}

The chord progression is written using standard music notation (e.g., "C", "Am", "F", "G", or null if a slot is empty).
Positions in the chord progression are zero-indexed. Position 0 is the first chord, position 1 is the second chord, etc.
The key defines the tonal center for the harmonic context.
There may be multiple empty slots (null values) in the progression.
The chord at the specified Position may or may not already be filled - provide suggestions anyway, ignoring the current chord at that position.

YOUR TASK:
Return {count} musically coherent chord suggestions, ordered from most to least preferred for that position in this progression and key.

GUIDELINES:
- Output must be a JSON object.
- Use standard chord notation: "Cmaj7", "Am7b5", "E7", "F#dim", "G9", etc.
- Each chord should make sense in the context of the given key and surrounding chords.
- You may include both diatonic chords (from the key) and non-diatonic chords (e.g. secondary dominants, borrowed chords, tritone substitutions).
- The ordering should reflect musical likelihood or smoothness of progression (voice leading and harmonic function).
- Avoid duplicates and overly complex symbols (e.g. "C13#11b9").
- Assume 12 semitone equal temperament and common Western harmony.

OUTPUT FORMAT:
{{
    "{response_key}": ["list of {count} chords in standard music notation"]
}}
Output only valid JSON, no extra text, no markdown, no trailing commas.
"""


def format_chords(chords: tuple[str | None, ...] | list[str | None]) -> str:
    """Render slots as a JSON array so empty slots read as null."""
    return json.dumps(list(chords))


def build_suggestion_prompt(
    snapshot: ProgressionSnapshot,
    position: int,
    count: int = NUM_SUGGESTIONS,
) -> str:
    """
    Build the instruction text for one suggestion request.

    Args:
        snapshot: Progression state to describe
        position: Zero-based slot the suggestions are for
        count: Number of chords to ask for

    Returns:
        The prompt string
    """
    return PROMPT_TEMPLATE.format(
        key=snapshot.key,
        progression=format_chords(snapshot.chords),
        position=position,
        count=count,
        response_key=RESPONSE_KEY,
    )
