"""
Response parsing - turns generator text into validated chord symbols.

Parsing is two-stage: a permissive regex scan finds the first
``{"chordSuggestions": [...]}`` object anywhere in the text, then that
substring alone goes through strict ``json.loads``. Checks run in order
(shape, count, notation) and the first failure wins.
"""

from __future__ import annotations

import json
import re
from typing import Any

from chuk_mcp_progression.constants import NUM_SUGGESTIONS, ErrorMessages
from chuk_mcp_progression.errors import InvalidResponse
from chuk_mcp_progression.suggestions.prompt import RESPONSE_KEY

# First {"chordSuggestions": [...]} object in the text, fences and prose allowed around it
RESPONSE_OBJECT_PATTERN = re.compile(r'\{\s*"' + RESPONSE_KEY + r'"\s*:\s*\[[\s\S]*?\]\s*\}')

# Whole symbol: root, quality, extension, at most one each of sus/add/altered degree, slash bass.
# Stacked alterations such as C13#11b9 are rejected.
CHORD_PATTERN = re.compile(
    r"(?P<root>[A-G][#b]?)"
    r"(?P<quality>maj7?|M7?|min7?|m7?|dim7?|aug7?)?"
    r"(?P<extension>\d+)?"
    r"(?P<suspension>sus\d+)?"
    r"(?P<added>add\d+)?"
    r"(?P<altered>[b#]\d+)?"
    r"(?P<bass>/[A-G][#b]?)?"
)


def is_valid_chord_symbol(symbol: Any) -> bool:
    """Check a value against the chord grammar."""
    return isinstance(symbol, str) and CHORD_PATTERN.fullmatch(symbol) is not None


def extract_response_object(text: str) -> dict[str, Any]:
    """
    Find and decode the suggestions object embedded in text.

    Raises:
        InvalidResponse: No candidate object, or it is not valid JSON
    """
    match = RESPONSE_OBJECT_PATTERN.search(text)
    if match is None:
        raise InvalidResponse(
            ErrorMessages.MALFORMED_JSON.format(detail=f"no '{RESPONSE_KEY}' object found")
        )

    try:
        data = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        raise InvalidResponse(ErrorMessages.MALFORMED_JSON.format(detail=e.msg)) from e

    if not isinstance(data.get(RESPONSE_KEY), list):
        raise InvalidResponse(
            ErrorMessages.MALFORMED_JSON.format(detail=f"'{RESPONSE_KEY}' is not an array")
        )
    return data


def parse_chord_suggestions(text: str, count: int = NUM_SUGGESTIONS) -> list[str]:
    """
    Validate a generator reply and return its chord suggestions.

    Duplicates are not rejected. Order is kept as the generator gave it.

    Args:
        text: Raw generator output
        count: Exact number of suggestions required

    Returns:
        The suggestions, verbatim and in order

    Raises:
        InvalidResponse: On the first failed check
    """
    suggestions = extract_response_object(text)[RESPONSE_KEY]

    if len(suggestions) != count:
        raise InvalidResponse(
            ErrorMessages.WRONG_COUNT.format(expected=count, actual=len(suggestions))
        )

    for chord in suggestions:
        if not is_valid_chord_symbol(chord):
            raise InvalidResponse(ErrorMessages.INVALID_CHORD.format(value=chord), value=chord)

    return list(suggestions)
