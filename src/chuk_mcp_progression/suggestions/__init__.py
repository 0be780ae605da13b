"""
Chord suggestions - prompt, generate, validate.

This module provides:
- SuggestionPipeline: End-to-end suggestion request
- build_suggestion_prompt: Progression snapshot to prompt text
- parse_chord_suggestions: Generator text to validated chord list
- TextGenerator: The generator protocol, with OpenAI and callable backends
"""

from chuk_mcp_progression.suggestions.generators import (
    FunctionTextGenerator,
    OpenAITextGenerator,
    TextGenerator,
)
from chuk_mcp_progression.suggestions.parser import (
    CHORD_PATTERN,
    extract_response_object,
    is_valid_chord_symbol,
    parse_chord_suggestions,
)
from chuk_mcp_progression.suggestions.pipeline import SuggestionPipeline
from chuk_mcp_progression.suggestions.prompt import RESPONSE_KEY, build_suggestion_prompt

__all__ = [
    "CHORD_PATTERN",
    "FunctionTextGenerator",
    "OpenAITextGenerator",
    "RESPONSE_KEY",
    "SuggestionPipeline",
    "TextGenerator",
    "build_suggestion_prompt",
    "extract_response_object",
    "is_valid_chord_symbol",
    "parse_chord_suggestions",
]
