"""
Constants for the progression system.

No magic strings - shared limits and message templates live here.
"""

# Number of chords every suggestion reply must contain
NUM_SUGGESTIONS = 12

# Key used when a progression is created without one
DEFAULT_KEY = "C major"

# Default model for the OpenAI-backed generator
DEFAULT_MODEL = "gpt-4o-mini"

# Seconds the tool layer waits for one suggestion request
DEFAULT_TIMEOUT = 60.0

# Prefix for generator settings in the environment (e.g. CHUK_PROGRESSION_MODEL)
ENV_PREFIX = "CHUK_PROGRESSION_"

# Environment variable naming the config file
ENV_CONFIG_PATH = "CHUK_PROGRESSION_CONFIG"


class ErrorMessages:
    """Standardized error messages."""

    PROGRESSION_NOT_FOUND = "Progression '{name}' not found."
    PROGRESSION_EXISTS = "Progression '{name}' already exists."
    INVALID_POSITION = "Invalid position: {position}. Must be between 0 and {last}"
    EMPTY_PROGRESSION = "Invalid position: {position}. The progression has no slots"
    MALFORMED_JSON = "malformed JSON: {detail}"
    WRONG_COUNT = "wrong count: expected {expected} chord suggestions, got {actual}"
    INVALID_CHORD = "invalid chord symbol: {value}"
    SUGGESTION_TIMEOUT = "Suggestion request timed out after {timeout}s."


class SuccessMessages:
    """Standardized success messages."""

    PROGRESSION_CREATED = "Created progression '{name}' in {key}."
    PROGRESSION_DELETED = "Progression '{name}' deleted."
    PROGRESSION_DUPLICATED = "Created duplicate: {new_name}"
    KEY_SET = "Key set to {key}."
    SLOT_ADDED = "Added empty slot at position {position}."
    SLOT_REMOVED = "Removed slot at position {position}."
    CHORD_ADDED = "Set position {position} to {chord}."
    CHORD_REMOVED = "Cleared chord at position {position}."
