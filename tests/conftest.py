"""
Pytest configuration and shared fixtures.
"""

import json
import os

import pytest

from chuk_mcp_progression.suggestions import FunctionTextGenerator

TWELVE_CHORDS = [
    "Am",
    "Dm7",
    "E7",
    "Fmaj7",
    "G",
    "C",
    "Bm7b5",
    "E7sus4",
    "Am/G",
    "F#dim",
    "Gadd9",
    "Bb",
]


class RecordingGenerator:
    """Text generator that returns a canned reply and records prompts."""

    def __init__(self, reply: str):
        self.reply = reply
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.reply


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep generator settings from the real environment out of tests."""
    for var in list(os.environ):
        upper = var.upper()
        if upper.startswith("CHUK_PROGRESSION_") or upper in ("OPENAI_API_KEY", "APIKEY", "API_KEY"):
            monkeypatch.delenv(var)


@pytest.fixture
def twelve_chords() -> list[str]:
    """Twelve chord symbols that all match the grammar."""
    return list(TWELVE_CHORDS)


@pytest.fixture
def valid_reply(twelve_chords: list[str]) -> str:
    """A clean JSON reply with twelve suggestions."""
    return json.dumps({"chordSuggestions": twelve_chords})


@pytest.fixture
def recording_generator(valid_reply: str) -> RecordingGenerator:
    """Generator returning the valid reply."""
    return RecordingGenerator(valid_reply)


@pytest.fixture
def failing_generator() -> FunctionTextGenerator:
    """Generator whose backend raises."""

    def backend(prompt: str) -> str:
        raise ConnectionError("network unreachable")

    return FunctionTextGenerator(backend)
