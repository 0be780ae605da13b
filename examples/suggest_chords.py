#!/usr/bin/env python3
"""
Example: Ask a language model for chord suggestions.

Builds three progressions and prints twelve suggestions for one slot of
each: the opening chord, the next chord, and a chord in the middle.

Needs an API key in config.yaml / config.json or OPENAI_API_KEY.

Usage:
    python examples/suggest_chords.py
    python examples/suggest_chords.py --config config.json
"""

import argparse
import asyncio
import logging
from pathlib import Path

from chuk_mcp_progression import Progression, ProgressionError, SuggestionPipeline
from chuk_mcp_progression.config import load_config
from chuk_mcp_progression.suggestions import OpenAITextGenerator


def starting_chord() -> tuple[str, Progression, int]:
    """Empty progression in B major, suggest the first chord."""
    progression = Progression()
    progression.set_key("B major")
    progression.add_slot()
    return "Starting Chord", progression, 0


def next_chord() -> tuple[str, Progression, int]:
    """Am, Dm, then suggest the third chord."""
    progression = Progression()
    progression.set_key("A minor")
    progression.add_slot()
    progression.add_chord(0, "Am")
    progression.add_slot()
    progression.add_chord(1, "Dm")
    progression.add_slot()
    return "Next Chord", progression, 2


def middle_chord() -> tuple[str, Progression, int]:
    """C G Am F in the default key, suggest a replacement for G."""
    progression = Progression()
    for i, chord in enumerate(["C", "G", "Am", "F"]):
        progression.add_slot()
        progression.add_chord(i, chord)
    return "Middle Chord", progression, 1


async def run(config_path: Path) -> None:
    """Run each case against the configured model."""
    config = load_config(config_path)
    pipeline = SuggestionPipeline(OpenAITextGenerator(config))

    for i, case in enumerate([starting_chord, next_chord, middle_chord], start=1):
        title, progression, position = case()
        print(f"\nCase {i}: {title}")
        print("=" * 40)
        print(progression.describe())
        print(f"Position: {position}")

        suggestions = await asyncio.wait_for(
            pipeline.suggest_chords(progression.snapshot(), position),
            timeout=config.timeout,
        )
        print(f"Suggestions: {', '.join(suggestions)}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Chord suggestion example")
    parser.add_argument("--config", type=Path, default=Path("config.yaml"))
    parser.add_argument("--debug", action="store_true", help="Show raw model responses")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    try:
        asyncio.run(run(args.config))
    except ProgressionError as e:
        print(f"\nFailed: {e}")
        raise SystemExit(1) from e

    print("\nDone!")


if __name__ == "__main__":
    main()
