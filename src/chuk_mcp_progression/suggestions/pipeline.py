"""
Suggestion pipeline - snapshot in, validated chord list out.

One request is: check the position, build the prompt, await the
generator, validate the reply. The generator call is the only await.
Nothing is retried; callers decide whether to ask again.
"""

from __future__ import annotations

import logging

from chuk_mcp_progression.constants import NUM_SUGGESTIONS
from chuk_mcp_progression.models.progression import ProgressionSnapshot
from chuk_mcp_progression.suggestions.generators import TextGenerator
from chuk_mcp_progression.suggestions.parser import parse_chord_suggestions
from chuk_mcp_progression.suggestions.prompt import build_suggestion_prompt

logger = logging.getLogger(__name__)


class SuggestionPipeline:
    """
    Produces chord suggestions for one slot of a progression.

    Holds no per-request state, so concurrent calls are independent.
    """

    def __init__(self, generator: TextGenerator, suggestion_count: int = NUM_SUGGESTIONS):
        """
        Initialize the pipeline.

        Args:
            generator: Text generator used for every request
            suggestion_count: Exact number of chords a reply must hold
        """
        self.generator = generator
        self.suggestion_count = suggestion_count

    def build_prompt(self, snapshot: ProgressionSnapshot, position: int) -> str:
        """Build the prompt for a position after checking bounds."""
        snapshot.validate_position(position)
        return build_suggestion_prompt(snapshot, position, self.suggestion_count)

    async def suggest_chords(self, snapshot: ProgressionSnapshot, position: int) -> list[str]:
        """
        Suggest chords for a slot.

        Args:
            snapshot: Progression state at request time
            position: Zero-based slot to fill

        Returns:
            Exactly ``suggestion_count`` chord symbols, most preferred first

        Raises:
            InvalidPosition: position is outside the snapshot
            InvalidResponse: The reply failed validation
            Any exception raised by the generator, unchanged
        """
        prompt = self.build_prompt(snapshot, position)

        logger.info(f"Requesting {self.suggestion_count} suggestions for position {position}")
        try:
            text = await self.generator.generate(prompt)
        except Exception as e:
            logger.error(f"Text generation failed: {e}")
            raise

        logger.debug(f"Raw generator response:\n{text}")
        suggestions = parse_chord_suggestions(text, self.suggestion_count)
        logger.info(f"Received {len(suggestions)} suggestions for position {position}")
        return suggestions
