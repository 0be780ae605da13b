"""
Tests for MCP tools.

Tests the MCP tool implementations for progression editing and
chord suggestions.
"""

import asyncio
import json

import pytest
from conftest import RecordingGenerator

from chuk_mcp_progression.progression import ProgressionManager
from chuk_mcp_progression.suggestions import FunctionTextGenerator, SuggestionPipeline
from chuk_mcp_progression.tools import register_progression_tools, register_suggestion_tools


# Mock MCP server for testing tools
class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def manager() -> ProgressionManager:
    return ProgressionManager()


@pytest.fixture
def tools(manager: ProgressionManager) -> dict:
    """Progression tools registered on a mock server."""
    return register_progression_tools(MockMCPServer("test"), manager)


async def build(tools: dict, name: str, chords: list[str | None], key: str = "A minor") -> None:
    """Create a progression through the tools."""
    await tools["progression_create"](name=name, key=key)
    for i, chord in enumerate(chords):
        await tools["progression_add_slot"](name=name)
        if chord is not None:
            await tools["progression_add_chord"](name=name, position=i, chord=chord)


class TestProgressionTools:
    """Tests for progression tools."""

    def test_registration(self) -> None:
        """All tools are registered with the server."""
        mcp = MockMCPServer("test")
        tools = register_progression_tools(mcp, ProgressionManager())
        assert set(mcp.tools) == set(tools)
        assert "progression_add_slot" in mcp.tools

    @pytest.mark.asyncio
    async def test_create(self, tools: dict) -> None:
        """Create returns the empty progression."""
        data = json.loads(await tools["progression_create"](name="verse", key="B major"))
        assert data["status"] == "success"
        assert data["progression"] == {"name": "verse", "key": "B major", "chords": [], "slots": 0}

    @pytest.mark.asyncio
    async def test_create_default_key(self, tools: dict) -> None:
        """The key defaults to C major."""
        data = json.loads(await tools["progression_create"](name="verse"))
        assert data["progression"]["key"] == "C major"

    @pytest.mark.asyncio
    async def test_create_twice(self, tools: dict) -> None:
        """Creating an existing name is an error."""
        await tools["progression_create"](name="verse")
        data = json.loads(await tools["progression_create"](name="verse"))
        assert data["status"] == "error"
        assert "already exists" in data["message"]

    @pytest.mark.asyncio
    async def test_build_and_get(self, tools: dict) -> None:
        """Slots and chords show up in get, with null for empty."""
        await build(tools, "verse", ["Am", None, "F"])

        data = json.loads(await tools["progression_get"](name="verse"))
        assert data["status"] == "success"
        assert data["progression"]["chords"] == ["Am", None, "F"]
        assert data["listing"] == 'Key: A minor\nChords: ["Am", null, "F"]'

    @pytest.mark.asyncio
    async def test_get_missing(self, tools: dict) -> None:
        """Unknown names are errors."""
        data = json.loads(await tools["progression_get"](name="nope"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_insert_slot(self, tools: dict) -> None:
        """add_slot with a position inserts."""
        await build(tools, "verse", ["C", "G"])
        data = json.loads(await tools["progression_add_slot"](name="verse", position=1))
        assert data["progression"]["chords"] == ["C", None, "G"]
        assert data["message"] == "Added empty slot at position 1."

    @pytest.mark.asyncio
    async def test_insert_at_length_rejected(self, tools: dict) -> None:
        """add_slot at the length is an InvalidPosition error."""
        await build(tools, "verse", ["C", "G"])
        data = json.loads(await tools["progression_add_slot"](name="verse", position=2))
        assert data["status"] == "error"
        assert data["error_type"] == "InvalidPosition"
        assert data["position"] == 2
        assert data["valid_range"] == [0, 1]

    @pytest.mark.asyncio
    async def test_remove_slot_and_chord(self, tools: dict) -> None:
        """Removing a slot shifts; removing a chord empties."""
        await build(tools, "verse", ["C", "G", "Am", "F"])

        data = json.loads(await tools["progression_remove_slot"](name="verse", position=0))
        assert data["progression"]["chords"] == ["G", "Am", "F"]

        data = json.loads(await tools["progression_remove_chord"](name="verse", position=1))
        assert data["progression"]["chords"] == ["G", None, "F"]

    @pytest.mark.asyncio
    async def test_add_chord_out_of_range_unchanged(self, tools: dict) -> None:
        """A rejected edit leaves the progression as it was."""
        await build(tools, "verse", ["C"])
        data = json.loads(
            await tools["progression_add_chord"](name="verse", position=5, chord="G")
        )
        assert data["status"] == "error"

        data = json.loads(await tools["progression_get"](name="verse"))
        assert data["progression"]["chords"] == ["C"]

    @pytest.mark.asyncio
    async def test_set_key(self, tools: dict) -> None:
        """set_key replaces the key."""
        await build(tools, "verse", [])
        data = json.loads(await tools["progression_set_key"](name="verse", key="F# minor"))
        assert data["progression"]["key"] == "F# minor"

    @pytest.mark.asyncio
    async def test_list_delete_duplicate(self, tools: dict) -> None:
        """Lifecycle tools work together."""
        await build(tools, "verse", ["Am", None])
        await tools["progression_duplicate"](name="verse", new_name="chorus")

        data = json.loads(await tools["progression_list"]())
        listed = {p["name"]: p for p in data["progressions"]}
        assert set(listed) == {"verse", "chorus"}
        assert listed["chorus"]["slots"] == 2
        assert listed["chorus"]["filled"] == 1

        data = json.loads(await tools["progression_delete"](name="verse"))
        assert data["status"] == "success"
        data = json.loads(await tools["progression_delete"](name="verse"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_edit_missing_progression(self, tools: dict) -> None:
        """Edits on unknown names report ProgressionNotFound."""
        data = json.loads(await tools["progression_add_slot"](name="nope"))
        assert data["status"] == "error"
        assert data["error_type"] == "ProgressionNotFound"


class TestSuggestionTools:
    """Tests for suggestion tools."""

    @pytest.mark.asyncio
    async def test_suggest(
        self,
        manager: ProgressionManager,
        tools: dict,
        recording_generator: RecordingGenerator,
        twelve_chords: list[str],
    ) -> None:
        """Suggestions are returned for a valid slot."""
        suggestion_tools = register_suggestion_tools(
            MockMCPServer("test"), manager, SuggestionPipeline(recording_generator)
        )
        await build(tools, "verse", ["Am", "Dm", None])

        data = json.loads(
            await suggestion_tools["progression_suggest_chords"](name="verse", position=2)
        )
        assert data["status"] == "success"
        assert data["suggestions"] == twelve_chords
        assert data["progression"] == {"key": "A minor", "chords": ["Am", "Dm", None]}

    @pytest.mark.asyncio
    async def test_suggest_invalid_position(
        self, manager: ProgressionManager, tools: dict, recording_generator: RecordingGenerator
    ) -> None:
        """Out-of-range positions are reported without calling the generator."""
        suggestion_tools = register_suggestion_tools(
            MockMCPServer("test"), manager, SuggestionPipeline(recording_generator)
        )
        await build(tools, "verse", ["Am"])

        data = json.loads(
            await suggestion_tools["progression_suggest_chords"](name="verse", position=1)
        )
        assert data["error_type"] == "InvalidPosition"
        assert recording_generator.prompts == []

    @pytest.mark.asyncio
    async def test_suggest_invalid_response(self, manager: ProgressionManager, tools: dict) -> None:
        """Validation failures carry the reason and offending value."""
        chords = ["C"] * 11 + ["C13#11b9"]
        generator = RecordingGenerator(json.dumps({"chordSuggestions": chords}))
        suggestion_tools = register_suggestion_tools(
            MockMCPServer("test"), manager, SuggestionPipeline(generator)
        )
        await build(tools, "verse", [None])

        data = json.loads(
            await suggestion_tools["progression_suggest_chords"](name="verse", position=0)
        )
        assert data["error_type"] == "InvalidResponse"
        assert data["message"] == "invalid chord symbol: C13#11b9"
        assert data["value"] == "C13#11b9"

    @pytest.mark.asyncio
    async def test_suggest_generator_failure(
        self, manager: ProgressionManager, tools: dict, failing_generator: FunctionTextGenerator
    ) -> None:
        """Generator failures become error results."""
        suggestion_tools = register_suggestion_tools(
            MockMCPServer("test"), manager, SuggestionPipeline(failing_generator)
        )
        await build(tools, "verse", [None])

        data = json.loads(
            await suggestion_tools["progression_suggest_chords"](name="verse", position=0)
        )
        assert data["status"] == "error"
        assert data["error_type"] == "ExternalGenerationError"

    @pytest.mark.asyncio
    async def test_suggest_timeout(self, manager: ProgressionManager, tools: dict) -> None:
        """Slow generators are cut off by the tool timeout."""

        async def slow(prompt: str) -> str:
            await asyncio.sleep(5)
            return ""

        suggestion_tools = register_suggestion_tools(
            MockMCPServer("test"),
            manager,
            SuggestionPipeline(FunctionTextGenerator(slow)),
            timeout=0.01,
        )
        await build(tools, "verse", [None])

        data = json.loads(
            await suggestion_tools["progression_suggest_chords"](name="verse", position=0)
        )
        assert data["status"] == "error"
        assert "timed out" in data["message"]

    @pytest.mark.asyncio
    async def test_generator_timeout_not_reported_as_deadline(
        self, manager: ProgressionManager, tools: dict
    ) -> None:
        """A TimeoutError raised by the generator is not our deadline expiring."""

        class SocketTimeoutGenerator:
            async def generate(self, prompt: str) -> str:
                raise TimeoutError("socket read deadline hit")

        suggestion_tools = register_suggestion_tools(
            MockMCPServer("test"),
            manager,
            SuggestionPipeline(SocketTimeoutGenerator()),
            timeout=30,
        )
        await build(tools, "verse", [None])

        data = json.loads(
            await suggestion_tools["progression_suggest_chords"](name="verse", position=0)
        )
        assert data["status"] == "error"
        assert data["error_type"] == "TimeoutError"
        assert data["message"] == "socket read deadline hit"

    @pytest.mark.asyncio
    async def test_suggest_missing_progression(
        self, manager: ProgressionManager, recording_generator: RecordingGenerator
    ) -> None:
        """Unknown names are errors."""
        suggestion_tools = register_suggestion_tools(
            MockMCPServer("test"), manager, SuggestionPipeline(recording_generator)
        )
        data = json.loads(
            await suggestion_tools["progression_suggest_chords"](name="nope", position=0)
        )
        assert data["error_type"] == "ProgressionNotFound"
