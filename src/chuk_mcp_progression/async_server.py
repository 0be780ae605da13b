#!/usr/bin/env python3
"""
Async Progression MCP Server using chuk-mcp-server

This server provides MCP tools for building chord progressions slot by
slot and asking a language model which chords fit a given slot.

The server provides tools for:
- Creating and managing progressions (key, slots, chords)
- Suggesting chords for a slot, validated before they are returned
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_progression.config import load_config
from chuk_mcp_progression.constants import ENV_CONFIG_PATH
from chuk_mcp_progression.progression import ProgressionManager
from chuk_mcp_progression.suggestions import OpenAITextGenerator, SuggestionPipeline
from chuk_mcp_progression.tools import register_progression_tools, register_suggestion_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-progression")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
CONFIG_PATH = Path(os.environ.get(ENV_CONFIG_PATH, BASE_PATH / "config.yaml"))

# Create managers
config = load_config(CONFIG_PATH)
progression_manager = ProgressionManager()
pipeline = SuggestionPipeline(OpenAITextGenerator(config))

# Register all tools
progression_tools = register_progression_tools(mcp, progression_manager)
suggestion_tools = register_suggestion_tools(
    mcp, progression_manager, pipeline, timeout=config.timeout
)

# Export tool functions for direct access
progression_create = progression_tools["progression_create"]
progression_get = progression_tools["progression_get"]
progression_list = progression_tools["progression_list"]
progression_delete = progression_tools["progression_delete"]
progression_duplicate = progression_tools["progression_duplicate"]
progression_set_key = progression_tools["progression_set_key"]
progression_add_slot = progression_tools["progression_add_slot"]
progression_add_chord = progression_tools["progression_add_chord"]
progression_remove_slot = progression_tools["progression_remove_slot"]
progression_remove_chord = progression_tools["progression_remove_chord"]

progression_suggest_chords = suggestion_tools["progression_suggest_chords"]

logger.info("CHUK Progression MCP Server initialized")
logger.info(f"  Config path: {CONFIG_PATH}")
logger.info(f"  Model: {config.model}")
if config.api_key is None:
    logger.warning(f"  No API key configured; set it in {CONFIG_PATH} or the environment")
