"""Shared JSON payload helpers for MCP tools."""

from __future__ import annotations

import json
import logging
from typing import Any

from chuk_mcp_progression.errors import InvalidPosition, InvalidResponse, ProgressionError
from chuk_mcp_progression.models.progression import Progression


def progression_payload(name: str, progression: Progression) -> dict[str, Any]:
    """Describe a progression for a tool result."""
    return {"name": name, **progression.to_dict(), "slots": len(progression)}


def success(**fields: Any) -> str:
    return json.dumps({"status": "success", **fields})


def error(e: Exception, logger: logging.Logger, action: str) -> str:
    """
    Build an error result.

    Domain errors are expected and logged as warnings; anything else is
    logged with its traceback.
    """
    payload: dict[str, Any] = {
        "status": "error",
        "error_type": type(e).__name__,
        "message": str(e),
    }
    if isinstance(e, InvalidPosition):
        payload["position"] = e.position
        payload["valid_range"] = [0, e.length - 1] if e.length else []
    elif isinstance(e, InvalidResponse) and e.value is not None:
        payload["value"] = e.value

    if isinstance(e, ProgressionError | ValueError):
        logger.warning(f"Failed to {action}: {e}")
    else:
        logger.exception(f"Failed to {action}")
    return json.dumps(payload)
