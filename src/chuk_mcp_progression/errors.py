"""Custom exceptions for the progression system."""

from __future__ import annotations

from chuk_mcp_progression.constants import ErrorMessages


class ProgressionError(Exception):
    """Base exception for all progression errors."""

    pass


class InvalidPosition(ProgressionError, ValueError):
    """A slot position outside ``[0, length)`` for the progression at call time."""

    def __init__(self, position: int, length: int):
        self.position = position
        self.length = length
        if length == 0:
            message = ErrorMessages.EMPTY_PROGRESSION.format(position=position)
        else:
            message = ErrorMessages.INVALID_POSITION.format(position=position, last=length - 1)
        super().__init__(message)

    @property
    def valid_range(self) -> range:
        """Positions that were valid when the error was raised."""
        return range(self.length)


class InvalidResponse(ProgressionError, ValueError):
    """
    The generator's reply failed validation.

    ``reason`` names the failed check; ``value`` holds the offending
    element when a single chord symbol was at fault.
    """

    def __init__(self, reason: str, value: object | None = None):
        self.reason = reason
        self.value = value
        super().__init__(reason)


class ExternalGenerationError(ProgressionError):
    """The text generator failed (network, auth, quota or any downstream fault)."""

    pass


class ProgressionNotFound(ProgressionError, ValueError):
    """No progression is registered under the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(ErrorMessages.PROGRESSION_NOT_FOUND.format(name=name))


class ConfigurationError(ProgressionError):
    """The configuration file could not be read."""

    pass
