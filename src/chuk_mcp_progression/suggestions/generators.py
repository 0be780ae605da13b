"""
Text generators - the external model behind suggestions.

A generator is anything with ``async generate(prompt) -> str``. The
pipeline never looks past that one method, so backends can be swapped
without touching prompt construction or validation.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from chuk_mcp_progression.errors import ExternalGenerationError, ProgressionError

if TYPE_CHECKING:
    from openai import AsyncOpenAI

    from chuk_mcp_progression.config import GeneratorConfig

logger = logging.getLogger(__name__)


@runtime_checkable
class TextGenerator(Protocol):
    """Prompt in, response text out. May raise."""

    async def generate(self, prompt: str) -> str: ...


class FunctionTextGenerator:
    """
    Adapt a plain callable to the TextGenerator protocol.

    The callable may be sync or async. Its failures are raised as
    ExternalGenerationError chained to the original exception; progression
    errors it raises pass through as they are.
    """

    def __init__(self, func: Callable[[str], str] | Callable[[str], Awaitable[str]]):
        self.func = func

    async def generate(self, prompt: str) -> str:
        """
        Call the wrapped function with the prompt.

        Raises:
            ExternalGenerationError: The function raised
        """
        try:
            result = self.func(prompt)
            if inspect.isawaitable(result):
                result = await result
        except ProgressionError:
            raise
        except Exception as e:
            raise ExternalGenerationError(f"{type(e).__name__}: {e}") from e
        return result  # type: ignore[return-value]

    def __repr__(self) -> str:
        name = getattr(self.func, "__name__", repr(self.func))
        return f"FunctionTextGenerator({name})"


class OpenAITextGenerator:
    """
    Generator backed by the OpenAI chat completions API.

    Works with any OpenAI-compatible endpoint via ``base_url``. The client
    is created on first use so a server can start without credentials.
    """

    SYSTEM_PROMPT = "Return JSON only."

    def __init__(self, config: GeneratorConfig, client: AsyncOpenAI | None = None):
        """
        Initialize the generator.

        Args:
            config: Model, credentials and sampling settings
            client: Optional pre-built client (mainly for tests)
        """
        self.config = config
        self._client = client

    @property
    def client(self) -> AsyncOpenAI:
        if self._client is None:
            from openai import AsyncOpenAI

            self._client = AsyncOpenAI(
                api_key=self.config.api_key,
                base_url=self.config.base_url,
            )
        return self._client

    async def generate(self, prompt: str) -> str:
        """
        Send the prompt and return the completion text.

        Raises:
            ExternalGenerationError: The API call failed or returned no text
        """
        from openai import OpenAIError

        logger.debug(f"Requesting completion from {self.config.model}")
        try:
            response = await self.client.chat.completions.create(
                model=self.config.model,
                temperature=self.config.temperature,
                messages=[
                    {"role": "system", "content": self.SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
            )
        except OpenAIError as e:
            raise ExternalGenerationError(f"{type(e).__name__}: {e}") from e

        if not response.choices or not response.choices[0].message.content:
            raise ExternalGenerationError(f"Empty completion from {self.config.model}")
        return response.choices[0].message.content

    def __repr__(self) -> str:
        return f"OpenAITextGenerator({self.config.model!r})"
