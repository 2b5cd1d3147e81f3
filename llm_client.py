"""
Completion clients used by the analysis flow.

The flow only needs ``complete(system_prompt, user_prompt) -> str``; anything
with that coroutine can stand in for the OpenAI client (tests use AsyncMock).
"""

import logging
from typing import Any, Dict, Optional, Protocol

from openai import AsyncOpenAI, OpenAIError

import config
from errors import ProviderError

logger = logging.getLogger("nutrijournal.llm")


class CompletionClient(Protocol):
    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        ...


class OpenAIChatClient:
    """
    Chat completion client in JSON mode.

    The underlying AsyncOpenAI client is created on first use so a missing
    OPENAI_API_KEY only fails the request, not the whole app. Retries are
    disabled: one analysis is exactly one attempt.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        timeout: Optional[float] = None,
        client: Optional[AsyncOpenAI] = None,
    ):
        self.api_key = api_key or config.OPENAI_API_KEY
        self.model = model or config.OPENAI_MODEL
        self.temperature = config.OPENAI_TEMPERATURE if temperature is None else temperature
        self.timeout = config.OPENAI_TIMEOUT if timeout is None else timeout
        self._client = client

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            if not self.api_key:
                raise ProviderError("OPENAI_API_KEY not set")
            kwargs: Dict[str, Any] = {"api_key": self.api_key, "max_retries": 0}
            if self.timeout is not None:
                kwargs["timeout"] = self.timeout
            self._client = AsyncOpenAI(**kwargs)
        return self._client

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        client = self._get_client()

        try:
            resp = await client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                temperature=self.temperature,
                response_format={"type": "json_object"},
            )
        except OpenAIError as e:
            logger.error(f"OpenAI error: {e}")
            raise ProviderError(str(e)) from e

        content = (resp.choices[0].message.content or "").strip()
        if not content:
            raise ProviderError("OpenAI returned empty content")
        return content

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None
