"""OpenAI chat-completion provider."""

import logging

from openai import AsyncOpenAI, OpenAIError

from chat_gateway.core.errors import UpstreamError
from chat_gateway.services.llm.base import BaseLLMProvider, LLMResponse, Message

logger = logging.getLogger(__name__)


class OpenAIProvider(BaseLLMProvider):
    def __init__(self, api_key: str, model: str = "gpt-4o", temperature: float = 0.7, max_tokens: int = 1000):
        self.client = AsyncOpenAI(api_key=api_key)
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    async def chat(self, messages: list[Message]) -> LLMResponse:
        logger.debug(f"Requesting completion from {self.model} with {len(messages)} messages")
        try:
            completion = await self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": m.role, "content": m.content} for m in messages],  # type: ignore[misc]
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except OpenAIError as e:
            raise UpstreamError(str(e)) from e

        # An empty choice list or a null content both count as "no answer"
        if not completion.choices:
            return LLMResponse(content="")
        return LLMResponse(content=completion.choices[0].message.content or "")
