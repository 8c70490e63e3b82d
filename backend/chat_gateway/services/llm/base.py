"""Abstract LLM provider interface. All providers must implement this."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class Message:
    role: str  # "system" | "user" | "assistant"
    content: str


@dataclass
class LLMResponse:
    content: str


class BaseLLMProvider(ABC):
    @abstractmethod
    async def chat(self, messages: list[Message]) -> LLMResponse:
        """Send the full prompt and get a single completion back."""
        ...
