"""Hosted chat completion client (Groq)."""

from typing import Optional

from groq import Groq
from loguru import logger

from hydrowatch.utils.config import LLMConfig, settings


class ChatCompletionClient:
    """Forwards a message list to the completion API with fixed sampling."""

    def __init__(self, api_key: str, config: Optional[LLMConfig] = None, client=None):
        self.config = config or settings.llm
        self.client = client or Groq(api_key=api_key, timeout=self.config.timeout_seconds)

    def complete(self, messages: list[dict]) -> str:
        """Return the first choice's text; raise if it is empty."""
        response = self.client.chat.completions.create(
            model=self.config.model,
            messages=messages,
            temperature=self.config.temperature,
            max_tokens=self.config.max_tokens,
            top_p=self.config.top_p,
        )
        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise ValueError("No content in AI response")
        logger.debug(f"Completion: {len(content)} chars from {self.config.model}")
        return content


def chat_client_from_settings() -> Optional[ChatCompletionClient]:
    """Client for the configured key, or None when no key is set."""
    if not settings.llm.api_key:
        return None
    return ChatCompletionClient(api_key=settings.llm.api_key)
