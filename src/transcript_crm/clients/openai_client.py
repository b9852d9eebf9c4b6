"""
OpenAI client wrapper for the transcript-to-CRM pipeline.

Handles:
- Chat completions returning the raw assistant text
- Retry logic with exponential backoff
"""

import os

from openai import AsyncOpenAI
from tenacity import retry, stop_after_attempt, wait_exponential


class OpenAIClient:
    """
    Async OpenAI chat client.

    Configuration via environment variables:
    - OPENAI_API_KEY: Required API key
    - OPENAI_CHAT_MODEL: Chat model (default: gpt-4.1-mini)
    """

    def __init__(
        self,
        api_key: str | None = None,
        chat_model: str | None = None,
    ):
        """
        Initialize the OpenAI client.

        Args:
            api_key: OpenAI API key (defaults to OPENAI_API_KEY env var)
            chat_model: Model for chat completions (defaults to OPENAI_CHAT_MODEL or gpt-4.1-mini)
        """
        self.api_key = api_key or os.getenv('OPENAI_API_KEY')
        if not self.api_key:
            raise ValueError('OPENAI_API_KEY environment variable is required')

        self.chat_model = chat_model or os.getenv('OPENAI_CHAT_MODEL', 'gpt-4.1-mini')

        self._client = AsyncOpenAI(api_key=self.api_key)

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        reraise=True,
    )
    async def chat_completion(
        self,
        messages: list[dict[str, str]],
        model: str | None = None,
        temperature: float = 0.0,
        max_tokens: int | None = None,
    ) -> str:
        """
        Get a chat completion response.

        Args:
            messages: List of message dicts with 'role' and 'content'
            model: Override the default chat model
            temperature: Sampling temperature (0.0 for deterministic)
            max_tokens: Maximum tokens in response

        Returns:
            The assistant's response text
        """
        response = await self._client.chat.completions.create(
            model=model or self.chat_model,
            messages=messages,  # type: ignore
            temperature=temperature,
            max_tokens=max_tokens,
        )
        return response.choices[0].message.content or ''

    async def close(self):
        """Close the client connection."""
        await self._client.close()
