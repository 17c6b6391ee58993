"""OpenAI text generation service for clinical notes."""

from typing import Optional
from openai import AsyncOpenAI

from app.config import settings
from app.core.logging import logger


class GenerationError(Exception):
    """Raised when the generator returns no usable text."""


class GenerationService:
    """
    Single-shot text generation with OpenAI chat completions.

    The client is created on first use so a missing API key can be
    reported before any network call is attempted.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.OPENAI_API_KEY
        self.model = model or settings.OPENAI_MODEL
        self.temperature = settings.OPENAI_TEMPERATURE if temperature is None else temperature
        self.max_tokens = max_tokens or settings.OPENAI_MAX_TOKENS
        self._client: Optional[AsyncOpenAI] = None

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    @property
    def client(self) -> AsyncOpenAI:
        if self._client is None:
            # No retries: each generation is a single attempt
            self._client = AsyncOpenAI(api_key=self.api_key, max_retries=0)
        return self._client

    async def generate(self, prompt: str) -> str:
        """
        Generate text for a prompt and return it unmodified.

        Raises:
            GenerationError: If the response carries no text.
            openai.OpenAIError: On network, quota or API failures.
        """
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            max_tokens=self.max_tokens,
            temperature=self.temperature,
        )

        if not response.choices or response.choices[0].message.content is None:
            raise GenerationError("Generator response contained no text")

        text = response.choices[0].message.content
        logger.debug(f"Generated {len(text)} characters with {self.model}")
        return text
