"""Text-generation client (OpenAI-compatible chat completions).

The pipeline receives an instance of this client instead of reaching for a
module-level singleton, so tests can pass a fake with the same `complete`
signature.
"""

from typing import Optional, Protocol

from openai import AsyncOpenAI, OpenAIError

from cv_review_ai.config import OPENAI_API_KEY, OPENAI_BASE_URL
from cv_review_ai.utils.exceptions import UpstreamCallError
from cv_review_ai.utils.logger import get_logger

logger = get_logger(__name__)


class TextGenerationClient(Protocol):
    async def complete(self, prompt: str, *, model: str, max_tokens: int, temperature: float) -> str:
        ...


class OpenAITextClient:
    """Single-turn completions over `AsyncOpenAI`; returns the reply text ("" when empty)."""

    def __init__(self, client: AsyncOpenAI):
        self._client = client

    async def complete(self, prompt: str, *, model: str, max_tokens: int, temperature: float) -> str:
        try:
            response = await self._client.chat.completions.create(
                model=model,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=max_tokens,
                temperature=temperature,
            )
        except OpenAIError as e:
            logger.error("LLM call failed (model=%s): %s", model, e)
            raise UpstreamCallError(str(e)) from e
        choice = response.choices[0] if response.choices else None
        if not choice or not choice.message or not choice.message.content:
            return ""
        return choice.message.content


def build_default_client(api_key: Optional[str] = None, base_url: Optional[str] = None) -> OpenAITextClient:
    """Build the production client from config (OPENAI_API_KEY / OPENAI_BASE_URL)."""
    api_key = api_key or OPENAI_API_KEY
    if not api_key:
        logger.error("OPENAI_API_KEY is not set; /analyze requests will fail")
    # AsyncOpenAI refuses to build without a key; with a placeholder, calls fail with 401 instead
    return OpenAITextClient(
        AsyncOpenAI(api_key=api_key or "missing", base_url=(base_url or OPENAI_BASE_URL) or None)
    )
