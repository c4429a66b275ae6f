import logging
from enum import Enum

import httpx
from pydantic import ValidationError

from pokedex.errors import InvalidResponseShape, RateLimited, UpstreamUnavailable
from pokedex.config import TranslationSettings
from pokedex.models import TranslationEnvelope

logger = logging.getLogger(__name__)


class Tone(str, Enum):
    """Translation styles offered by FunTranslations, one endpoint each."""
    YODA = "yoda"
    SHAKESPEARE = "shakespeare"

    @property
    def path(self) -> str:
        return f"/translate/{self.value}"


class TranslationClient:
    def __init__(self, settings: TranslationSettings):
        self.settings = settings
        self.client = httpx.AsyncClient(
            base_url=settings.base_url,
            timeout=settings.timeout,
        )

    async def translate(self, text: str, tone: Tone) -> str:
        """Translates text in the given tone and returns only the translated string."""
        try:
            response = await self.client.post(url=tone.path, json={"text": text})
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 429:
                logger.warning(f"Translation API rate limit exceeded for tone '{tone.value}'")
                raise RateLimited("Translation API rate limit exceeded.") from e
            detail = f"Translation API failed with status {e.response.status_code}."
            logger.error(f"Translation API error: {detail}")
            raise UpstreamUnavailable(detail) from e
        except httpx.RequestError as e:
            logger.error(f"Translation API network error: {e!r}")
            raise UpstreamUnavailable(f"Translation API network error: {e!r}") from e

        try:
            envelope = TranslationEnvelope.model_validate_json(response.content)
        except ValidationError as e:
            logger.error("Translation API response parsing error.")
            raise InvalidResponseShape("Translation API returned an unexpected response format.") from e

        return envelope.contents.translated

    async def aclose(self):
        """Close the underlying connection pool (call on app shutdown)."""
        await self.client.aclose()
