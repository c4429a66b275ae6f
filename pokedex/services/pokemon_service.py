import logging

from pokedex.clients.pokeapi_client import PokeAPIClient
from pokedex.clients.translation_client import Tone, TranslationClient
from pokedex.errors import APIClientError, NotFound
from pokedex.models import SpeciesRecord

logger = logging.getLogger(__name__)

CAVE_HABITAT = "cave"


class PokemonServiceError(Exception):
    pass


class PokemonNotFound(PokemonServiceError):
    def __init__(self, name: str):
        super().__init__(f"Unable to find '{name}'")
        self.name = name


class PokemonLookupFailed(PokemonServiceError):
    """Species lookup failed for a reason other than 'not found'. Details are only logged."""


def select_tone(record: SpeciesRecord) -> Tone:
    """Rule: Legendary OR Habitat is 'cave' -> Yoda. Otherwise -> Shakespeare."""
    if record.is_legendary or record.habitat == CAVE_HABITAT:
        return Tone.YODA
    return Tone.SHAKESPEARE


class PokemonService:
    # Service requires both clients via Dependency Injection
    def __init__(self, poke_client: PokeAPIClient, translation_client: TranslationClient):
        self._poke_client = poke_client
        self._translation_client = translation_client

    async def resolve(self, name: str, translate: bool) -> SpeciesRecord:
        """
        Looks up a species and, when asked, swaps its description for a translation.

        Raises PokemonNotFound or PokemonLookupFailed. Translation problems never
        raise: the untranslated record is returned instead.
        """
        try:
            record = await self._poke_client.fetch(name)
        except NotFound as e:
            raise PokemonNotFound(name) from e
        except APIClientError as e:
            logger.error(f"Lookup of '{name}' failed: {type(e).__name__}: {e.detail}")
            raise PokemonLookupFailed() from e

        if not translate:
            return record

        tone = select_tone(record)
        try:
            translated = await self._translation_client.translate(record.description, tone)
        except APIClientError as e:
            # Fallback: translation is best effort
            logger.warning(
                f"Translating '{record.name}' as {tone.value} failed, keeping original text: "
                f"{type(e).__name__}: {e.detail}"
            )
            return record

        return record.model_copy(update={"description": translated})

    async def get_basic_info(self, name: str) -> SpeciesRecord:
        """Endpoint 1: the species record exactly as normalized."""
        return await self.resolve(name, translate=False)

    async def get_translated_info(self, name: str) -> SpeciesRecord:
        """Endpoint 2: the species record with the fun translation applied."""
        return await self.resolve(name, translate=True)
