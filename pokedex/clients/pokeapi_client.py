import logging
from urllib.parse import quote

import httpx

from pokedex.errors import MalformedUpstreamData, NotFound, UpstreamUnavailable
from pokedex.config import PokeApiSettings
from pokedex.models import SpeciesRecord
from pokedex.normalizer import normalize_species

logger = logging.getLogger(__name__)


class PokeAPIClient:
    SPECIES_PATH = "/api/v2/pokemon-species/{name}"

    def __init__(self, settings: PokeApiSettings):
        self.settings = settings
        self.client = httpx.AsyncClient(
            base_url=settings.base_url,
            timeout=settings.timeout,
        )

    async def _fetch_species_data(self, pokemon_name: str):
        """Internal method to fetch the raw species payload with error mapping."""
        url = self.SPECIES_PATH.format(name=quote(pokemon_name, safe=""))

        try:
            response = await self.client.get(url)
            response.raise_for_status()  # Raises for 4xx/5xx status codes
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                # The only upstream failure the caller sees distinctly
                raise NotFound(pokemon_name) from e
            logger.error(f"PokeAPI failed with status {e.response.status_code} for '{pokemon_name}'")
            raise UpstreamUnavailable(f"PokeAPI failed with status {e.response.status_code}") from e
        except httpx.RequestError as e:
            # Handle network failures/timeouts
            logger.error(f"PokeAPI network error for '{pokemon_name}': {e!r}")
            raise UpstreamUnavailable(f"PokeAPI network error: {e!r}") from e

        try:
            return response.json()
        except ValueError as e:
            raise MalformedUpstreamData("PokeAPI returned a body that is not JSON.") from e

    async def fetch(self, name: str) -> SpeciesRecord:
        """Fetches a species by name and normalizes it into a SpeciesRecord."""
        data = await self._fetch_species_data(name)
        return normalize_species(data)

    async def aclose(self):
        """Close the underlying connection pool (call on app shutdown)."""
        await self.client.aclose()
