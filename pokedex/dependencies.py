from fastapi import Depends, Request

from pokedex.clients import PokeAPIClient
from pokedex.clients import TranslationClient
from pokedex.services import PokemonService


# Clients live on app.state; create_app's lifespan opens and closes them
def get_poke_client(request: Request) -> PokeAPIClient:
    return request.app.state.poke_client


def get_translation_client(request: Request) -> TranslationClient:
    return request.app.state.translation_client


def get_pokemon_service(
    poke_client: PokeAPIClient = Depends(get_poke_client),
    translation_client: TranslationClient = Depends(get_translation_client),
) -> PokemonService:
    return PokemonService(poke_client=poke_client, translation_client=translation_client)
