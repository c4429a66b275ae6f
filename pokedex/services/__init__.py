from .pokemon_service import (
    PokemonLookupFailed,
    PokemonNotFound,
    PokemonService,
    select_tone,
)

__all__ = [
    'PokemonService',
    'PokemonNotFound',
    'PokemonLookupFailed',
    'select_tone',
]
