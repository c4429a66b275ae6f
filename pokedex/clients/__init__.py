"""Client modules for external API communication."""
from pokedex.errors import (
    APIClientError,
    InvalidResponseShape,
    MalformedUpstreamData,
    MissingLocalizedText,
    NotFound,
    RateLimited,
    UpstreamUnavailable,
)
from .pokeapi_client import PokeAPIClient
from .translation_client import Tone, TranslationClient

__all__ = [
    'PokeAPIClient',
    'TranslationClient',
    'Tone',
    'APIClientError',
    'MalformedUpstreamData',
    'MissingLocalizedText',
    'NotFound',
    'UpstreamUnavailable',
    'RateLimited',
    'InvalidResponseShape',
]
