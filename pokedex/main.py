import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from pokedex.clients import PokeAPIClient, TranslationClient
from pokedex.config import Settings
from pokedex.dependencies import get_pokemon_service
from pokedex.models import ErrorMessage, RouteHelp, SpeciesRecord
from pokedex.services import PokemonLookupFailed, PokemonNotFound, PokemonService

logger = logging.getLogger(__name__)

ROUTE_SHAPES = ["/pokemon/<name>", "/pokemon/translated/<name>"]
ROUTE_EXAMPLES = ["/pokemon/mewtwo", "/pokemon/translated/mewtwo"]


async def pokemon_not_found_handler(request: Request, exc: PokemonNotFound):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=ErrorMessage(message=f"Unable to find '{exc.name}'").model_dump(),
    )


async def lookup_failed_handler(request: Request, exc: PokemonLookupFailed):
    # Upstream details were logged by the service; never leak them to the caller
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorMessage(message="Internal server error").model_dump(),
    )


async def unmatched_route_handler(request: Request, exc: StarletteHTTPException):
    """Answers unknown paths with the list of valid routes; other HTTP errors keep the default."""
    if exc.status_code != status.HTTP_404_NOT_FOUND:
        return await http_exception_handler(request, exc)
    help_payload = RouteHelp(
        message=f"No route matches '{request.url.path}'",
        routes=ROUTE_SHAPES,
        examples=ROUTE_EXAMPLES,
    )
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=help_payload.model_dump())


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.poke_client = PokeAPIClient(settings.poke_api)
        app.state.translation_client = TranslationClient(settings.translation_api)
        logger.info(
            f"Using PokeAPI at {settings.poke_api.base_url} "
            f"and translations at {settings.translation_api.base_url}"
        )
        try:
            yield
        finally:
            await app.state.poke_client.aclose()
            await app.state.translation_client.aclose()

    app = FastAPI(
        title="Pokedex Gateway",
        description="Species lookups from PokeAPI with optional fun translations.",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_exception_handler(PokemonNotFound, pokemon_not_found_handler)
    app.add_exception_handler(PokemonLookupFailed, lookup_failed_handler)
    app.add_exception_handler(StarletteHTTPException, unmatched_route_handler)

    # Endpoint 1: Basic Pokemon Info
    @app.get(
        "/pokemon/{name}",
        response_model=SpeciesRecord,
        responses={404: {"model": ErrorMessage}, 500: {"model": ErrorMessage}},
        summary="Returns basic Pokemon information",
    )
    async def get_pokemon_info(
        name: str,
        service: PokemonService = Depends(get_pokemon_service),
    ):
        """Fetches basic information (name, description, habitat, legendary status) for a given Pokemon name."""
        return await service.get_basic_info(name)

    # Endpoint 2: Translated Pokemon Info
    @app.get(
        "/pokemon/translated/{name}",
        response_model=SpeciesRecord,
        responses={404: {"model": ErrorMessage}, 500: {"model": ErrorMessage}},
        summary="Returns Pokemon information with fun translation based on legendary/habitat status",
    )
    async def get_translated_pokemon_info(
        name: str,
        service: PokemonService = Depends(get_pokemon_service),
    ):
        """Applies the translation rule (Yoda for legendary/cave, Shakespeare otherwise).

        A failed translation falls back to the original description.
        """
        return await service.get_translated_info(name)

    return app
