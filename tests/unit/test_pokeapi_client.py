import pytest
import httpx
from pokedex.clients.pokeapi_client import PokeAPIClient
from pokedex.config import PokeApiSettings
from pokedex.errors import (
    MalformedUpstreamData,
    MissingLocalizedText,
    NotFound,
    UpstreamUnavailable,
)
from pokedex.models import SpeciesRecord


MOCK_POKEAPI_SUCCESS = {
    "name": "mewtwo",
    "is_legendary": True,
    "habitat": {"name": "rare"},
    "flavor_text_entries": [
        {"flavor_text": "Ceci est français.", "language": {"name": "fr"}},
        {"flavor_text": "It was created by\na scientist after years of horrific\fgene splicing.", "language": {"name": "en"}}, # <-- We must extract this one
        {"flavor_text": "Esto es español.", "language": {"name": "es"}}
    ]
}

MOCK_POKEAPI_GERMAN_ONLY = {
    "name": "mewtwo",
    "is_legendary": True,
    "habitat": {"name": "rare"},
    "flavor_text_entries": [
        {"flavor_text": "Es wurde von einem Wissenschaftler erschaffen.", "language": {"name": "de"}}
    ]
}

SPECIES_URL = "https://pokeapi.co/api/v2/pokemon-species"


@pytest.fixture
def poke_client():
    """Provides a PokeAPIClient pointed at the default PokeAPI base URL."""
    return PokeAPIClient(PokeApiSettings())

@pytest.mark.asyncio
async def test_successful_fetch_and_data_extraction(httpx_mock, poke_client):
    """Verifies the client successfully extracts the English description and required fields."""
    # ARRANGE: Mock the external API call
    httpx_mock.add_response(
        url=f"{SPECIES_URL}/mewtwo",
        method="GET",
        json=MOCK_POKEAPI_SUCCESS,
        status_code=200
    )

    # ACT
    result = await poke_client.fetch("mewtwo")

    # ASSERT: Check if the result matches our clean internal model
    assert isinstance(result, SpeciesRecord)
    assert result.name == "mewtwo"
    # CRUCIAL: Check that the correct English description was extracted and cleaned
    assert result.description == "It was created by a scientist after years of horrific gene splicing."
    assert result.habitat == "rare"
    assert result.is_legendary is True

@pytest.mark.asyncio
async def test_name_is_url_escaped(httpx_mock, poke_client):
    httpx_mock.add_response(
        url=f"{SPECIES_URL}/mr.%20mime",
        json={**MOCK_POKEAPI_SUCCESS, "name": "mr. mime"},
    )

    result = await poke_client.fetch("mr. mime")

    assert result.name == "mr. mime"

@pytest.mark.asyncio
async def test_pokemon_not_found_raises_not_found(httpx_mock, poke_client):
    """Test that a 404 from PokeAPI is mapped to NotFound carrying the requested name."""
    # ARRANGE: Mock the external API to return a 404 Not Found
    httpx_mock.add_response(
        url=f"{SPECIES_URL}/nonexistent",
        status_code=404,
        text="Not Found",
    )

    # ACT & ASSERT
    with pytest.raises(NotFound) as excinfo:
        await poke_client.fetch("nonexistent")

    assert excinfo.value.name == "nonexistent"

@pytest.mark.parametrize("status_code", [400, 429, 500, 503])
@pytest.mark.asyncio
async def test_pokeapi_other_errors_raise_upstream_unavailable(httpx_mock, poke_client, status_code):
    """Any non-2xx other than 404 is reported as UpstreamUnavailable."""
    httpx_mock.add_response(
        url=f"{SPECIES_URL}/internalerror",
        status_code=status_code
    )

    with pytest.raises(UpstreamUnavailable) as excinfo:
        await poke_client.fetch("internalerror")

    assert str(status_code) in excinfo.value.detail

@pytest.mark.asyncio
async def test_timeout_raises_upstream_unavailable(httpx_mock, poke_client):
    httpx_mock.add_exception(
        httpx.ReadTimeout("Read timed out."),
        url=f"{SPECIES_URL}/ditto"
    )

    with pytest.raises(UpstreamUnavailable):
        await poke_client.fetch("ditto")

@pytest.mark.asyncio
async def test_connection_error_raises_upstream_unavailable(httpx_mock, poke_client):
    httpx_mock.add_exception(
        httpx.ConnectError("Connection refused."),
        url=f"{SPECIES_URL}/ditto"
    )

    with pytest.raises(UpstreamUnavailable) as excinfo:
        await poke_client.fetch("ditto")

    assert "network error" in excinfo.value.detail.lower()

@pytest.mark.asyncio
async def test_missing_fields_raise_malformed_upstream_data(httpx_mock, poke_client):
    httpx_mock.add_response(
        url=f"{SPECIES_URL}/ditto",
        json={"name": "ditto"},
    )

    with pytest.raises(MalformedUpstreamData):
        await poke_client.fetch("ditto")

@pytest.mark.asyncio
async def test_non_json_body_raises_malformed_upstream_data(httpx_mock, poke_client):
    httpx_mock.add_response(
        url=f"{SPECIES_URL}/ditto",
        text="<html>definitely not json</html>",
    )

    with pytest.raises(MalformedUpstreamData):
        await poke_client.fetch("ditto")

@pytest.mark.asyncio
async def test_missing_english_text_is_propagated_unchanged(httpx_mock, poke_client):
    httpx_mock.add_response(
        url=f"{SPECIES_URL}/mewtwo",
        json=MOCK_POKEAPI_GERMAN_ONLY,
    )

    with pytest.raises(MissingLocalizedText) as excinfo:
        await poke_client.fetch("mewtwo")

    assert excinfo.value.seen_languages == ["de"]

@pytest.mark.asyncio
async def test_timeout_comes_from_settings():
    client = PokeAPIClient(PokeApiSettings(base_url="http://localhost:1234/", timeout="100ms"))

    assert client.client.timeout.read == 0.1
    assert client.settings.base_url == "http://localhost:1234"
    await client.aclose()
