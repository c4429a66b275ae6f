import logging

from pydantic import ValidationError

from pokedex.errors import MalformedUpstreamData, MissingLocalizedText
from pokedex.models import FlavorTextEntry, PokemonSpeciesPayload, SpeciesRecord

logger = logging.getLogger(__name__)

ENGLISH = "en"


def clean_flavor_text(text: str) -> str:
    """Flattens game-text line breaks: every newline and form feed becomes one space."""
    return text.replace("\n", " ").replace("\f", " ")


def extract_description(entries: list, language: str = ENGLISH) -> str:
    """
    Returns the cleaned text of the first entry tagged with `language`.

    Entries are validated one at a time while scanning; anything after the
    match is never looked at.
    """
    seen_languages = []
    for raw_entry in entries:
        try:
            entry = FlavorTextEntry.model_validate(raw_entry)
        except ValidationError as e:
            raise MalformedUpstreamData(f"Invalid flavor text entry: {e.error_count()} error(s)") from e

        if entry.language.name == language:
            logger.debug(
                "Selected '%s' flavor text after skipping %d entries", language, len(seen_languages)
            )
            return clean_flavor_text(entry.flavor_text)
        seen_languages.append(entry.language.name)

    raise MissingLocalizedText(language, seen_languages)


def normalize_species(payload) -> SpeciesRecord:
    """Maps a raw PokeAPI species payload to the internal SpeciesRecord."""
    if not isinstance(payload, dict):
        raise MalformedUpstreamData(f"Expected a JSON object, got {type(payload).__name__}")

    try:
        species = PokemonSpeciesPayload.model_validate(payload)
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise MalformedUpstreamData(f"Invalid species payload ({fields})") from e

    return SpeciesRecord(
        name=species.name,
        description=extract_description(species.flavor_text_entries),
        habitat=species.habitat.name,
        is_legendary=species.is_legendary,
    )
