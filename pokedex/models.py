from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr


# --- Raw PokeAPI shapes (Upstream Contract) ---

class Language(BaseModel):
    name: StrictStr


class Habitat(BaseModel):
    name: StrictStr


class FlavorTextEntry(BaseModel):
    flavor_text: StrictStr
    language: Language


class PokemonSpeciesPayload(BaseModel):
    """Top-level fields of a /pokemon-species response.

    Flavor text entries are kept raw so the normalizer can stop at the first
    English entry without validating the rest of the list.
    """
    name: StrictStr = Field(min_length=1)
    is_legendary: StrictBool
    habitat: Habitat
    flavor_text_entries: list


# --- Raw FunTranslations shapes ---

class TranslationContents(BaseModel):
    text: str
    translated: str


class TranslationEnvelope(BaseModel):
    contents: TranslationContents


# --- Internal + public record ---

class SpeciesRecord(BaseModel):
    # Pythonic attribute names, camelCase on the wire
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(min_length=1)
    description: str
    habitat: str
    is_legendary: bool = Field(alias="isLegendary")


# --- Error payloads ---

class ErrorMessage(BaseModel):
    message: str


class RouteHelp(ErrorMessage):
    routes: list[str]
    examples: list[str]
