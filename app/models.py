from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# Models for the raw species data fetched from PokeAPI (Internal Contract)
class Language(BaseModel):
    name: str
    url: str | None = None

class Habitat(BaseModel):
    name: str
    url: str | None = None

class DescriptionEntry(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # Keep the PokeAPI key names on the wire, expose clean names in Python
    text: str = Field(alias="flavor_text")
    language: Language

    @property
    def locale_code(self) -> str:
        return self.language.name

class Species(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    name: str
    is_legendary: bool
    # PokeAPI sends null for species without a known habitat; the key itself is required
    habitat: Habitat | None
    description_entries: list[DescriptionEntry] = Field(alias="flavor_text_entries")

    @property
    def habitat_name(self) -> str | None:
        return self.habitat.name if self.habitat else None


# Models for the FunTranslations API (External Contract)
class TranslationVariant(str, Enum):
    DEFAULT = "shakespeare"
    ALTERNATE = "yoda"

    @property
    def path(self) -> str:
        return _VARIANT_PATHS[self]

_VARIANT_PATHS = {
    TranslationVariant.DEFAULT: "translate/shakespeare.json",
    TranslationVariant.ALTERNATE: "translate/yoda.json",
}

class TranslationRequest(BaseModel):
    text: str

class TranslationSuccess(BaseModel):
    total: int

class TranslationContents(BaseModel):
    translated: str
    text: str | None = None
    translation: str | None = None

class TranslationResult(BaseModel):
    success: TranslationSuccess
    contents: TranslationContents


# Model for the basic API response (Public Endpoint 1)
class SpeciesResponse(BaseModel):
    name: str
    description: str | None

# Model for the translated API response (Public Endpoint 2)
class TranslatedSpeciesResponse(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    description: str | None
    is_legendary: bool = Field(alias="isLegendary")
    habitat: str | None

class ErrorResponse(BaseModel):
    error: str
