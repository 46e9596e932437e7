import logging
from app.clients.errors import ClientError
from app.clients.species_client import SpeciesClient
from app.clients.translation_client import TranslationClient
from app.models import (
    Species,
    SpeciesResponse,
    TranslatedSpeciesResponse,
    TranslationVariant,
)

logger = logging.getLogger(__name__)

DESCRIPTION_LOCALE = "en"
ALTERNATE_HABITAT = "cave"


def select_description(species: Species) -> str | None:
    """Returns the text of the first English entry, or None if there is none."""
    return next(
        (
            entry.text
            for entry in species.description_entries
            if entry.locale_code == DESCRIPTION_LOCALE
        ),
        None,
    )


def normalize_description(text: str) -> str:
    # Line breaks and form feeds in the source text become single spaces
    return text.replace("\n", " ").replace("\f", " ")


def select_variant(species: Species) -> TranslationVariant:
    if species.habitat_name == ALTERNATE_HABITAT or species.is_legendary:
        return TranslationVariant.ALTERNATE
    return TranslationVariant.DEFAULT


class SpeciesService:
    # Service requires both clients via Dependency Injection
    def __init__(self, species_client: SpeciesClient, translation_client: TranslationClient):
        self._species_client = species_client
        self._translation_client = translation_client

    async def _fetch_with_description(self, name: str) -> tuple[Species, str | None]:
        # Client errors (NotFoundError, UpstreamError, ...) propagate to the HTTP layer
        species = await self._species_client.fetch(name)

        description = select_description(species)
        if description is not None:
            description = normalize_description(description)
        return species, description

    async def get_basic_info(self, name: str) -> SpeciesResponse:
        """
        Endpoint 1: Fetches the species and returns its untranslated description.
        """
        species, description = await self._fetch_with_description(name)
        return SpeciesResponse(name=species.name, description=description)

    async def get_translated_info(self, name: str) -> TranslatedSpeciesResponse:
        """
        Endpoint 2: Fetches the species and applies the translation rule.
        Rule: Legendary OR Habitat is 'cave' -> alternate (Yoda). Otherwise -> default (Shakespeare).
        Any translation failure falls back to the untranslated description.
        """
        species, description = await self._fetch_with_description(name)

        if description is not None:
            description = await self._translate_or_fallback(species, description)

        return TranslatedSpeciesResponse(
            name=species.name,
            description=description,
            is_legendary=species.is_legendary,
            habitat=species.habitat_name,
        )

    async def _translate_or_fallback(self, species: Species, description: str) -> str:
        variant = select_variant(species)
        try:
            return await self._translation_client.translate(description, variant)
        except ClientError as e:
            logger.warning(
                f"Translation ({variant.value}) failed for '{species.name}' with "
                f"{type(e).__name__}: {e.detail} Using the original description."
            )
            return description
