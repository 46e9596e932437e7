from app.clients import SpeciesClient
from app.clients import TranslationClient
from app.services import SpeciesService
from fastapi import Depends, Request

# Clients are built once by create_app() and live on app.state

def get_species_client(request: Request) -> SpeciesClient:
    return request.app.state.species_client

def get_translation_client(request: Request) -> TranslationClient:
    return request.app.state.translation_client

def get_species_service(
    species_client: SpeciesClient = Depends(get_species_client),
    translation_client: TranslationClient = Depends(get_translation_client),
) -> SpeciesService:
    return SpeciesService(species_client=species_client, translation_client=translation_client)
