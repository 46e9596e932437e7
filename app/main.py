import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import APIRouter, Depends, FastAPI, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.clients import ClientError, NotFoundError, SpeciesClient, TranslationClient
from app.config import Settings
from app.dependencies import get_species_service
from app.models import ErrorResponse, SpeciesResponse, TranslatedSpeciesResponse
from app.services.species_service import SpeciesService

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "not found"
UPSTREAM_FAILURE_MESSAGE = "failed to get species"

router = APIRouter()

# Endpoint 1: Basic species info
@router.get(
    "/species/{name}",
    response_model=SpeciesResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Returns the species name and its English description",
)
async def get_species_info(
    name: str,
    service: SpeciesService = Depends(get_species_service),
):
    """Fetches the name and untranslated English description for a given species name."""
    # Client errors are mapped to 404/500 by the exception handlers registered in create_app()
    return await service.get_basic_info(name)


# Endpoint 2: Translated species info
@router.get(
    "/species/{name}/translated",
    response_model=TranslatedSpeciesResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Returns species information with fun translation based on legendary/habitat status",
)
async def get_translated_species_info(
    name: str,
    service: SpeciesService = Depends(get_species_service),
):
    """Applies the translation rule (Yoda for legendary/cave, Shakespeare otherwise).

    Translation failures never change the status code: the untranslated
    description is returned instead.
    """
    return await service.get_translated_info(name)


@router.get("/health")
async def health_check():
    """Health check endpoint for container probes."""
    return {"status": "healthy"}


async def not_found_handler(request: Request, exc: NotFoundError):
    logger.info(f"{request.method} {request.url.path}: {exc.detail}")
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": NOT_FOUND_MESSAGE},
    )


async def client_error_handler(request: Request, exc: ClientError):
    """Any other upstream failure surfaces as a generic internal error."""
    logger.error(
        f"{request.method} {request.url.path} failed with {type(exc).__name__}: {exc.detail}"
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": UPSTREAM_FAILURE_MESSAGE},
    )


def create_app(settings: Settings) -> FastAPI:
    """Builds the application and its upstream clients from explicit settings."""

    species_client = SpeciesClient(
        base_url=settings.pokemon_api_base_url,
        timeout=settings.request_timeout,
    )
    translation_client = TranslationClient(
        base_url=settings.translation_api_base_url,
        api_token=settings.api_token,
        timeout=settings.request_timeout,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting species translator on port {settings.port}")
        yield
        logger.info("Shutting down species translator")
        await species_client.close()
        await translation_client.close()

    app = FastAPI(
        title="Species Translator API",
        description="Species descriptions from PokeAPI, optionally rewritten by FunTranslations.",
        lifespan=lifespan,
    )
    app.state.species_client = species_client
    app.state.translation_client = translation_client

    app.include_router(router)
    # Handlers are matched on the most specific exception class first
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(ClientError, client_error_handler)
    return app


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )


def main() -> None:
    """Console entrypoint: read configuration once, then serve."""
    try:
        settings = Settings()
    except ValidationError as e:
        configure_logging("INFO")
        logger.critical(f"Invalid configuration, refusing to start:\n{e}")
        sys.exit(1)

    configure_logging(settings.log_level)
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
