"""Client modules for external API communication."""
from .errors import (
    ClientError,
    DeserializationError,
    NotFoundError,
    TooManyRequestsError,
    UpstreamError,
)
from .species_client import SpeciesClient
from .translation_client import TranslationClient

__all__ = [
    'SpeciesClient',
    'TranslationClient',
    'ClientError',
    'NotFoundError',
    'DeserializationError',
    'TooManyRequestsError',
    'UpstreamError',
]
