"""Service layer composing the upstream clients."""
from .species_service import SpeciesService

__all__ = ['SpeciesService']
