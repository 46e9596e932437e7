import httpx
import logging
from urllib.parse import quote
from pydantic import ValidationError
from app.models import Species
from app.clients.errors import DeserializationError, NotFoundError, UpstreamError

logger = logging.getLogger(__name__)

class SpeciesClient:
    DEFAULT_BASE_URL = "https://pokeapi.co"

    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: float = 5.0):
        # Shared by all concurrent requests; never mutated after construction
        self.client = httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def fetch(self, name: str) -> Species:
        """Fetches and validates the species data for the given name."""
        # The name is always a single path segment
        url = f"/api/v2/pokemon-species/{quote(name, safe='')}"

        try:
            response = await self.client.get(url)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            # Handle network failures/timeouts and URLs httpx refuses to build
            logger.error(f"PokeAPI network error for '{name}': {str(e)}")
            raise UpstreamError(f"PokeAPI network error: {str(e)}")

        if response.status_code == 404:
            logger.info(f"Species not found: {name}")
            raise NotFoundError(f"Species '{name}' not found.")
        if response.status_code != 200:
            logger.error(f"PokeAPI failed with status {response.status_code} for '{name}'")
            raise UpstreamError(f"PokeAPI failed with status {response.status_code}")

        try:
            return Species.model_validate_json(response.content)
        except ValidationError as e:
            logger.error(f"PokeAPI response for '{name}' could not be parsed: {e.error_count()} errors")
            raise DeserializationError("PokeAPI returned an unexpected response format.")

    async def close(self):
        """Close the connection pool (call on app shutdown)."""
        await self.client.aclose()
