import httpx
import logging
from pydantic import ValidationError
from app.models import TranslationRequest, TranslationResult, TranslationVariant
from app.clients.errors import DeserializationError, TooManyRequestsError, UpstreamError

logger = logging.getLogger(__name__)

API_TOKEN_HEADER = "X-Funtranslations-Api-Secret"

class TranslationClient:
    DEFAULT_BASE_URL = "https://api.funtranslations.com"

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        api_token: str | None = None,
        timeout: float = 5.0,
    ):
        self.client = httpx.AsyncClient(base_url=base_url, timeout=timeout)
        self._api_token = api_token

    def _headers(self) -> dict[str, str]:
        # Without a credential the header is left out entirely, never sent empty
        if self._api_token:
            return {API_TOKEN_HEADER: self._api_token}
        return {}

    async def translate(self, text: str, variant: TranslationVariant) -> str:
        """Translates text with the given variant and returns the translated text."""
        body = TranslationRequest(text=text).model_dump()

        try:
            response = await self.client.post(variant.path, json=body, headers=self._headers())
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.error(f"Translation API network error: {str(e)}")
            raise UpstreamError(f"Translation API network error: {str(e)}")

        if response.status_code == 429:
            logger.error("Translation API failed with status 429. Rate limit exceeded.")
            raise TooManyRequestsError("Translation API rate limit exceeded.")
        if response.status_code != 200:
            logger.error(f"Translation API failed with status {response.status_code}.")
            raise UpstreamError(f"Translation API failed with status {response.status_code}.")

        try:
            result = TranslationResult.model_validate_json(response.content)
        except ValidationError:
            logger.error("Translation API response parsing error.")
            raise DeserializationError("Translation API returned an unexpected response format.")

        # Only exactly one result counts as a usable translation
        if result.success.total != 1:
            logger.error(f"Translation API reported success.total={result.success.total}.")
            raise DeserializationError(
                f"Translation API reported {result.success.total} results instead of 1."
            )
        return result.contents.translated

    async def close(self):
        """Close the connection pool (call on app shutdown)."""
        await self.client.aclose()
