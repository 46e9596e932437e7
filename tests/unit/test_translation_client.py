import pytest
import pytest_asyncio
import httpx
from app.clients.translation_client import API_TOKEN_HEADER, TranslationClient
from app.clients.errors import DeserializationError, TooManyRequestsError, UpstreamError
from app.models import TranslationVariant


MOCK_TRANSLATION_SUCCESS = {
    "success": {"total": 1},
    "contents": {
        "translated": "world hello",
        "text": "Hello world",
        "translation": "yoda"
    }
}

YODA_URL = "https://api.funtranslations.com/translate/yoda.json"
SHAKESPEARE_URL = "https://api.funtranslations.com/translate/shakespeare.json"

@pytest_asyncio.fixture
async def translation_client():
    """Provides a TranslationClient without a credential."""
    client = TranslationClient()
    yield client
    await client.close()

@pytest.mark.asyncio
async def test_successful_alternate_translation(httpx_mock, translation_client):
    """Verifies the request body and the extraction of the translated text."""
    # ARRANGE: Only a POST with the expected JSON body matches
    httpx_mock.add_response(
        method="POST",
        url=YODA_URL,
        match_json={"text": "Hello world"},
        json=MOCK_TRANSLATION_SUCCESS,
        status_code=200
    )

    # ACT
    result = await translation_client.translate("Hello world", TranslationVariant.ALTERNATE)

    # ASSERT: Check that only the translated text is returned
    assert result == "world hello"


@pytest.mark.asyncio
async def test_default_variant_uses_default_path(httpx_mock, translation_client):
    """The default variant is posted to the Shakespeare endpoint."""
    httpx_mock.add_response(
        method="POST",
        url=SHAKESPEARE_URL,
        json={**MOCK_TRANSLATION_SUCCESS, "contents": {"translated": "Hark, hello world"}},
    )

    result = await translation_client.translate("Hello world", TranslationVariant.DEFAULT)

    assert result == "Hark, hello world"


@pytest.mark.asyncio
async def test_api_token_is_sent_as_header(httpx_mock):
    """A configured credential is attached to the translation call."""
    httpx_mock.add_response(
        url=SHAKESPEARE_URL,
        match_headers={API_TOKEN_HEADER: "an_api_token"},
        json=MOCK_TRANSLATION_SUCCESS,
    )

    client = TranslationClient(api_token="an_api_token")
    result = await client.translate("Hello world", TranslationVariant.DEFAULT)
    await client.close()

    assert result == "world hello"


@pytest.mark.asyncio
@pytest.mark.parametrize("api_token", [None, ""])
async def test_missing_api_token_omits_header(httpx_mock, api_token):
    """Without a credential the header is not sent at all, not even empty."""
    httpx_mock.add_response(url=SHAKESPEARE_URL, json=MOCK_TRANSLATION_SUCCESS)

    client = TranslationClient(api_token=api_token)
    await client.translate("Hello world", TranslationVariant.DEFAULT)
    await client.close()

    request = httpx_mock.get_request()
    assert API_TOKEN_HEADER not in request.headers


@pytest.mark.asyncio
async def test_api_rate_limit_raises_too_many_requests(httpx_mock, translation_client):
    """A 429 gets its own error type, distinct from generic upstream failures."""
    httpx_mock.add_response(
        url=SHAKESPEARE_URL,
        status_code=429,
        json={"error": {"code": 429, "message": "Too Many Requests"}}
    )

    with pytest.raises(TooManyRequestsError) as excinfo:
        await translation_client.translate("To be or not to be.", TranslationVariant.DEFAULT)

    assert "rate limit" in excinfo.value.detail.lower()


@pytest.mark.asyncio
async def test_server_error_raises_upstream_error(httpx_mock, translation_client):
    """A 500 maps to the generic UpstreamError."""
    httpx_mock.add_response(url=YODA_URL, status_code=500)

    with pytest.raises(UpstreamError) as excinfo:
        await translation_client.translate("Hello world", TranslationVariant.ALTERNATE)

    assert "500" in excinfo.value.detail


@pytest.mark.asyncio
async def test_empty_body_raises_deserialization_error(httpx_mock, translation_client):
    """A 200 with no body is a payload that cannot be trusted."""
    httpx_mock.add_response(url=YODA_URL, status_code=200)

    with pytest.raises(DeserializationError):
        await translation_client.translate("Hello world", TranslationVariant.ALTERNATE)


@pytest.mark.asyncio
@pytest.mark.parametrize("total", [0, 2])
async def test_success_total_other_than_one_raises_deserialization_error(httpx_mock, translation_client, total):
    """Only success.total == 1 is a usable translation, even on HTTP 200."""
    httpx_mock.add_response(
        url=YODA_URL,
        json={**MOCK_TRANSLATION_SUCCESS, "success": {"total": total}},
        status_code=200
    )

    with pytest.raises(DeserializationError):
        await translation_client.translate("Hello world", TranslationVariant.ALTERNATE)


@pytest.mark.asyncio
async def test_api_network_error_raises_upstream_error(httpx_mock, translation_client):
    """Tests that a network failure (timeout, DNS error) raises UpstreamError."""
    httpx_mock.add_exception(
        httpx.ConnectError("Connection timed out."),
        url=YODA_URL
    )

    with pytest.raises(UpstreamError) as excinfo:
        await translation_client.translate("Test.", TranslationVariant.ALTERNATE)

    assert "network error" in excinfo.value.detail.lower()


@pytest.mark.asyncio
async def test_invalid_url_raises_upstream_error(httpx_mock, translation_client):
    """A URL httpx refuses to build is an upstream failure, so the pipeline can fall back."""
    httpx_mock.add_exception(
        httpx.InvalidURL("Invalid non-printable ASCII character in URL"),
        url=YODA_URL
    )

    with pytest.raises(UpstreamError):
        await translation_client.translate("Test.", TranslationVariant.ALTERNATE)
