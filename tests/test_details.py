import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from company_search.details import fetch_company_details
from company_search.errors import InputInvalid, MalformedUpstreamResponse
from tests.upstream import html_response, json_response

COMPANY_URL = "https://opencorporates.com/companies/us_de/2345678"


@pytest.fixture
def details_http():
    with patch("company_search.details.HttpClient") as mock_client:
        instance = MagicMock()
        instance.get = AsyncMock()
        mock_client.return_value = instance
        yield instance.get


@pytest.mark.asyncio
async def test_details_include_registered_agent(details_http):
    details_http.return_value = json_response({"results": {"company": {
        "name": "ACME CORPORATION",
        "company_number": "2345678",
        "jurisdiction_code": "us_de",
        "registered_address_in_full": "1209 Orange St, Wilmington, DE, 19801",
        "current_status": "Active",
        "agent_name": "THE CORPORATION TRUST COMPANY",
        "opencorporates_url": COMPANY_URL,
    }}})

    details = await fetch_company_details(COMPANY_URL)

    assert details_http.call_args.kwargs["params"]["format"] == "json"
    payload = details.to_dict()
    assert payload["registeredAgent"] == "THE CORPORATION TRUST COMPANY"
    assert payload["jurisdiction"] == "US-DE"
    assert payload["address"] == "1209 Orange St, Wilmington, DE, 19801"
    assert payload["companyNumber"] == "2345678"


@pytest.mark.asyncio
async def test_details_not_found(details_http):
    details_http.return_value = json_response({"error": "not found"}, status=404)
    assert await fetch_company_details(COMPANY_URL) is None


@pytest.mark.asyncio
async def test_details_without_company_object(details_http):
    details_http.return_value = json_response({"results": {}})
    assert await fetch_company_details(COMPANY_URL) is None


@pytest.mark.asyncio
async def test_details_html_body_is_malformed(details_http):
    details_http.return_value = html_response()
    with pytest.raises(MalformedUpstreamResponse):
        await fetch_company_details(COMPANY_URL)


@pytest.mark.asyncio
@pytest.mark.parametrize("url", [
    "https://evil.test/companies/gb/1",
    "file:///etc/passwd",
    "https://opencorporates.com.evil.test/companies/gb/1",
])
async def test_details_only_fetch_opencorporates(details_http, url):
    with pytest.raises(InputInvalid):
        await fetch_company_details(url)
    assert not details_http.called
