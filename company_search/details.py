"""
Single-company detail lookup against an OpenCorporates company page.
"""
from typing import Optional
from urllib.parse import urlparse

from loguru import logger

from company_search.adapters.opencorporates import company_fields
from company_search.clients import HttpClient, parse_json_body
from company_search.config import DETAILS_TIMEOUT, OPENCORPORATES_API_TOKEN, OPENCORPORATES_HOSTS
from company_search.errors import InputInvalid
from company_search.models import CompanyDetails


def _validated_url(company_url: str) -> str:
    parsed = urlparse(company_url.strip())
    if parsed.scheme not in ("http", "https") or (parsed.hostname or "").lower() not in OPENCORPORATES_HOSTS:
        raise InputInvalid("companyUrl must be an OpenCorporates company URL")
    return parsed.geturl()


async def fetch_company_details(company_url: str) -> Optional[CompanyDetails]:
    """
    Fetch the JSON form of an OpenCorporates company page.

    Args:
        company_url (str): `opencorporates_url` of a search result.

    Returns:
        Optional[CompanyDetails]: The company, or None if the page has no company.

    Raises:
        InputInvalid: URL outside OpenCorporates.
        SourceUnavailable: transport failure or a non-JSON body.
    """
    url = _validated_url(company_url)
    params = {"format": "json"}
    if OPENCORPORATES_API_TOKEN:
        params["api_token"] = OPENCORPORATES_API_TOKEN

    logger.debug(f"📥 Fetching company details from {url}")
    response = await HttpClient().get(url, params=params, timeout=DETAILS_TIMEOUT)
    if not response.ok:
        logger.info(f"Company details {url} returned HTTP {response.status}")
        return None

    data = parse_json_body(response)
    results = data.get("results") if isinstance(data, dict) else None
    company = results.get("company") if isinstance(results, dict) else None
    if not isinstance(company, dict):
        return None

    return CompanyDetails(**company_fields(company), registered_agent=company.get("agent_name"))
