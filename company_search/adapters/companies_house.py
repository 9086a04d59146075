"""UK Companies House search with per-company registered-office enrichment."""
import asyncio
from functools import partial
from typing import Any, Dict, List, Optional

from aiohttp import BasicAuth
from loguru import logger

from company_search.adapters.base import RegistryAdapter
from company_search.config import (
    COMPANIES_HOUSE_API_KEY,
    COMPANIES_HOUSE_API_URL,
    COMPANIES_HOUSE_PAGE,
    PROFILE_TIMEOUT,
)
from company_search.errors import SourceUnavailable
from company_search.models import CompanyRecord
from company_search.normalizer import assemble_address, join_address, record_url, translate_status
from company_search.registries import COMPANIES_HOUSE

COMPANY_PAGE_URL = "https://find-and-update.company-information.service.gov.uk/company/{number}"


def format_uk_address(addr: Optional[Dict[str, Any]]) -> Optional[str]:
    """Join a Companies House address object in postal order."""
    if not isinstance(addr, dict):
        return None
    return join_address([
        addr.get("premises"),
        addr.get("address_line_1"),
        addr.get("address_line_2"),
        addr.get("locality"),
        addr.get("region"),
        addr.get("postal_code"),
        addr.get("country"),
    ])


class CompaniesHouseAdapter(RegistryAdapter):
    profile = COMPANIES_HOUSE

    def __init__(self, api_key: Optional[str] = COMPANIES_HOUSE_API_KEY):
        self.api_key = api_key

    @property
    def auth(self) -> Optional[BasicAuth]:
        # Companies House uses the key as the Basic auth user name with an empty password
        return BasicAuth(self.api_key, "") if self.api_key else None

    async def search(self, query: str) -> List[CompanyRecord]:
        """
        Search Companies House and, when a key is configured, fetch each company's
        profile in parallel for its registered office address.

        Args:
            query (str): Company name to search for.

        Returns:
            List[CompanyRecord]: Usable records, in registry order.
        """
        deadline_at = self._deadline_at()
        search = partial(
            self._fetch_json,
            "GET",
            f"{COMPANIES_HOUSE_API_URL}/search/companies",
            params={"q": query, "items_per_page": COMPANIES_HOUSE_PAGE},
            auth=self.auth,
        )
        data = await self._within(search, deadline_at, self.timeout)
        items = data.get("items") if isinstance(data, dict) else None
        if not isinstance(items, list):
            return []

        rows = [item for item in items if isinstance(item, dict)]
        records = await asyncio.gather(*[self._build_record(item, deadline_at) for item in rows])
        return self.usable(records)

    async def _registered_office(self, company_number: str, deadline_at: float) -> Optional[str]:
        """
        Profile lookup, bounded by PROFILE_TIMEOUT and by the time left before the
        search deadline; any failure leaves the caller with the search address.
        """
        lookup = partial(
            self._fetch_json,
            "GET",
            f"{COMPANIES_HOUSE_API_URL}/company/{company_number}",
            auth=self.auth,
            timeout=PROFILE_TIMEOUT,
        )
        try:
            profile = await self._within(lookup, deadline_at, PROFILE_TIMEOUT)
        except SourceUnavailable as e:
            logger.debug(f"⚠️ Companies House profile {company_number} unavailable: {e.cause}")
            return None
        if not isinstance(profile, dict):
            return None
        return format_uk_address(profile.get("registered_office_address"))

    async def _build_record(self, item: Dict[str, Any], deadline_at: float) -> CompanyRecord:
        number = str(item.get("company_number") or "").strip()
        address = assemble_address(item.get("address_snippet")) or format_uk_address(item.get("address"))

        if self.api_key and number:
            address = await self._registered_office(number, deadline_at) or address

        return CompanyRecord(
            source=self.label,
            name=str(item.get("title") or "").strip(),
            company_number=number,
            jurisdiction="GB",
            address=address,
            status=translate_status(item.get("company_status"), self.profile),
            incorporation_date=item.get("date_of_creation"),
            company_type=item.get("company_type"),
            url=record_url(COMPANY_PAGE_URL.format(number=number) if number else None, self.profile),
        )
