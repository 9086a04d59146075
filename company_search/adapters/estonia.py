"""Estonia e-Business Register (ariregister) autocomplete search."""
from functools import partial
from typing import Any, Dict, List, Optional

from company_search.adapters.base import RegistryAdapter
from company_search.config import BROWSER_USER_AGENT, ESTONIA_AUTOCOMPLETE_URLS
from company_search.models import CompanyRecord
from company_search.normalizer import join_address, record_url, translate_status
from company_search.registries import ESTONIA

COMPANY_PAGE_URL = "https://ariregister.rik.ee/eng/company/{reg_code}"

# The autocomplete endpoint sits behind a browser check; plain API clients get an HTML challenge
BROWSER_HEADERS = {
    "User-Agent": BROWSER_USER_AGENT,
    "Accept": "application/json, text/plain, */*",
    "Accept-Language": "en-US,en;q=0.9,et;q=0.8",
    "Referer": "https://ariregister.rik.ee/",
    "Origin": "https://ariregister.rik.ee",
    "Cache-Control": "no-cache",
}


def estonian_address(company: Dict[str, Any]) -> Optional[str]:
    """Legal address plus postcode, with the country appended unless already named."""
    legal_address = company.get("legal_address")
    if not legal_address or not str(legal_address).strip():
        return None
    address = join_address([legal_address, company.get("zip_code")])
    lowered = address.lower()
    if "estonia" not in lowered and "eesti" not in lowered:
        address = f"{address}, Estonia"
    return address


class EstoniaAdapter(RegistryAdapter):
    profile = ESTONIA

    def __init__(self, endpoints: Optional[List[str]] = None):
        self.endpoints = list(endpoints or ESTONIA_AUTOCOMPLETE_URLS)

    async def search(self, query: str) -> List[CompanyRecord]:
        """Try the Estonian then the English endpoint; the first non-empty answer wins."""
        return await self._first_usable(
            [partial(self._search_endpoint, url, query) for url in self.endpoints]
        )

    async def _search_endpoint(self, url: str, query: str) -> List[CompanyRecord]:
        data = await self._fetch_json("GET", url, params={"q": query}, headers=BROWSER_HEADERS)
        if not isinstance(data, list):
            return []
        return self.usable(self._to_record(row) for row in data if isinstance(row, dict))

    def _to_record(self, company: Dict[str, Any]) -> CompanyRecord:
        reg_code = str(company.get("reg_code") or company.get("ariregistri_kood") or "").strip()
        deep_link = company.get("url") or (COMPANY_PAGE_URL.format(reg_code=reg_code) if reg_code else None)
        return CompanyRecord(
            source=self.label,
            name=str(company.get("name") or company.get("nimi") or "").strip(),
            company_number=reg_code,
            jurisdiction="EE",
            address=estonian_address(company),
            status=translate_status(company.get("status"), self.profile),
            url=record_url(deep_link, self.profile),
        )
