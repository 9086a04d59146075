"""OpenCorporates search, across all jurisdictions or pinned to one."""
from dataclasses import replace
from typing import Any, Dict, List, Optional

from company_search.adapters.base import RegistryAdapter
from company_search.config import (
    OPENCORPORATES_API_TOKEN,
    OPENCORPORATES_PAGE,
    OPENCORPORATES_SEARCH_URL,
    OPENCORPORATES_TIMEOUT,
)
from company_search.models import CompanyRecord
from company_search.normalizer import assemble_address, canonical_jurisdiction, record_url, translate_status
from company_search.registries import OPENCORPORATES, RegistryProfile


def opencorporates_address(company: Dict[str, Any]) -> Optional[str]:
    addr = company.get("registered_address")
    parts = []
    if isinstance(addr, dict):
        parts = [
            addr.get("street_address"),
            addr.get("locality"),
            addr.get("region"),
            addr.get("postal_code"),
            addr.get("country"),
        ]
    return assemble_address(company.get("registered_address_in_full"), parts)


def company_fields(company: Dict[str, Any], profile: RegistryProfile = OPENCORPORATES) -> Dict[str, Any]:
    """CompanyRecord keyword arguments for one OpenCorporates `company` object."""
    return dict(
        source=profile.label,
        name=str(company.get("name") or "").strip(),
        company_number=str(company.get("company_number") or "").strip(),
        jurisdiction=canonical_jurisdiction(company.get("jurisdiction_code")),
        address=opencorporates_address(company),
        status=translate_status(company.get("current_status"), profile),
        incorporation_date=company.get("incorporation_date"),
        company_type=company.get("company_type"),
        url=record_url(company.get("opencorporates_url"), profile),
    )


class OpenCorporatesAdapter(RegistryAdapter):
    """
    OpenCorporates company search.

    Without a jurisdiction this is the generic 140+ country search; with one,
    it becomes a separate source labelled after that jurisdiction.
    """
    timeout = OPENCORPORATES_TIMEOUT

    def __init__(
        self,
        jurisdiction_code: Optional[str] = None,
        api_token: Optional[str] = OPENCORPORATES_API_TOKEN,
    ):
        self.jurisdiction_code = jurisdiction_code.strip().lower() if jurisdiction_code else None
        self.api_token = api_token
        if self.jurisdiction_code:
            canonical = canonical_jurisdiction(self.jurisdiction_code)
            self.profile = replace(
                OPENCORPORATES,
                key=f"oc-{self.jurisdiction_code}",
                label=f"{OPENCORPORATES.label} ({canonical})",
            )
        else:
            self.profile = OPENCORPORATES

    async def search(self, query: str) -> List[CompanyRecord]:
        params = {"q": query, "per_page": OPENCORPORATES_PAGE}
        if self.jurisdiction_code:
            params["jurisdiction_code"] = self.jurisdiction_code
        if self.api_token:
            params["api_token"] = self.api_token

        data = await self._fetch_json("GET", OPENCORPORATES_SEARCH_URL, params=params)
        results = data.get("results") if isinstance(data, dict) else None
        companies = results.get("companies") if isinstance(results, dict) else None
        if not isinstance(companies, list):
            return []

        records = []
        for entry in companies:
            company = entry.get("company") if isinstance(entry, dict) else None
            if isinstance(company, dict):
                records.append(CompanyRecord(**company_fields(company, self.profile)))
        return self.usable(records)
