"""Czech ARES (Administrative Register of Economic Subjects) search."""
from functools import partial
from typing import Any, Dict, List, Optional

from company_search.adapters.base import RegistryAdapter
from company_search.config import ARES_PAGE, ARES_SEARCH_URL
from company_search.models import CompanyRecord
from company_search.normalizer import assemble_address, record_url, translate_status
from company_search.registries import ARES, ARES_LEGAL_FORMS

COMPANY_PAGE_URL = "https://ares.gov.cz/ekonomicke-subjekty?ico={ico}"


def _street_line(sidlo: Dict[str, Any]) -> Optional[str]:
    street = sidlo.get("nazevUlice") or sidlo.get("nazevCastiObce")
    number = sidlo.get("cisloDomovni")
    if number and sidlo.get("cisloOrientacni"):
        number = f"{number}/{sidlo['cisloOrientacni']}"
    line = " ".join(str(part) for part in (street, number) if part)
    return line or None


def czech_address(sidlo: Any) -> Optional[str]:
    """Registered seat: ARES' own one-line text, else street, city, postcode, country."""
    if not isinstance(sidlo, dict):
        return None
    return assemble_address(
        sidlo.get("textovaAdresa"),
        [_street_line(sidlo), sidlo.get("nazevObce"), sidlo.get("psc"), sidlo.get("nazevStatu")],
    )


class AresAdapter(RegistryAdapter):
    profile = ARES

    async def search(self, query: str) -> List[CompanyRecord]:
        """POST search first; the GET form of the same search is the fallback."""
        return await self._first_usable([
            partial(self._search_post, query),
            partial(self._search_get, query),
        ])

    async def _search_post(self, query: str) -> List[CompanyRecord]:
        data = await self._fetch_json(
            "POST",
            ARES_SEARCH_URL,
            json_body={"obchodniJmeno": query, "pocet": ARES_PAGE, "start": 0},
            headers={"Accept": "application/json"},
        )
        return self._parse(data)

    async def _search_get(self, query: str) -> List[CompanyRecord]:
        data = await self._fetch_json(
            "GET",
            ARES_SEARCH_URL,
            params={"obchodniJmeno": query, "pocet": ARES_PAGE, "start": 0},
            headers={"Accept": "application/json"},
        )
        return self._parse(data)

    def _parse(self, data: Any) -> List[CompanyRecord]:
        rows = data.get("ekonomickeSubjekty") if isinstance(data, dict) else None
        if not isinstance(rows, list):
            return []
        return self.usable(self._to_record(row) for row in rows if isinstance(row, dict))

    def _status(self, subject: Dict[str, Any]) -> Optional[str]:
        if subject.get("datumZaniku"):
            return "Deleted"
        registrations = subject.get("seznamRegistraci")
        if isinstance(registrations, dict):
            return translate_status(registrations.get("stavZdrojeVr"), self.profile)
        return None

    def _to_record(self, subject: Dict[str, Any]) -> CompanyRecord:
        ico = str(subject.get("ico") or "").strip()
        legal_form = subject.get("pravniForma")
        return CompanyRecord(
            source=self.label,
            name=str(subject.get("obchodniJmeno") or "").strip(),
            company_number=ico,
            jurisdiction="CZ",
            address=czech_address(subject.get("sidlo")),
            status=self._status(subject),
            incorporation_date=subject.get("datumVzniku"),
            company_type=ARES_LEGAL_FORMS.get(str(legal_form), legal_form) if legal_form else None,
            url=record_url(COMPANY_PAGE_URL.format(ico=ico) if ico else None, self.profile),
        )
