"""Registry adapters, one per source, and the default priority order."""
from typing import List

from company_search.adapters.ares import AresAdapter
from company_search.adapters.base import RegistryAdapter
from company_search.adapters.companies_house import CompaniesHouseAdapter
from company_search.adapters.estonia import EstoniaAdapter
from company_search.adapters.opencorporates import OpenCorporatesAdapter
from company_search.config import OPENCORPORATES_JURISDICTIONS


def build_default_adapters() -> List[RegistryAdapter]:
    """
    Adapters in priority order: direct national registries first, then
    OpenCorporates pinned to configured jurisdictions, then its generic search.
    """
    adapters: List[RegistryAdapter] = [
        CompaniesHouseAdapter(),
        EstoniaAdapter(),
        AresAdapter(),
    ]
    adapters.extend(OpenCorporatesAdapter(code) for code in OPENCORPORATES_JURISDICTIONS)
    adapters.append(OpenCorporatesAdapter())
    return adapters


__all__ = [
    "AresAdapter",
    "CompaniesHouseAdapter",
    "EstoniaAdapter",
    "OpenCorporatesAdapter",
    "RegistryAdapter",
    "build_default_adapters",
]
