"""
Static registry configuration.

Each registry is described by an immutable RegistryProfile; adding a registry
means adding a profile and an adapter, never touching the normalizer.
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

EMPTY_MAP: Mapping[str, str] = MappingProxyType({})


@dataclass(frozen=True)
class RegistryProfile:
    """Label, vocabularies and fallback link for one registry."""
    key: str
    label: str
    register_url: str
    status_map: Mapping[str, str] = field(default_factory=lambda: EMPTY_MAP)
    default_status: str = ""


# Canonical jurisdiction codes keyed by upper-cased, hyphenated input.
# Unknown codes pass through unchanged.
JURISDICTIONS: Mapping[str, str] = MappingProxyType({
    "GB": "GB", "UK": "GB", "GB-ENG": "GB", "GB-WLS": "GB",
    "GB-SCT": "GB-SCT", "GB-NIR": "GB-NIR",
    "US-DE": "US-DE", "US-NY": "US-NY", "US-CA": "US-CA",
    "EE": "EE", "LT": "LT", "LV": "LV", "PL": "PL", "CZ": "CZ", "SK": "SK",
    "ES": "ES", "HU": "HU", "DE": "DE", "FR": "FR", "NL": "NL", "IE": "IE",
    "EL": "GR", "GR": "GR",
    "AE": "AE", "AE-DU": "AE-DU", "AE-AZ": "AE-AZ", "SG": "SG", "HK": "HK",
    "CH": "CH", "SV": "SV", "BE": "BE", "AT": "AT", "IT": "IT", "PT": "PT",
})

COMPANIES_HOUSE = RegistryProfile(
    key="gb",
    label="Companies House UK",
    register_url="https://find-and-update.company-information.service.gov.uk/",
    status_map=MappingProxyType({
        "active": "Active",
        "open": "Open",
        "dissolved": "Dissolved",
        "closed": "Closed",
        "converted-closed": "Closed",
        "liquidation": "In liquidation",
        "administration": "In administration",
        "receivership": "In receivership",
        "voluntary-arrangement": "Voluntary arrangement",
        "insolvency-proceedings": "Insolvency proceedings",
    }),
)

ESTONIA = RegistryProfile(
    key="ee",
    label="Estonia e-Business Register",
    register_url="https://ariregister.rik.ee/eng",
    status_map=MappingProxyType({
        "R": "Registered",
        "Registrisse kantud": "Registered",
        "K": "Deleted",
        "Kustutatud": "Deleted",
        "L": "In liquidation",
        "Likvideerimisel": "In liquidation",
        "N": "Bankrupt",
        "Pankrotis": "Bankrupt",
    }),
    default_status="Active",
)

ARES = RegistryProfile(
    key="cz",
    label="Czech ARES",
    register_url="https://ares.gov.cz/ekonomicke-subjekty",
    status_map=MappingProxyType({
        "AKTIVNI": "Active",
        "ZANIKLY": "Deleted",
        "HISTORICKY": "Deleted",
    }),
)

# Czech legal-form codes (pravní forma) seen most often on NDA counterparties
ARES_LEGAL_FORMS: Mapping[str, str] = MappingProxyType({
    "101": "Sole trader",
    "111": "General partnership (v.o.s.)",
    "112": "Limited liability company (s.r.o.)",
    "113": "Limited partnership (k.s.)",
    "121": "Joint-stock company (a.s.)",
    "205": "Cooperative (družstvo)",
    "706": "Association (spolek)",
    "931": "Foreign branch",
})

OPENCORPORATES = RegistryProfile(
    key="oc",
    label="OpenCorporates",
    register_url="https://opencorporates.com/",
    status_map=MappingProxyType({
        "Live": "Active",
        "In Liquidation": "In liquidation",
    }),
)
