"""
Typed data models for the company registry search.
All data structures passed between adapters, coordinator and merger are defined here.
"""
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional, Tuple

# Wire names used in JSON responses
_WIRE_NAMES = {
    "company_number": "companyNumber",
    "incorporation_date": "incorporationDate",
    "company_type": "companyType",
    "registered_agent": "registeredAgent",
}


@dataclass(frozen=True)
class CompanyRecord:
    """A normalized company produced by one registry adapter."""
    source: str  # Human-readable register name, e.g. "Companies House UK"
    name: str
    company_number: str
    jurisdiction: Optional[str] = None  # ISO-2, optionally suffixed: "US-DE"
    address: Optional[str] = None
    status: Optional[str] = None
    incorporation_date: Optional[str] = None
    company_type: Optional[str] = None
    url: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {_WIRE_NAMES.get(f.name, f.name): getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class CompanyDetails(CompanyRecord):
    """Single-company detail lookup; adds the registered agent when the registry knows it."""
    registered_agent: Optional[str] = None


@dataclass(frozen=True)
class AggregateResult:
    """Outcome of one fan-out: per-source record lists in priority order, plus warnings."""
    per_source: Tuple[Tuple[CompanyRecord, ...], ...] = ()
    warnings: Tuple[str, ...] = ()

    @property
    def records(self) -> List[CompanyRecord]:
        return [record for records in self.per_source for record in records]


@dataclass
class SearchResponse:
    """Final search payload sent back to the form."""
    results: List[CompanyRecord] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def warning(self) -> Optional[str]:
        return "; ".join(self.warnings) if self.warnings else None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"results": [r.to_dict() for r in self.results]}
        if self.warning:
            payload["warning"] = self.warning
        return payload
