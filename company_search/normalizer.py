"""
Pure mapping functions that turn registry-specific fields into CompanyRecord fields.

Lookup tables are passed in by the caller (see registries.py), so these
functions carry no registry knowledge of their own.
"""
import re
from typing import Any, Iterable, Mapping, Optional

from company_search.registries import JURISDICTIONS, RegistryProfile


def canonical_jurisdiction(code: Optional[str], table: Mapping[str, str] = JURISDICTIONS) -> Optional[str]:
    """
    Canonicalize a jurisdiction code: "us_de" -> "US-DE", "gb" -> "GB".

    Args:
        code (Optional[str]): Raw code from the registry.
        table (Mapping[str, str]): Known codes and their canonical forms.

    Returns:
        Optional[str]: Canonical code, the hyphenated input if unknown, None if empty.
    """
    if not code or not str(code).strip():
        return None
    mapped = str(code).strip().upper().replace("_", "-")
    return table.get(mapped, mapped)


def _clean(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def collapse_address(value: Any) -> Optional[str]:
    """Reduce a scraped address (string or list of strings) to one usable line."""
    if isinstance(value, (list, tuple)):
        for item in value:
            text = _clean(item)
            if text:
                return text
        return None
    return _clean(value)


def join_address(parts: Iterable[Any]) -> Optional[str]:
    """Join present address components with ", ", skipping blanks."""
    present = [text for text in (_clean(p) for p in parts) if text]
    return ", ".join(present) if present else None


def assemble_address(full: Any, parts: Iterable[Any] = ()) -> Optional[str]:
    """
    Prefer a pre-formatted full address; otherwise join the ordered components
    (street, locality, region, postal code, country).
    """
    return collapse_address(full) or join_address(parts)


def translate_status(value: Any, profile: RegistryProfile) -> Optional[str]:
    """Map a registry's native status onto the shared labels, passing unknown values through."""
    raw = _clean(value)
    if raw is None:
        return profile.default_status or None
    return profile.status_map.get(raw, raw)


def record_url(deep_link: Optional[str], profile: RegistryProfile) -> str:
    """Deep link to the record when one could be built, else the registry's public site."""
    return _clean(deep_link) or profile.register_url


def name_key(name: Optional[str]) -> str:
    """Lower-cased name with everything but ASCII letters and digits removed."""
    return re.sub(r"[^a-z0-9]", "", (name or "").lower())
