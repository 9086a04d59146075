"""
Combine per-registry results into one ranked page.
"""
from typing import Iterable, List, Sequence, Set

from company_search.config import PAGE_SIZE
from company_search.models import CompanyRecord
from company_search.normalizer import name_key


def number_key(record: CompanyRecord) -> str:
    return f"{record.company_number}-{(record.jurisdiction or '').lower()}"


def dedupe(records: Iterable[CompanyRecord]) -> List[CompanyRecord]:
    """
    Keep the first record for each company number + jurisdiction, and the first
    for each normalized name.

    A record is dropped when either key was already seen. Two different
    companies whose names normalize identically (e.g. "Acme Ltd" registered in
    two countries) therefore collapse into the earlier one.
    """
    seen_numbers: Set[str] = set()
    seen_names: Set[str] = set()
    unique: List[CompanyRecord] = []
    for record in records:
        key = number_key(record)
        name = name_key(record.name)
        if key in seen_numbers or (name and name in seen_names):
            continue
        seen_numbers.add(key)
        if name:
            seen_names.add(name)
        unique.append(record)
    return unique


def merge(per_source_results: Sequence[Sequence[CompanyRecord]], page_size: int = PAGE_SIZE) -> List[CompanyRecord]:
    """
    Flatten, deduplicate, rank and truncate adapter results.

    Args:
        per_source_results: One record list per adapter, highest-priority adapter first.
        page_size: Maximum number of records returned.

    Returns:
        List[CompanyRecord]: Records with an address first; otherwise source priority order.
    """
    flattened = [record for records in per_source_results for record in records]
    unique = dedupe(flattened)
    # sorted() is stable, so source priority survives within each group
    ranked = sorted(unique, key=lambda record: not record.address)
    return ranked[:page_size]
