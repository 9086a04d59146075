"""
Entry point for a full registry search: fan out to every source, then merge.
"""
from typing import Optional, Sequence

from loguru import logger

from company_search.adapters import RegistryAdapter
from company_search.config import PAGE_SIZE
from company_search.coordinator import aggregate
from company_search.errors import AggregationFailure
from company_search.merger import merge
from company_search.models import SearchResponse


async def search_companies(
    query: Optional[str],
    adapters: Optional[Sequence[RegistryAdapter]] = None,
    page_size: int = PAGE_SIZE,
) -> SearchResponse:
    """
    Full registry search: fan out, then merge into one ranked page.

    Raises:
        InputInvalid: empty query.
        AggregationFailure: anything going wrong after the sources answered.
    """
    outcome = await aggregate(query, adapters)
    try:
        results = merge(outcome.per_source, page_size=page_size)
    except Exception as e:
        raise AggregationFailure(str(e)) from e

    logger.info(f"Search '{query}': {len(results)} results, {len(outcome.warnings)} sources unavailable")
    return SearchResponse(results=results, warnings=list(outcome.warnings))
