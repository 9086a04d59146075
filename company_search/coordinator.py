"""
Fan a query out to every registry adapter at once and collect what comes back.
"""
import asyncio
import time
from typing import List, Optional, Sequence, Tuple

from loguru import logger

from company_search.adapters import RegistryAdapter, build_default_adapters
from company_search.errors import InputInvalid, SourceUnavailable
from company_search.models import AggregateResult, CompanyRecord


def unavailable_warning(adapter: RegistryAdapter) -> str:
    return f"{adapter.label} unavailable"


async def _run_adapter(adapter: RegistryAdapter, query: str) -> Tuple[Tuple[CompanyRecord, ...], Optional[str]]:
    """
    Run one adapter under its deadline.

    Returns:
        (records, warning): warning is None on success; on any failure records is empty.
    """
    start = time.perf_counter()
    logger.debug(f"▶️ START {adapter.label} search for '{query}'")
    try:
        records = await asyncio.wait_for(adapter.search(query), timeout=adapter.deadline)
    except asyncio.TimeoutError:
        logger.warning(f"⏱️ {adapter.label} exceeded its {adapter.deadline:g}s deadline")
        return (), unavailable_warning(adapter)
    except SourceUnavailable as e:
        logger.warning(f"⚠️ {adapter.label} unavailable: {e.cause}")
        return (), unavailable_warning(adapter)
    except Exception:
        logger.exception(f"{adapter.label} search raised unexpectedly")
        return (), unavailable_warning(adapter)

    duration = time.perf_counter() - start
    logger.debug(f"✅ {adapter.label} returned {len(records)} records in {duration:.2f}s")
    return tuple(records), None


async def aggregate(query: Optional[str], adapters: Optional[Sequence[RegistryAdapter]] = None) -> AggregateResult:
    """
    Search every adapter concurrently with the same query.

    A failing adapter contributes no records and one warning naming it; it
    never affects the others.

    Args:
        query (Optional[str]): Company name as typed into the form.
        adapters (Optional[Sequence[RegistryAdapter]]): Adapters in priority order.
            Defaults to build_default_adapters().

    Returns:
        AggregateResult: Per-source records in adapter order, and warnings.

    Raises:
        InputInvalid: if the query is empty.
    """
    query = query.strip() if isinstance(query, str) else ""
    if not query:
        raise InputInvalid("Query is required")

    if adapters is None:
        adapters = build_default_adapters()

    outcomes = await asyncio.gather(*[_run_adapter(adapter, query) for adapter in adapters])

    per_source = tuple(records for records, _ in outcomes)
    warnings: List[str] = [warning for _, warning in outcomes if warning]
    return AggregateResult(per_source=per_source, warnings=tuple(warnings))
