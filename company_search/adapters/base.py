"""
Common contract for registry adapters.

An adapter turns a free-text query into normalized CompanyRecords for one
registry and signals any failure with SourceUnavailable.
"""
import asyncio
from typing import Any, Awaitable, Callable, Iterable, List, Optional

from loguru import logger

from company_search.clients import HttpClient, parse_json_body
from company_search.config import DEADLINE_MARGIN, REQUEST_TIMEOUT, SOURCE_DEADLINE
from company_search.errors import SourceUnavailable, UpstreamStatusError
from company_search.models import CompanyRecord
from company_search.registries import RegistryProfile

Attempt = Callable[[], Awaitable[List[CompanyRecord]]]


class RegistryAdapter:
    """
    Base class for registry adapters.

    Subclasses set `profile` and implement `search()`. `timeout` bounds each
    outbound call; `deadline` is the ceiling the coordinator gives the whole search.
    Sequential calls inside one search share that deadline, finishing
    `deadline_margin` seconds early so partial results are returned, not cancelled.
    """
    profile: RegistryProfile
    timeout: float = REQUEST_TIMEOUT
    deadline: float = SOURCE_DEADLINE
    deadline_margin: float = DEADLINE_MARGIN

    @property
    def label(self) -> str:
        return self.profile.label

    async def search(self, query: str) -> List[CompanyRecord]:
        raise NotImplementedError

    async def _fetch_json(
        self,
        method: str,
        url: str,
        timeout: Optional[float] = None,
        **kwargs,
    ) -> Optional[Any]:
        """
        Call the registry and decode its JSON body.

        Returns:
            The decoded document, or None when the registry answered 404.

        Raises:
            UpstreamStatusError: any other non-2xx status.
            MalformedUpstreamResponse: 2xx body that is not JSON.
            SourceUnavailable: timeout or transport failure.
        """
        response = await HttpClient().request(method, url, timeout=timeout or self.timeout, **kwargs)
        if response.status == 404:
            logger.debug(f"{self.label}: 404 from {url}, treating as no results")
            return None
        if not response.ok:
            raise UpstreamStatusError(response.status, url)
        return parse_json_body(response)

    def _deadline_at(self) -> float:
        """Loop time by which this search must have returned."""
        return asyncio.get_running_loop().time() + self.deadline - self.deadline_margin

    async def _within(self, call: Callable[[], Awaitable[Any]], deadline_at: float, ceiling: float) -> Any:
        """
        Await `call()` for at most `ceiling` seconds, and never past `deadline_at`.

        Raises:
            SourceUnavailable: the time ran out, or `call` itself failed.
        """
        remaining = min(ceiling, deadline_at - asyncio.get_running_loop().time())
        if remaining <= 0:
            raise SourceUnavailable("no time left before the source deadline")
        try:
            return await asyncio.wait_for(call(), timeout=remaining)
        except asyncio.TimeoutError as e:
            raise SourceUnavailable(f"timed out after {remaining:.2f}s") from e

    async def _first_usable(self, attempts: List[Attempt]) -> List[CompanyRecord]:
        """
        Run endpoint variants one after another and keep the first non-empty result.

        Running out of variants is an empty result, unless every variant failed,
        in which case the last failure is raised.
        """
        deadline_at = self._deadline_at()
        failures: List[SourceUnavailable] = []
        for attempt in attempts:
            try:
                records = await self._within(attempt, deadline_at, self.timeout)
            except SourceUnavailable as e:
                logger.info(f"{self.label}: endpoint variant skipped ({e.cause})")
                failures.append(e)
                continue
            if records:
                return records

        if attempts and len(failures) == len(attempts):
            raise SourceUnavailable(failures[-1].cause, source=self.label)
        return []

    @staticmethod
    def usable(records: Iterable[CompanyRecord]) -> List[CompanyRecord]:
        """Drop records without a name or a registry number."""
        return [r for r in records if r.name and r.company_number]
