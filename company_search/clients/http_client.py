"""
Singleton registry HTTP client with rate limiting using aiolimiter.
"""
import asyncio
import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

from aiohttp import BasicAuth, ClientError, ClientSession, ClientTimeout
from aiolimiter import AsyncLimiter
from loguru import logger

from company_search.config import CONCURRENCY, REQUEST_TIMEOUT, USER_AGENT
from company_search.errors import MalformedUpstreamResponse, SourceUnavailable


@dataclass(frozen=True)
class UpstreamResponse:
    """Raw registry response; the body is kept as text until it has been checked."""
    url: str
    status: int
    content_type: str
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


def parse_json_body(response: UpstreamResponse) -> Any:
    """
    Decode a registry response as JSON, refusing anything that only pretends to be JSON.

    Some registries (Estonia in particular) answer their JSON endpoints with an
    HTML anti-bot challenge and a 200 status.

    Args:
        response (UpstreamResponse): Response to decode.

    Returns:
        Any: Decoded JSON document (dict or list).

    Raises:
        MalformedUpstreamResponse: HTML content type, body not starting with
            '[' or '{', or body that fails to decode.
    """
    if "text/html" in (response.content_type or "").lower():
        raise MalformedUpstreamResponse("returned HTML (likely an anti-bot challenge)")

    body = response.text.strip()
    if not body or body[0] not in "[{":
        raise MalformedUpstreamResponse("returned a non-JSON response")

    try:
        return json.loads(body)
    except ValueError as e:
        raise MalformedUpstreamResponse(f"returned malformed JSON: {e}") from e


class HttpClient:
    """
    Singleton client for registry requests.
    Uses AsyncLimiter for rate limiting; each call carries its own timeout.
    """
    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not HttpClient._initialized:
            # Token bucket: CONCURRENCY requests per second across all registries
            self.rate_limiter = AsyncLimiter(max_rate=CONCURRENCY, time_period=1.0)
            self._session: Optional[ClientSession] = None
            HttpClient._initialized = True

    async def _get_session(self) -> ClientSession:
        """Get or create the aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = ClientSession(headers={"User-Agent": USER_AGENT})
        return self._session

    async def request(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        json_body: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        auth: Optional[BasicAuth] = None,
        timeout: float = REQUEST_TIMEOUT,
    ) -> UpstreamResponse:
        """
        Send a request and return the undecoded response.

        Args:
            method: HTTP method.
            url: Target URL.
            params: Optional query parameters.
            json_body: Optional JSON payload.
            headers: Optional HTTP headers.
            auth: Optional Basic auth credentials.
            timeout: Total seconds allowed for the call, body included.

        Returns:
            UpstreamResponse with status, content type and body text.

        Raises:
            SourceUnavailable: on timeout or any transport error.
        """
        async with self.rate_limiter:
            session = await self._get_session()
            try:
                async with session.request(
                    method,
                    url,
                    params=params,
                    json=json_body,
                    headers=headers,
                    auth=auth,
                    timeout=ClientTimeout(total=timeout),
                ) as resp:
                    text = await resp.text(errors="replace")
                    return UpstreamResponse(
                        url=str(resp.url),
                        status=resp.status,
                        content_type=resp.headers.get("Content-Type", ""),
                        text=text,
                    )
            except asyncio.TimeoutError as e:
                logger.debug(f"⏱️ {method} {url} timed out after {timeout}s")
                raise SourceUnavailable(f"timed out after {timeout:g}s") from e
            except ClientError as e:
                logger.debug(f"⚠️ {method} {url} failed: {e}")
                raise SourceUnavailable(f"request failed: {e}") from e

    async def get(self, url: str, **kwargs) -> UpstreamResponse:
        return await self.request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs) -> UpstreamResponse:
        return await self.request("POST", url, **kwargs)

    async def close(self):
        """Close the aiohttp session."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None
        # The limiter may hold waiters bound to the loop that is about to end
        self.rate_limiter = AsyncLimiter(max_rate=CONCURRENCY, time_period=1.0)
