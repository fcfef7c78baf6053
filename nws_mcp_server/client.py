import logging
from dataclasses import dataclass
from typing import Any, Union

import httpx

from .config import GEO_JSON, NWS_API_BASE, USER_AGENT

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Success:
    data: Any


@dataclass(frozen=True)
class Unavailable:
    reason: str


FetchResult = Union[Success, Unavailable]


class NwsClient:
    """GET requests against the National Weather Service API.

    ``fetch`` never raises for network, HTTP-status or JSON errors; those all
    come back as ``Unavailable`` after being written to the diagnostic log.
    """

    def __init__(
        self,
        base_url: str = NWS_API_BASE,
        user_agent: str = USER_AGENT,
        timeout: float = 30.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout

    @property
    def headers(self) -> dict[str, str]:
        return {"User-Agent": self.user_agent, "Accept": GEO_JSON}

    async def fetch(self, url: str) -> FetchResult:
        logger.info("Making request to %s", url)
        async with httpx.AsyncClient(follow_redirects=True) as client:
            try:
                response = await client.get(url, headers=self.headers, timeout=self.timeout)
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                logger.warning("Error making NWS request: %r", e)
                return Unavailable(f"request failed: {e!r}")

        if not response.is_success:
            logger.warning("HTTP error! status: %d", response.status_code)
            return Unavailable(f"HTTP error! status: {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            logger.warning("Error making NWS request: invalid JSON from %s: %s", url, e)
            return Unavailable(f"invalid JSON: {e}")

        logger.info("Request successful")
        return Success(data)
