"""NEIS meal service API client."""

import logging
from dataclasses import dataclass
from typing import Protocol
from urllib.parse import quote, urlencode

import httpx

from school_meals.domain.errors import NetworkError

_logger = logging.getLogger(__name__)

# Characters JavaScript's encodeURIComponent leaves alone beyond quote()'s own.
_RELAY_SAFE = "!*'()"


class NeisClient(Protocol):
    """Interface for fetching raw meal data."""

    async def fetch_meal_xml(self, query_key: str) -> str:
        """Fetch the meal XML document for a YYYYMMDD query key."""


@dataclass
class HttpxNeisClient(NeisClient):
    """HTTPX-backed NEIS client routed through a CORS relay."""

    base_url: str
    relay_url: str
    office_code: str
    school_code: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(  # noqa: PLR0913
        cls,
        base_url: str,
        relay_url: str,
        office_code: str,
        school_code: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "HttpxNeisClient":
        """Create a NEIS client with a managed, redirect-following httpx session."""
        return cls(
            base_url=base_url,
            relay_url=relay_url,
            office_code=office_code,
            school_code=school_code,
            http_client=httpx.AsyncClient(transport=transport, follow_redirects=True),
        )

    def build_url(self, query_key: str) -> str:
        """Build the relay URL wrapping the meal service request."""
        params = urlencode(
            {
                "ATPT_OFCDC_SC_CODE": self.office_code,
                "SD_SCHUL_CODE": self.school_code,
                "MLSV_YMD": query_key,
            }
        )
        target = f"{self.base_url}/mealServiceDietInfo?{params}"
        return f"{self.relay_url}?url={quote(target, safe=_RELAY_SAFE)}"

    async def fetch_meal_xml(self, query_key: str) -> str:
        """Fetch meal XML, raising NetworkError on any failure."""
        url = self.build_url(query_key)
        _logger.info("Fetching meals: query_key=%s", query_key)
        try:
            response = await self.http_client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise NetworkError(f"Meal request failed: {exc}") from exc
        return response.text

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
