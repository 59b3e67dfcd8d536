from typing import Any, Dict, List

import httpx

from gateway.adapters.interfaces.provider import ProviderAdapter
from gateway.core.config import Settings
from gateway.core.exceptions import UpstreamError
from gateway.domain.models.envelope import Envelope
from gateway.domain.models.quote import DEFAULT_CATEGORY, Quote

AUTHOR_QUOTES_LIMIT = 5


class QuotesAdapter(ProviderAdapter):
    """Random and per-author quotations from quotable.io."""

    key = "quotes"
    name = "Quotes"
    operations = ("get_random_quote", "get_quotes_by_author")

    @classmethod
    def from_settings(cls, settings: Settings, http_client: httpx.AsyncClient) -> "QuotesAdapter":
        return cls(settings.QUOTES_BASE_URL, http_client, timeout=settings.DEFAULT_TIMEOUT)

    async def get_random_quote(self) -> Envelope:
        return await self.execute(self._fetch_random_quote)

    async def get_quotes_by_author(self, author: str) -> Envelope:
        """Up to five quotes attributed to ``author``."""
        return await self.execute(self._fetch_quotes_by_author, author)

    async def _fetch_random_quote(self) -> Quote:
        payload = await self.get_json("random")
        # Some deployments answer with a one-element list
        if isinstance(payload, list):
            if not payload:
                raise UpstreamError(f"{self.name} API returned no quote", provider=self.key)
            payload = payload[0]
        return self.normalize(payload)

    async def _fetch_quotes_by_author(self, author: str) -> List[Quote]:
        payload = await self.get_json(
            "quotes",
            params={"author": author, "limit": AUTHOR_QUOTES_LIMIT},
        )
        return [self.normalize(item) for item in payload["results"][:AUTHOR_QUOTES_LIMIT]]

    @staticmethod
    def normalize(item: Dict[str, Any]) -> Quote:
        tags = item.get("tags") or []
        return Quote(
            text=item["content"],
            author=item["author"],
            category=tags[0] if tags else DEFAULT_CATEGORY,
        )
