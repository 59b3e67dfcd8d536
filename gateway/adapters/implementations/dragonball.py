from typing import Any, Dict, Optional

import httpx

from gateway.adapters.interfaces.provider import ProviderAdapter
from gateway.core.config import Settings
from gateway.core.exceptions import NotFoundError
from gateway.domain.models.character import Character
from gateway.domain.models.envelope import Envelope


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


class DragonballAdapter(ProviderAdapter):
    """
    Character lookup from dragonball-api.com.

    The provider is public; DRAGONBALL_API_KEY is optional and, when set, is
    forwarded as an ``X-API-Key`` header.
    """

    key = "dragonball"
    name = "Dragonball"
    operations = ("get_character",)

    def __init__(
        self,
        base_url: str,
        http_client: httpx.AsyncClient,
        api_key: Optional[str] = None,
        timeout: float = 5.0,
    ):
        super().__init__(base_url, http_client, timeout)
        self.api_key = api_key

    @classmethod
    def from_settings(cls, settings: Settings, http_client: httpx.AsyncClient) -> "DragonballAdapter":
        return cls(
            settings.DRAGONBALL_BASE_URL,
            http_client,
            api_key=settings.DRAGONBALL_API_KEY,
            timeout=settings.DEFAULT_TIMEOUT,
        )

    def default_headers(self) -> Dict[str, str]:
        headers = super().default_headers()
        if self.api_key:
            headers["X-API-Key"] = self.api_key
        return headers

    async def get_character(self, character_id: int) -> Envelope:
        return await self.execute(self._fetch_character, character_id)

    async def _fetch_character(self, character_id: int) -> Character:
        payload = await self.get_json(
            str(character_id),
            not_found=NotFoundError("Character", character_id),
        )
        return self.normalize(payload)

    @staticmethod
    def normalize(payload: Dict[str, Any]) -> Character:
        planet = payload.get("originPlanet")
        transformations = payload.get("transformations") or []
        return Character(
            id=payload["id"],
            name=payload["name"],
            ki=_optional_str(payload.get("ki")),
            max_ki=_optional_str(payload.get("maxKi")),
            race=payload.get("race"),
            gender=payload.get("gender"),
            description=payload.get("description"),
            image=payload.get("image"),
            affiliation=payload.get("affiliation"),
            origin_planet=planet.get("name") if isinstance(planet, dict) else None,
            transformations=[t["name"] for t in transformations if isinstance(t, dict) and t.get("name")],
        )
