from typing import Any, Dict, List, Optional

import httpx

from gateway.adapters.interfaces.provider import ProviderAdapter
from gateway.core.config import Settings
from gateway.core.exceptions import NotFoundError
from gateway.domain.models.envelope import Envelope
from gateway.domain.models.user import Address, Company, Geo, Post, User


class UsersAdapter(ProviderAdapter):
    """User directory and posts from JSONPlaceholder."""

    key = "users"
    name = "Users"
    operations = ("get_users", "get_user", "get_user_posts")

    @classmethod
    def from_settings(cls, settings: Settings, http_client: httpx.AsyncClient) -> "UsersAdapter":
        return cls(settings.USERS_BASE_URL, http_client, timeout=settings.DEFAULT_TIMEOUT)

    async def get_users(self, limit: Optional[int] = None) -> Envelope:
        """All users, truncated to ``limit`` when it is positive."""
        return await self.execute(self._fetch_users, limit)

    async def get_user(self, user_id: int) -> Envelope:
        return await self.execute(self._fetch_user, user_id)

    async def get_user_posts(self, user_id: int) -> Envelope:
        return await self.execute(self._fetch_user_posts, user_id)

    async def _fetch_users(self, limit: Optional[int]) -> List[User]:
        payload = await self.get_json("users")
        if limit and limit > 0:
            payload = payload[:limit]
        return [self.normalize_user(item) for item in payload]

    async def _fetch_user(self, user_id: int) -> User:
        payload = await self.get_json(f"users/{user_id}", not_found=NotFoundError("User", user_id))
        return self.normalize_user(payload)

    async def _fetch_user_posts(self, user_id: int) -> List[Post]:
        payload = await self.get_json(f"users/{user_id}/posts", not_found=NotFoundError("User", user_id))
        return [self.normalize_post(item) for item in payload]

    @staticmethod
    def normalize_user(item: Dict[str, Any]) -> User:
        address = item["address"]
        geo = address["geo"]
        company = item.get("company") or {}
        return User(
            id=item["id"],
            name=item["name"],
            username=item["username"],
            email=item["email"],
            address=Address(
                street=address["street"],
                suite=address["suite"],
                city=address["city"],
                zipcode=address["zipcode"],
                geo=Geo(lat=geo["lat"], lng=geo["lng"]),
            ),
            phone=item.get("phone", ""),
            website=item.get("website", ""),
            company=Company(
                name=company.get("name", ""),
                catch_phrase=company.get("catchPhrase", ""),
                bs=company.get("bs", ""),
            ),
        )

    @staticmethod
    def normalize_post(item: Dict[str, Any]) -> Post:
        return Post(
            user_id=item["userId"],
            id=item["id"],
            title=item["title"],
            body=item["body"],
        )
