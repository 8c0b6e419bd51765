from __future__ import annotations

from typing import Optional, Protocol

from .model import Principal


class PrincipalRepository(Protocol):
    """Repository interface for authentication principals."""

    async def get_by_email(self, email: str) -> Optional[Principal]:
        raise NotImplementedError

    async def create(self, *, email: str, password_hash: str) -> Principal:
        raise NotImplementedError

    async def delete_by_user_id(self, user_id: str) -> bool:
        raise NotImplementedError
