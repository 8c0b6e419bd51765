from __future__ import annotations

from typing import Optional

from ..core.exceptions import AlreadyExistsError
from ..database.memory_store import InMemoryDatabase, db_call
from .model import Principal
from .repository import PrincipalRepository


class InMemoryPrincipalRepository(PrincipalRepository):
    def __init__(self, db: InMemoryDatabase):
        self._db = db

    async def get_by_email(self, email: str) -> Optional[Principal]:
        async with db_call(self._db) as db:
            return db.principals.get((email or "").strip().lower())

    async def create(self, *, email: str, password_hash: str) -> Principal:
        async with db_call(self._db) as db:
            key = email.strip().lower()
            if key in db.principals:
                raise AlreadyExistsError("User already exists")
            principal = Principal(user_id=db.next_id("user"), email=email.strip(), password_hash=password_hash)
            db.principals[key] = principal
            return principal

    async def delete_by_user_id(self, user_id: str) -> bool:
        async with db_call(self._db) as db:
            for key, principal in list(db.principals.items()):
                if principal.user_id == user_id:
                    del db.principals[key]
                    return True
            return False
