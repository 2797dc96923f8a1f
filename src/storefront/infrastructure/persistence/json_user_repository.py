"""JSON-store-backed implementation of UserRepository."""

from __future__ import annotations

from typing import TYPE_CHECKING

from storefront.domain.model.user import User
from storefront.domain.repository.user_repository import UserRepository

if TYPE_CHECKING:
    from storefront.infrastructure.persistence.json_unit_of_work import JsonUnitOfWork

_COLLECTION = "users"


class JsonUserRepository(UserRepository):

    def __init__(self, uow: JsonUnitOfWork) -> None:
        self._uow = uow

    def get_by_id(self, user_id: int) -> User | None:
        raw = self._uow.record(_COLLECTION, user_id)
        return User(**raw) if raw is not None else None

    def get_by_email(self, email: str) -> User | None:
        for raw in self._uow.records(_COLLECTION):
            if raw["email"].lower() == email.lower():
                return User(**raw)
        return None

    def add(self, user: User) -> None:
        if user.id is None:
            user.id = self._uow.next_id(_COLLECTION)
        self._uow.stage(
            _COLLECTION,
            user.id,
            {
                "id": user.id,
                "username": user.username,
                "email": user.email,
                "address": user.address,
            },
        )
