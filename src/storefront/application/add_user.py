"""Application service: Add User use case."""

from __future__ import annotations

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.user import User
from storefront.domain.repository.unit_of_work import UnitOfWork, user_email_key


class AddUserHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, username: str, email: str, address: str | None = None) -> User:
        if not username or not username.strip():
            raise ValidationError("Username is required")
        if not email or "@" not in email:
            raise ValidationError(f"Invalid email: {email!r}")

        with self._uow as uow, uow.lock(user_email_key(email)):
            if uow.users.get_by_email(email) is not None:
                raise ValidationError(f"A user with email '{email}' already exists")
            user = User(id=None, username=username.strip(), email=email.strip(), address=address)
            uow.users.add(user)
            uow.commit()

        return user
