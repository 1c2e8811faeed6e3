"""Persistence layer for user data."""

from __future__ import annotations

from sqlalchemy.orm import Session

from notifyhub.domain.entities import User
from notifyhub.infrastructure.models import UserModel


class UserRepository:
    """Provide lookup and creation for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def get_by_login_id(self, login_id: str) -> User | None:
        model = (
            self.session.query(UserModel)
            .filter(UserModel.login_id == login_id)
            .one_or_none()
        )
        return self._to_entity(model) if model else None

    def create(self, user: User) -> User:
        if self.get_by_login_id(user.login_id) is not None:
            msg = f"Login id '{user.login_id}' is already taken"
            raise ValueError(msg)
        model = UserModel(login_id=user.login_id, name=user.name, email=user.email)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            login_id=model.login_id,
            name=model.name,
            email=model.email,
        )


__all__ = ["UserRepository"]
