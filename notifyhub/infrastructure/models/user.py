"""SQLAlchemy model for the user table."""

from sqlalchemy import Column, Integer, String

from notifyhub.infrastructure.database import Base


class UserModel(Base):
    """Database representation of a platform user."""

    __tablename__ = "user"

    id = Column(Integer, primary_key=True, index=True)
    login_id = Column(String(50), nullable=False, unique=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(120), nullable=True)


__all__ = ["UserModel"]
