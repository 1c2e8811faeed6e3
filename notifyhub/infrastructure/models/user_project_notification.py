"""SQLAlchemy model for per-project notification preferences."""

from sqlalchemy import Boolean, Column, Enum, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.sql import expression

from notifyhub.domain.entities import EventType
from notifyhub.infrastructure.database import Base


class UserProjectNotificationModel(Base):
    """A user's choice for one event type in one project."""

    __tablename__ = "user_project_notification"
    __table_args__ = (
        UniqueConstraint(
            "user_id", "project_id", "event_type", name="uq_user_project_notification"
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    project_id = Column(
        Integer, ForeignKey("project.id", ondelete="CASCADE"), nullable=False
    )
    event_type = Column(Enum(EventType, native_enum=False, length=40), nullable=False)
    allowed = Column(
        Boolean, nullable=False, default=True, server_default=expression.true()
    )


__all__ = ["UserProjectNotificationModel"]
