"""SQLAlchemy models for persisted notification events."""

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Index, Integer, String, Table, Text
from sqlalchemy.orm import relationship

from notifyhub.domain.entities import EventType, ResourceType
from notifyhub.infrastructure.database import Base

notification_event_receiver_table = Table(
    "notification_event_receiver",
    Base.metadata,
    Column(
        "notification_event_id",
        Integer,
        ForeignKey("notification_event.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "user_id",
        Integer,
        ForeignKey("user.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class NotificationEventModel(Base):
    """Database representation of a notification event."""

    __tablename__ = "notification_event"
    __table_args__ = (
        Index("ix_notification_event_resource", "resource_type", "resource_id", "created"),
        # Merged events must never take over the id of the sibling they replace.
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=True)
    message = Column(Text, nullable=True)
    sender_id = Column(Integer, nullable=False)
    created = Column(DateTime(), nullable=False)
    url_to_view = Column(String(255), nullable=True)
    resource_type = Column(Enum(ResourceType, native_enum=False, length=32), nullable=False)
    resource_id = Column(String(64), nullable=False)
    event_type = Column(Enum(EventType, native_enum=False, length=40), nullable=False)
    old_value = Column(Text, nullable=True)
    new_value = Column(Text, nullable=True)

    receivers = relationship(
        "UserModel",
        secondary=notification_event_receiver_table,
        lazy="selectin",
    )
    notification_mail = relationship(
        "NotificationMailModel",
        back_populates="notification_event",
        uselist=False,
        cascade="all, delete-orphan",
        lazy="joined",
    )


class NotificationMailModel(Base):
    """Outbound mail placeholder created together with its event."""

    __tablename__ = "notification_mail"

    id = Column(Integer, primary_key=True, index=True)
    notification_event_id = Column(
        Integer,
        ForeignKey("notification_event.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )

    notification_event = relationship(
        "NotificationEventModel", back_populates="notification_mail"
    )


__all__ = [
    "NotificationEventModel",
    "NotificationMailModel",
    "notification_event_receiver_table",
]
