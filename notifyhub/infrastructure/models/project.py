"""SQLAlchemy models for projects and the resources they own."""

from sqlalchemy import Column, Enum, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from notifyhub.domain.entities import ResourceType
from notifyhub.infrastructure.database import Base


class ProjectModel(Base):
    """Database representation of a hosted project."""

    __tablename__ = "project"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)


class ProjectResourceModel(Base):
    """Index mapping a ``(resource_type, resource_id)`` pair to its project."""

    __tablename__ = "project_resource"
    __table_args__ = (
        UniqueConstraint("resource_type", "resource_id", name="uq_project_resource"),
    )

    id = Column(Integer, primary_key=True, index=True)
    resource_type = Column(Enum(ResourceType, native_enum=False, length=32), nullable=False)
    resource_id = Column(String(64), nullable=False)
    project_id = Column(
        Integer,
        ForeignKey("project.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    project = relationship("ProjectModel", lazy="joined")


__all__ = ["ProjectModel", "ProjectResourceModel"]
