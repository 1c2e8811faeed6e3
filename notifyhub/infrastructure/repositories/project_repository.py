"""Persistence helpers for projects and the resource index."""

from __future__ import annotations

from sqlalchemy.orm import Session

from notifyhub.domain.entities import Project, ResourceType
from notifyhub.infrastructure.models import ProjectModel, ProjectResourceModel


class ProjectRepository:
    """Provide CRUD operations for :class:`Project` entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, project_id: int) -> Project | None:
        model = self.session.get(ProjectModel, project_id)
        return self._to_entity(model) if model else None

    def create(self, project: Project) -> Project:
        model = ProjectModel(name=project.name)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: ProjectModel) -> Project:
        return Project(id=model.id, name=model.name)


class ProjectResourceRepository:
    """Locate the project owning a resource."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def resolve(self, resource_type: ResourceType, resource_id: str) -> Project | None:
        model = self._get_model(resource_type, resource_id)
        if model is None:
            return None
        return ProjectRepository._to_entity(model.project)

    def register(
        self, resource_type: ResourceType, resource_id: str, project_id: int
    ) -> Project:
        """Record that ``project_id`` owns the resource, replacing any previous owner."""

        if self.session.get(ProjectModel, project_id) is None:
            msg = f"Project with id {project_id} not found"
            raise ValueError(msg)

        model = self._get_model(resource_type, resource_id)
        if model is None:
            model = ProjectResourceModel(
                resource_type=resource_type, resource_id=resource_id
            )
        model.project_id = project_id
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return ProjectRepository._to_entity(model.project)

    def unregister(self, resource_type: ResourceType, resource_id: str) -> None:
        model = self._get_model(resource_type, resource_id)
        if model is None:
            return
        self.session.delete(model)
        self.session.commit()

    def _get_model(
        self, resource_type: ResourceType, resource_id: str
    ) -> ProjectResourceModel | None:
        return (
            self.session.query(ProjectResourceModel)
            .filter(ProjectResourceModel.resource_type == resource_type)
            .filter(ProjectResourceModel.resource_id == resource_id)
            .one_or_none()
        )


__all__ = ["ProjectRepository", "ProjectResourceRepository"]
