"""Errors raised by the domain layer."""

from __future__ import annotations

from .entities import ResourceType


class ResourceNotFoundError(LookupError):
    """Raised when an event is submitted for a resource that does not exist."""

    def __init__(self, resource_type: ResourceType, resource_id: str) -> None:
        self.resource_type = resource_type
        self.resource_id = resource_id
        super().__init__(
            f"Resource {resource_type.value}:{resource_id} was not found"
        )


__all__ = ["ResourceNotFoundError"]
