"""Domain entities for projects and the subjects notifications point at."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Project:
    """A hosted project owning issues, postings and pull requests."""

    id: int | None
    name: str


@dataclass(frozen=True)
class Commit:
    short_id: str
    short_message: str


@dataclass(frozen=True)
class PullRequest:
    id: int
    title: str
    to_project: Project


@dataclass(frozen=True)
class Posting:
    """An issue or board post, numbered per project."""

    number: int
    title: str
    project: Project


__all__ = ["Commit", "Posting", "Project", "PullRequest"]
