"""Project domain services."""

from __future__ import annotations

from collections.abc import Sequence

from sqlmodel import Session

from portfolio_api.models.project import Project
from portfolio_api.repositories import project_repo
from portfolio_api.schemas.project import ProjectInput


def list_projects(session: Session) -> Sequence[Project]:
    """Return every project."""

    return project_repo.list_projects(session)


def get_project(session: Session, project_id: int) -> Project | None:
    """Return a project or ``None``."""

    return project_repo.get_project_by_id(session, project_id)


def create_project(session: Session, input_data: ProjectInput) -> Project:
    """Create a project from a full field set."""

    return project_repo.create_project(session, input_data)


def update_project(session: Session, project_id: int, input_data: ProjectInput) -> Project | None:
    """Replace all fields of a project, or return ``None`` if it does not exist."""

    return project_repo.update_project(session, project_id, input_data)


def delete_project(session: Session, project_id: int) -> bool:
    """Delete a project; ``False`` means it was not found."""

    return project_repo.delete_project(session, project_id)
