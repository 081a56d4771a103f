"""Database access helpers for projects."""

from __future__ import annotations

from collections.abc import Sequence

from sqlmodel import Session, col, select

from portfolio_api.db.session import transaction
from portfolio_api.models.project import Project
from portfolio_api.schemas.project import ProjectInput


def list_projects(session: Session) -> Sequence[Project]:
    """Return all projects in storage order."""

    return session.exec(select(Project).order_by(col(Project.id).asc())).all()


def get_project_by_id(session: Session, project_id: int) -> Project | None:
    """Return project by primary key."""

    return session.get(Project, project_id)


def create_project(session: Session, fields: ProjectInput) -> Project:
    """Persist a new project and return it with its assigned id."""

    project = Project(
        title=fields.title,
        description=fields.description,
        image_url=fields.image_url,
        github_url=fields.github_url,
    )
    with transaction(session):
        session.add(project)
    session.refresh(project)
    return project


def update_project(session: Session, project_id: int, fields: ProjectInput) -> Project | None:
    """Overwrite every text field of a project, or return ``None`` if absent."""

    with transaction(session):
        project = session.get(Project, project_id, with_for_update=True)
        if project is None:
            return None
        project.title = fields.title
        project.description = fields.description
        project.image_url = fields.image_url
        project.github_url = fields.github_url
        session.add(project)
    session.refresh(project)
    return project


def delete_project(session: Session, project_id: int) -> bool:
    """Hard-delete a project. Returns ``False`` when it does not exist."""

    with transaction(session):
        project = session.get(Project, project_id, with_for_update=True)
        if project is None:
            return False
        session.delete(project)
    return True
