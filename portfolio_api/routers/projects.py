"""Project routes. Reads are public; writes are gated by the auth guard."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlmodel import Session

from portfolio_api.db.session import get_session
from portfolio_api.schemas.project import ProjectInput, ProjectRead
from portfolio_api.services import project_service

router = APIRouter(prefix="/projects")


@router.get("", response_model=list[ProjectRead])
def list_projects(session: Annotated[Session, Depends(get_session)]):
    return project_service.list_projects(session)


@router.get("/{id}", response_model=ProjectRead)
def get_project(id: int, session: Annotated[Session, Depends(get_session)]):
    project = project_service.get_project(session, id)
    if project is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return project


@router.post("", response_model=ProjectRead, status_code=status.HTTP_201_CREATED)
def create_project(
    project_input: ProjectInput,
    response: Response,
    session: Annotated[Session, Depends(get_session)],
):
    project = project_service.create_project(session, project_input)
    response.headers["Location"] = f"/projects/{project.id}"
    return project


@router.put("/{id}", response_model=ProjectRead)
def update_project(
    id: int,
    project_input: ProjectInput,
    session: Annotated[Session, Depends(get_session)],
):
    project = project_service.update_project(session, id, project_input)
    if project is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return project


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_project(id: int, session: Annotated[Session, Depends(get_session)]):
    if not project_service.delete_project(session, id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
