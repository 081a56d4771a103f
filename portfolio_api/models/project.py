"""Project model."""

from __future__ import annotations

from sqlalchemy import Column, Text
from sqlmodel import Field, SQLModel


class Project(SQLModel, table=True):
    """Portfolio project table."""

    __tablename__ = "projects"
    __table_args__ = {"sqlite_autoincrement": True}

    id: int | None = Field(default=None, primary_key=True)
    title: str = Field(default="", sa_column=Column(Text, nullable=False, server_default=""))
    description: str = Field(
        default="", sa_column=Column(Text, nullable=False, server_default="")
    )
    image_url: str = Field(default="", sa_column=Column(Text, nullable=False, server_default=""))
    github_url: str = Field(
        default="", sa_column=Column(Text, nullable=False, server_default="")
    )
