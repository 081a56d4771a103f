"""Project request and response schemas."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ProjectInput(BaseModel):
    """Full set of writable project fields.

    Omitted or ``null`` fields become empty strings, so an update with this
    payload always replaces every field.
    """

    title: str = ""
    description: str = ""
    image_url: str = ""
    github_url: str = Field(
        default="",
        validation_alias=AliasChoices("githubUrl", "gitHubUrl", "github_url"),
    )

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @field_validator("title", "description", "image_url", "github_url", mode="before")
    @classmethod
    def _none_as_empty(cls, value: object) -> object:
        return "" if value is None else value


class ProjectRead(BaseModel):
    """Project as returned by the API."""

    id: int
    title: str
    description: str
    image_url: str
    github_url: str

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
