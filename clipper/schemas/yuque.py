"""Pydantic schemas for Yuque endpoints."""

from pydantic import BaseModel, field_validator

from clipper.services.yuque.helpers import validate_slug


class UserInfoResponse(BaseModel):
    """Response for GET /yuque/user."""

    name: str
    login: str
    avatar: str | None
    description: str | None
    home_page: str


class RepositoryResponse(BaseModel):
    """A repository the user can publish into (namespace not exposed)."""

    id: str
    name: str
    group_id: str
    group_name: str


class TocNodeResponse(BaseModel):
    """Outline node in tree-select shape."""

    title: str
    value: str  # "<node uuid>|<repository id>", "|<repository id>" for the root
    children: list["TocNodeResponse"] = []


class CreateDocumentBody(BaseModel):
    """Request body for POST /yuque/documents."""

    repository_id: str
    title: str
    content: str
    path: str | None = None
    slug: str | None = None

    @field_validator("slug")
    @classmethod
    def check_slug(cls, v: str | None) -> str | None:
        # Empty means "generate one"
        if not v:
            return None
        return validate_slug(v)


class PublishResultResponse(BaseModel):
    """Response for POST /yuque/documents."""

    href: str
    repository_id: str
    document_id: str
    access_token: str
