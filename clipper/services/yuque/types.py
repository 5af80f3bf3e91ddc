"""Data types for Yuque API responses and the in-memory outline."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, NamedTuple

from clipper.services.yuque.constants import TOC_VALUE_SEPARATOR


class RepositoryScope(str, Enum):
    """Which listings a repository enumeration covers."""

    ALL = "all"
    SELF = "self"
    GROUP = "group"


@dataclass
class YuqueUser:
    """Normalized account profile from GET /user."""

    id: int
    login: str
    name: str
    avatar_url: str | None = None
    description: str | None = None


@dataclass
class UserInfo:
    """Profile view handed to callers."""

    name: str
    login: str
    avatar: str | None
    description: str | None
    home_page: str


@dataclass
class YuqueGroup:
    """A group the user can publish into."""

    id: int
    name: str
    login: str | None = None


@dataclass
class YuqueRepository:
    """Repository record as kept internally (namespace included)."""

    id: str
    name: str
    namespace: str
    group_id: str
    group_name: str

    def public(self) -> "Repository":
        """Strip the namespace for the public repository view."""
        return Repository(
            id=self.id,
            name=self.name,
            group_id=self.group_id,
            group_name=self.group_name,
        )


@dataclass
class Repository:
    """Public repository view."""

    id: str
    name: str
    group_id: str
    group_name: str


@dataclass
class OutlineEntry:
    """One row of a repository's flat outline."""

    uuid: str
    type: str
    title: str
    parent_uuid: str | None = None


class TocValue(NamedTuple):
    """Identifier of an outline position: (node uuid, repository id).

    An empty node_id means the repository root.
    """

    node_id: str
    repository_id: str

    @property
    def is_root(self) -> bool:
        return not self.node_id

    def encode(self) -> str:
        """Compound string form used by the picker: "uuid|repositoryId"."""
        return f"{self.node_id}{TOC_VALUE_SEPARATOR}{self.repository_id}"

    @classmethod
    def parse(cls, value: str | None) -> "TocValue":
        """Parse a compound value. Missing or empty input means the root."""
        node_id, _, repository_id = (value or TOC_VALUE_SEPARATOR).partition(
            TOC_VALUE_SEPARATOR
        )
        return cls(node_id=node_id, repository_id=repository_id)


@dataclass
class TocNode:
    """Node of a repository outline tree. The root represents the repository."""

    title: str
    value: TocValue
    children: list["TocNode"] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Tree-select shape: {title, value, children}."""
        return {
            "title": self.title,
            "value": self.value.encode(),
            "children": [child.to_dict() for child in self.children],
        }


@dataclass
class CreateDocumentRequest:
    """Input of a publish operation."""

    repository_id: str
    title: str
    content: str
    path: str | None = None  # TocValue string of the destination
    slug: str | None = None


@dataclass
class PublishResult:
    """Outcome of a successful publish."""

    href: str
    repository_id: str
    document_id: str
    access_token: str
