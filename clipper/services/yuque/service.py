"""
Yuque document service facade.

Owns the per-token state: the cached account profile, the last
enumerated repositories and the outline trees. Remote access goes
through an injected RemoteAccessor.
"""

import logging

from clipper.config import settings
from clipper.services.yuque.helpers import identity_hash
from clipper.services.yuque.http_client import RemoteAccessor, YuqueHttpClient
from clipper.services.yuque.read_operations import YuqueReadOperations
from clipper.services.yuque.types import (
    CreateDocumentRequest,
    PublishResult,
    Repository,
    RepositoryScope,
    TocNode,
    UserInfo,
    YuqueRepository,
)
from clipper.services.yuque.write_operations import YuqueWriteOperations

logger = logging.getLogger(__name__)


class YuqueDocumentService:
    """Document service for publishing into Yuque repositories."""

    def __init__(
        self,
        access_token: str,
        repository_type: RepositoryScope | str | None = None,
        request: RemoteAccessor | None = None,
    ):
        self.access_token = access_token
        self.repository_type = RepositoryScope(
            repository_type or settings.default_repository_scope
        )
        self.request = request or YuqueHttpClient(access_token)
        self._reader = YuqueReadOperations(self.request)
        self._writer = YuqueWriteOperations(self.request, access_token)
        self.repositories: list[YuqueRepository] = []
        # Built on the first repository listing only, never refreshed
        self.tocs: list[TocNode] | None = None

    def get_id(self) -> str:
        """Stable identifier of this account (hash of the token)."""
        return identity_hash(self.access_token)

    async def get_user_info(self) -> UserInfo:
        """Profile of the authenticated account."""
        user = await self._reader.get_user()
        return UserInfo(
            name=user.name,
            login=user.login,
            avatar=user.avatar_url,
            description=user.description,
            home_page=f"{settings.yuque_host.rstrip('/')}/{user.login}",
        )

    async def get_repositories(self) -> list[Repository]:
        """
        Enumerate repositories and remember them for publishing.

        The repository list is refreshed on every call. Outlines are built
        for the repositories of the first call only; later calls keep the
        existing trees even when the repository list changed.
        """
        repositories = await self._reader.list_repositories(self.repository_type)
        self.repositories = repositories

        if self.tocs is None:
            tocs = []
            for repository in repositories:
                tocs.append(await self._reader.get_outline(repository.id, repository.name))
            self.tocs = tocs

        return [repository.public() for repository in repositories]

    async def create_document(self, info: CreateDocumentRequest) -> PublishResult:
        """Publish a document into a previously enumerated repository."""
        return await self._writer.publish(info, self.repositories)

