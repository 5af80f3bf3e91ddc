"""
Yuque API read operations.

Provides all read-only operations:
- Account profile and groups
- Offset-paginated repository listings (personal and per group)
- Repository outlines (assembled into TocNode trees)
"""

import logging
from typing import Any

from clipper.config import settings
from clipper.services.yuque.constants import (
    GROUP_REPOS_PATH,
    USER_GROUPS_PATH,
    USER_PATH,
    USER_REPOS_PATH,
)
from clipper.services.yuque.exceptions import RemoteRequestError
from clipper.services.yuque.http_client import RemoteAccessor
from clipper.services.yuque.outline import build_outline, normalize_outline_entry
from clipper.services.yuque.types import (
    RepositoryScope,
    TocNode,
    YuqueGroup,
    YuqueRepository,
    YuqueUser,
)

logger = logging.getLogger(__name__)


class YuqueReadOperations:
    """
    Read-only operations for the Yuque API.

    Every remote call is awaited in sequence: pages, groups and outlines
    are fetched one after another.
    """

    def __init__(self, request: RemoteAccessor, page_size: int | None = None):
        self.request = request
        self.page_size = page_size or settings.yuque_page_size
        self._user: YuqueUser | None = None

    @staticmethod
    def _normalize_user(data: dict[str, Any]) -> YuqueUser:
        """Convert Yuque API response to YuqueUser dataclass."""
        return YuqueUser(
            id=data["id"],
            login=data["login"],
            name=data.get("name") or data["login"],
            avatar_url=data.get("avatar_url"),
            description=data.get("description"),
        )

    async def get_user(self) -> YuqueUser:
        """Fetch the authenticated account. Cached for this instance's lifetime."""
        if self._user is None:
            self._user = self._normalize_user(await self.request.get(USER_PATH))
        else:
            logger.debug(f"Using cached Yuque user {self._user.login}")
        return self._user

    async def get_user_groups(self) -> list[YuqueGroup]:
        """Fetch the groups the user belongs to. Not cached."""
        user = await self.get_user()
        data = await self.request.get(USER_GROUPS_PATH.format(login=user.login))
        return [
            YuqueGroup(id=g["id"], name=g.get("name") or "", login=g.get("login"))
            for g in data or []
        ]

    async def get_repositories_page(
        self, offset: int, is_group: bool, owner_id: str
    ) -> list[dict[str, Any]]:
        """
        Fetch one page of a repository listing.

        A failed page degrades to an empty page, which also ends the
        pagination of that listing.
        """
        path = (GROUP_REPOS_PATH if is_group else USER_REPOS_PATH).format(owner_id=owner_id)
        try:
            page = await self.request.get(path, params={"offset": offset})
        except RemoteRequestError as e:
            logger.warning(f"Repository page {path}?offset={offset} failed, skipping: {e}")
            return []
        logger.debug(f"Fetched {path}?offset={offset}: {len(page or [])} repositories")
        return list(page or [])

    async def get_all_repositories(
        self, is_group: bool, owner_id: str, owner_name: str
    ) -> list[YuqueRepository]:
        """
        Page through one listing.

        A page of exactly page_size rows implies more data; the first
        shorter page (empty included) stops the listing.
        """
        offset = 0
        rows = await self.get_repositories_page(offset, is_group, owner_id)
        page_len = len(rows)
        while page_len == self.page_size:
            offset += self.page_size
            page = await self.get_repositories_page(offset, is_group, owner_id)
            page_len = len(page)
            rows.extend(page)

        return [
            YuqueRepository(
                id=str(row["id"]),
                name=row.get("name") or "",
                namespace=row.get("namespace") or "",
                group_id=str(owner_id),
                group_name=owner_name,
            )
            for row in rows
        ]

    async def list_repositories(
        self, scope: RepositoryScope = RepositoryScope.ALL
    ) -> list[YuqueRepository]:
        """
        Enumerate every repository the user can publish into.

        Personal repositories come first, then each group's repositories
        in the order the groups endpoint returned the groups.
        """
        repositories: list[YuqueRepository] = []
        if scope != RepositoryScope.GROUP:
            user = await self.get_user()
            repositories.extend(
                await self.get_all_repositories(False, str(user.id), user.name)
            )
        if scope != RepositoryScope.SELF:
            for group in await self.get_user_groups():
                repositories.extend(
                    await self.get_all_repositories(True, str(group.id), group.name)
                )

        logger.info(f"Enumerated {len(repositories)} Yuque repositories (scope={scope.value})")
        return repositories

    async def get_outline(self, repository_id: str, root_label: str) -> TocNode:
        """Fetch a repository's full outline and assemble it into a tree."""
        url = settings.yuque_outline_url_template.format(book_id=repository_id)
        data = await self.request.get(url)
        rows = data.get("toc", []) if isinstance(data, dict) else data or []
        entries = [normalize_outline_entry(row) for row in rows]
        return build_outline(entries, repository_id, root_label)
