"""
Yuque API write operations.

Publishing is two remote steps:
1. Create the document in the target repository
2. File it under the chosen outline node (appendByDocs move)

Nothing is filed if step 1 fails. If step 2 fails the document already
exists and is reported through PartialPublishError.
"""

import logging
from collections.abc import Sequence
from typing import Any

from clipper.config import settings
from clipper.services.yuque.constants import (
    CREATE_DOC_PATH,
    MOVE_ACTION_APPEND_BY_DOCS,
    MOVE_DOC_PATH,
)
from clipper.services.yuque.exceptions import (
    InvalidRepositoryError,
    PartialPublishError,
    RemoteRequestError,
)
from clipper.services.yuque.helpers import generate_slug
from clipper.services.yuque.http_client import RemoteAccessor
from clipper.services.yuque.types import (
    CreateDocumentRequest,
    PublishResult,
    TocValue,
    YuqueRepository,
)

logger = logging.getLogger(__name__)


class YuqueWriteOperations:
    """Write operations for the Yuque API."""

    def __init__(self, request: RemoteAccessor, access_token: str):
        self.request = request
        self.access_token = access_token

    async def create_doc(
        self, repository_id: str, title: str, body: str, slug: str
    ) -> dict[str, Any]:
        """Create a private document. Returns the created document payload."""
        return await self.request.post(
            CREATE_DOC_PATH.format(repository_id=repository_id),
            json={
                "title": title,
                "slug": slug,
                "body": body,
                "private": True,
            },
        )

    async def move_docs(
        self, repository_id: str, target_uuid: str, doc_ids: Sequence[int | str]
    ) -> Any:
        """Append documents under an outline node (empty target = root)."""
        logger.debug(f"Moving docs {list(doc_ids)} to '{target_uuid}' in repository {repository_id}")
        return await self.request.put(
            MOVE_DOC_PATH.format(repository_id=repository_id),
            json={
                "action": MOVE_ACTION_APPEND_BY_DOCS,
                "doc_ids": list(doc_ids),
                "target_uuid": target_uuid,
            },
        )

    async def publish(
        self,
        info: CreateDocumentRequest,
        repositories: Sequence[YuqueRepository],
    ) -> PublishResult:
        """
        Create a document and file it into the repository outline.

        Args:
            info: Title, content, target repository, destination path, slug
            repositories: Last enumerated repositories; the target must be one

        Returns:
            PublishResult with the public document URL

        Raises:
            InvalidRepositoryError: Target not in repositories (no remote call made)
            RemoteRequestError: Creation failed (nothing was filed)
            PartialPublishError: Created but filing failed
        """
        repository = next((r for r in repositories if r.id == info.repository_id), None)
        if repository is None:
            raise InvalidRepositoryError(info.repository_id)

        parent_uuid = TocValue.parse(info.path).node_id
        slug = info.slug or generate_slug()

        created = await self.create_doc(repository.id, info.title, info.content, slug)
        document_id = created["id"]
        created_slug = created.get("slug") or slug
        href = f"{settings.yuque_host.rstrip('/')}/{repository.namespace}/{created_slug}"

        try:
            await self.move_docs(repository.id, parent_uuid, [document_id])
        except RemoteRequestError as e:
            logger.warning(
                f"Document {document_id} created in {repository.id} but filing failed: {e}"
            )
            raise PartialPublishError(
                repository_id=repository.id,
                document_id=str(document_id),
                slug=created_slug,
                href=href,
                cause=e,
            ) from e

        logger.info(f"Published document {document_id} to {repository.namespace}")
        return PublishResult(
            href=href,
            repository_id=repository.id,
            document_id=str(document_id),
            access_token=self.access_token,
        )
