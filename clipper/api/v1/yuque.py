"""
Yuque endpoints for picking a destination and publishing documents.
"""

import logging
from dataclasses import asdict

from fastapi import APIRouter, HTTPException, status

from clipper.api.deps import DocumentService
from clipper.schemas.yuque import (
    CreateDocumentBody,
    PublishResultResponse,
    RepositoryResponse,
    TocNodeResponse,
    UserInfoResponse,
)
from clipper.services.yuque import (
    CreateDocumentRequest,
    InvalidRepositoryError,
    PartialPublishError,
    RemoteRequestError,
)

router = APIRouter(prefix="/yuque", tags=["yuque"])
logger = logging.getLogger(__name__)


def _remote_error(e: RemoteRequestError) -> HTTPException:
    """Map an upstream failure to an HTTP error."""
    if e.status_code == 401:
        return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message)
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)


@router.get("/user", response_model=UserInfoResponse)
async def get_user(service: DocumentService) -> UserInfoResponse:
    """Profile of the account behind the token."""
    try:
        info = await service.get_user_info()
    except RemoteRequestError as e:
        raise _remote_error(e) from e
    return UserInfoResponse(**asdict(info))


@router.get("/repositories", response_model=list[RepositoryResponse])
async def list_repositories(service: DocumentService) -> list[RepositoryResponse]:
    """Enumerate repositories. Also builds the outlines on first use."""
    try:
        repositories = await service.get_repositories()
    except RemoteRequestError as e:
        raise _remote_error(e) from e
    return [RepositoryResponse(**asdict(r)) for r in repositories]


@router.get("/tocs", response_model=list[TocNodeResponse])
async def list_tocs(service: DocumentService) -> list[dict]:
    """Outline trees, empty until repositories have been listed."""
    return [toc.to_dict() for toc in service.tocs or []]


@router.post(
    "/documents",
    response_model=PublishResultResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_document(
    body: CreateDocumentBody, service: DocumentService
) -> PublishResultResponse:
    """Create a document and file it under the chosen outline node."""
    try:
        result = await service.create_document(
            CreateDocumentRequest(
                repository_id=body.repository_id,
                title=body.title,
                content=body.content,
                path=body.path,
                slug=body.slug,
            )
        )
    except InvalidRepositoryError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
    except PartialPublishError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={
                "message": e.message,
                "document_id": e.document_id,
                "href": e.href,
            },
        ) from e
    except RemoteRequestError as e:
        raise _remote_error(e) from e

    return PublishResultResponse(**asdict(result))
