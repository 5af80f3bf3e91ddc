"""Yuque service dependencies.

One YuqueDocumentService is kept per access token so that the cached
profile, repositories and outlines survive between requests. Services
share the pooled HTTP client, so dropping one from the registry leaves
no connections behind.
"""

import logging
from typing import Annotated

from cachetools import TTLCache  # type: ignore[import-untyped]
from fastapi import Depends, Header, HTTPException, status

from clipper.config import settings
from clipper.services.yuque import YuqueDocumentService
from clipper.services.yuque.helpers import identity_hash

logger = logging.getLogger(__name__)

_services: TTLCache[str, YuqueDocumentService] = TTLCache(
    maxsize=settings.service_registry_maxsize,
    ttl=settings.service_registry_ttl,
)


def get_document_service(
    x_auth_token: Annotated[str | None, Header()] = None,
) -> YuqueDocumentService:
    """Return the document service bound to the request's Yuque token."""
    if not x_auth_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing X-Auth-Token header",
        )

    key = identity_hash(x_auth_token)
    service = _services.get(key)
    if service is None:
        logger.debug(f"Creating Yuque document service for {key}")
        service = YuqueDocumentService(x_auth_token)
    # Re-insert so the TTL counts from the last use, not from creation
    _services[key] = service
    return service


def clear_services() -> None:
    """Drop every cached service. Useful for testing or on shutdown."""
    _services.clear()


DocumentService = Annotated[YuqueDocumentService, Depends(get_document_service)]
