"""
Yuque service package.

Re-exports all public types and classes.
Usage: `from clipper.services.yuque import YuqueDocumentService, TocNode`

Module structure:
- service.py: Main YuqueDocumentService facade
- read_operations.py: Profile, groups, paginated repository listings, outlines
- write_operations.py: Create-then-file publishing
- outline.py: Flat outline to TocNode tree assembly
- http_client.py: httpx-backed RemoteAccessor
- helpers.py: Error handling and slug/identity utilities
- types.py: Data types
- exceptions.py: Custom exceptions
- constants.py: API paths and constants
"""

from clipper.services.yuque.exceptions import (
    InvalidRepositoryError,
    PartialPublishError,
    RemoteRequestError,
    YuqueServiceError,
)
from clipper.services.yuque.helpers import validate_slug
from clipper.services.yuque.http_client import (
    RemoteAccessor,
    YuqueHttpClient,
    close_yuque_client,
    get_yuque_client,
)
from clipper.services.yuque.outline import build_outline
from clipper.services.yuque.read_operations import YuqueReadOperations
from clipper.services.yuque.service import YuqueDocumentService
from clipper.services.yuque.types import (
    CreateDocumentRequest,
    OutlineEntry,
    PublishResult,
    Repository,
    RepositoryScope,
    TocNode,
    TocValue,
    UserInfo,
    YuqueGroup,
    YuqueRepository,
    YuqueUser,
)
from clipper.services.yuque.write_operations import YuqueWriteOperations

__all__ = [
    # Service (main entry point)
    "YuqueDocumentService",
    # Operation classes (for direct use if needed)
    "YuqueReadOperations",
    "YuqueWriteOperations",
    # Remote access
    "RemoteAccessor",
    "YuqueHttpClient",
    # HTTP client lifecycle
    "get_yuque_client",
    "close_yuque_client",
    # Utilities
    "build_outline",
    "validate_slug",
    # Exceptions
    "YuqueServiceError",
    "RemoteRequestError",
    "InvalidRepositoryError",
    "PartialPublishError",
    # Types
    "CreateDocumentRequest",
    "OutlineEntry",
    "PublishResult",
    "Repository",
    "RepositoryScope",
    "TocNode",
    "TocValue",
    "UserInfo",
    "YuqueGroup",
    "YuqueRepository",
    "YuqueUser",
]
