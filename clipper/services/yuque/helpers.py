"""
Yuque API helper utilities.

Error response processing, envelope unwrapping and small identity/slug
utilities shared by the read and write operations.
"""

import hashlib
import logging
import re
import uuid
from typing import Any

import httpx

from clipper.services.yuque.constants import SLUG_PATTERN
from clipper.services.yuque.exceptions import RemoteRequestError

logger = logging.getLogger(__name__)

_slug_re = re.compile(SLUG_PATTERN)


def handle_error_response(response: httpx.Response, resource: str) -> None:
    """
    Raise for any non-2xx response from the Yuque API.

    Args:
        response: The HTTP response from Yuque
        resource: Path or name used for error context

    Raises:
        RemoteRequestError: With a message matching the failure kind
    """
    status = response.status_code
    if 200 <= status < 300:
        return
    if status == 401:
        raise RemoteRequestError("Invalid or expired Yuque token", 401)
    if status == 403:
        raise RemoteRequestError(f"Yuque API forbidden: {resource}", 403)
    if status == 404:
        raise RemoteRequestError(f"Yuque resource not found: {resource}", 404)
    if status == 429:
        raise RemoteRequestError("Yuque API rate limit exceeded", 429)
    raise RemoteRequestError(f"Yuque API error: {status} ({resource})", status)


def unwrap_data(payload: Any) -> Any:
    """Return the content of a {"data": ...} envelope, or the payload itself."""
    if isinstance(payload, dict) and "data" in payload:
        return payload["data"]
    return payload


def identity_hash(access_token: str) -> str:
    """Stable identifier derived from an access token."""
    return hashlib.md5(access_token.encode()).hexdigest()


def generate_slug() -> str:
    """Random slug for documents published without one."""
    return uuid.uuid4().hex


def validate_slug(slug: str) -> str:
    """
    Check a user supplied slug.

    Raises:
        ValueError: If the slug does not match SLUG_PATTERN
    """
    if not _slug_re.fullmatch(slug):
        raise ValueError(
            "Slug must be 2-190 characters of ASCII letters, digits, '_', '-' or '.'"
        )
    return slug
