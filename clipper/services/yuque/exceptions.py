"""Exceptions for Yuque service."""


class YuqueServiceError(Exception):
    """Base error for the Yuque adapter."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class RemoteRequestError(YuqueServiceError):
    """Non-2xx response or transport failure from the Yuque API."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code  # None for transport failures
        super().__init__(message)


class InvalidRepositoryError(YuqueServiceError):
    """Target repository is not part of the last enumerated set.

    Recoverable: list repositories again and retry.
    """

    def __init__(self, repository_id: str):
        self.repository_id = repository_id
        super().__init__(f"Illegal repository id: {repository_id}")


class PartialPublishError(YuqueServiceError):
    """Document was created but could not be filed into the outline.

    The document exists on Yuque at its default position and is not
    rolled back. Callers get enough detail to offer a manual fix.
    """

    def __init__(
        self,
        repository_id: str,
        document_id: str,
        slug: str,
        href: str,
        cause: RemoteRequestError,
    ):
        self.repository_id = repository_id
        self.document_id = document_id
        self.slug = slug
        self.href = href
        self.cause = cause
        super().__init__(
            f"Document {document_id} created in repository {repository_id} "
            f"but filing failed: {cause.message}"
        )
