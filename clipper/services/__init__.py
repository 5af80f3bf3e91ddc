# Services package

from clipper.services.yuque import YuqueDocumentService

__all__ = [
    "YuqueDocumentService",
]
