"""Unit tests for the per-token document service dependency."""

from __future__ import annotations

import pytest
from cachetools import TTLCache
from fastapi import HTTPException

import clipper.api.deps as deps
from clipper.services.yuque import YuqueDocumentService
from clipper.services.yuque.http_client import get_yuque_client


@pytest.fixture(autouse=True)
def _clear_registry():
    deps.clear_services()
    yield
    deps.clear_services()


@pytest.fixture
def clock(monkeypatch):
    """Swap the registry for a small one driven by a manual clock."""
    now = [0.0]
    monkeypatch.setattr(deps, "_services", TTLCache(maxsize=1, ttl=10, timer=lambda: now[0]))
    return now


class TestGetDocumentService:
    def test_missing_token_raises_401(self):
        with pytest.raises(HTTPException) as exc_info:
            deps.get_document_service(None)

        assert exc_info.value.status_code == 401

    def test_same_token_reuses_service(self):
        a = deps.get_document_service("token-a")
        b = deps.get_document_service("token-a")

        assert a is b
        assert isinstance(a, YuqueDocumentService)

    def test_different_tokens_get_separate_services(self):
        a = deps.get_document_service("token-a")
        b = deps.get_document_service("token-b")

        assert a is not b
        assert a.get_id() != b.get_id()

    def test_services_share_the_pooled_client(self):
        a = deps.get_document_service("token-a")
        b = deps.get_document_service("token-b")

        assert a.request.client is get_yuque_client()
        assert b.request.client is a.request.client


class TestRegistryEviction:
    """Dropping a service from the registry leaves no connection pool behind."""

    def test_evicted_service_holds_no_own_client(self, clock):
        a = deps.get_document_service("token-a")
        deps.get_document_service("token-b")

        assert len(deps._services) == 1
        assert a.request.client is get_yuque_client()
        assert not a.request.client.is_closed
        assert deps.get_document_service("token-a") is not a

    def test_use_refreshes_ttl(self, clock):
        a = deps.get_document_service("token-a")

        clock[0] = 8
        assert deps.get_document_service("token-a") is a
        clock[0] = 15
        assert deps.get_document_service("token-a") is a

    def test_idle_service_expires(self, clock):
        a = deps.get_document_service("token-a")

        clock[0] = 11

        assert deps.get_document_service("token-a") is not a
