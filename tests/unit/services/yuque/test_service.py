"""Unit tests for the Yuque document service facade."""

from __future__ import annotations

import hashlib

import pytest

from clipper.services.yuque.exceptions import InvalidRepositoryError
from clipper.services.yuque.http_client import YuqueHttpClient
from clipper.services.yuque.service import YuqueDocumentService
from clipper.services.yuque.types import (
    CreateDocumentRequest,
    Repository,
    RepositoryScope,
)
from tests.helpers.yuque_fakes import (
    TOKEN,
    FakeAccessor,
    repo_json,
    toc_json,
    toc_url,
    user_json,
)


def _accessor() -> FakeAccessor:
    return (
        FakeAccessor()
        .on("GET", "user", user_json())
        .on("GET", "users/1001/repos", [repo_json(42, "Handbook", "octo/handbook")])
        .on("GET", "users/octo/groups", [{"id": 9, "name": "Team", "login": "team"}])
        .on("GET", "groups/9/repos", [repo_json(7, "Wiki", "team/wiki")])
        .on("GET", toc_url(42), {"toc": [toc_json("a", "Intro")]})
        .on("GET", toc_url(7), {"toc": []})
        .on("POST", "repos/42/docs", {"id": 555, "slug": "hello"})
        .on("PUT", "repos/42/toc", [])
    )


class TestIdentity:
    def test_get_id_is_md5_of_token(self):
        service = YuqueDocumentService(TOKEN, request=FakeAccessor())

        assert service.get_id() == hashlib.md5(TOKEN.encode()).hexdigest()

    def test_default_scope_and_accessor(self):
        service = YuqueDocumentService(TOKEN)

        assert service.repository_type is RepositoryScope.ALL
        assert isinstance(service.request, YuqueHttpClient)

    def test_scope_accepts_string(self):
        service = YuqueDocumentService(TOKEN, repository_type="group", request=FakeAccessor())

        assert service.repository_type is RepositoryScope.GROUP


class TestGetUserInfo:
    @pytest.mark.anyio
    async def test_returns_profile_with_home_page(self):
        service = YuqueDocumentService(TOKEN, request=_accessor())

        info = await service.get_user_info()

        assert info.name == "Octo Cat"
        assert info.login == "octo"
        assert info.avatar == "https://cdn.yuque.com/avatar.png"
        assert info.description == "Writes things"
        assert info.home_page == "https://www.yuque.com/octo"

    @pytest.mark.anyio
    async def test_second_call_uses_cache(self):
        accessor = _accessor()
        service = YuqueDocumentService(TOKEN, request=accessor)

        await service.get_user_info()
        await service.get_user_info()

        assert len(accessor.calls_to("GET", "user")) == 1


class TestGetRepositories:
    @pytest.mark.anyio
    async def test_returns_public_view_without_namespace(self):
        service = YuqueDocumentService(TOKEN, request=_accessor())

        repos = await service.get_repositories()

        assert repos == [
            Repository(id="42", name="Handbook", group_id="1001", group_name="Octo Cat"),
            Repository(id="7", name="Wiki", group_id="9", group_name="Team"),
        ]
        assert not hasattr(repos[0], "namespace")
        assert service.repositories[0].namespace == "octo/handbook"

    @pytest.mark.anyio
    async def test_builds_one_outline_per_repository(self):
        service = YuqueDocumentService(TOKEN, request=_accessor())

        await service.get_repositories()

        assert [toc.title for toc in service.tocs] == ["Handbook", "Wiki"]
        assert [toc.value.encode() for toc in service.tocs] == ["|42", "|7"]
        assert service.tocs[0].children[0].value.encode() == "a|42"

    @pytest.mark.anyio
    async def test_tocs_empty_before_listing(self):
        service = YuqueDocumentService(TOKEN, request=_accessor())

        assert service.tocs is None

    @pytest.mark.anyio
    async def test_repositories_refresh_but_outlines_do_not(self):
        accessor = _accessor()
        service = YuqueDocumentService(TOKEN, request=accessor)
        await service.get_repositories()

        accessor.on(
            "GET",
            "users/1001/repos",
            [repo_json(42, "Handbook", "octo/handbook"), repo_json(43, "New", "octo/new")],
        )
        repos = await service.get_repositories()

        assert [r.id for r in repos] == ["42", "43", "7"]
        assert [r.id for r in service.repositories] == ["42", "43", "7"]
        assert [toc.title for toc in service.tocs] == ["Handbook", "Wiki"]
        assert len(accessor.calls_to("GET", toc_url(42))) == 1
        assert accessor.calls_to("GET", toc_url(43)) == []

    @pytest.mark.anyio
    async def test_self_scope(self):
        accessor = _accessor()
        service = YuqueDocumentService(TOKEN, repository_type=RepositoryScope.SELF, request=accessor)

        repos = await service.get_repositories()

        assert [r.id for r in repos] == ["42"]
        assert accessor.calls_to("GET", "users/octo/groups") == []


class TestCreateDocument:
    @pytest.mark.anyio
    async def test_requires_prior_enumeration(self):
        accessor = _accessor()
        service = YuqueDocumentService(TOKEN, request=accessor)

        with pytest.raises(InvalidRepositoryError):
            await service.create_document(
                CreateDocumentRequest(repository_id="42", title="T", content="C")
            )

        assert accessor.calls == []

    @pytest.mark.anyio
    async def test_publishes_into_enumerated_repository(self):
        accessor = _accessor()
        service = YuqueDocumentService(TOKEN, request=accessor)
        await service.get_repositories()

        result = await service.create_document(
            CreateDocumentRequest(
                repository_id="42", title="Hello", content="Body", path="a|42", slug="hello"
            )
        )

        assert result.href == "https://www.yuque.com/octo/handbook/hello"
        assert result.document_id == "555"
        assert result.access_token == TOKEN
        assert accessor.calls_to("PUT", "repos/42/toc")[0]["target_uuid"] == "a"

