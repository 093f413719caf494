"""UnifiedSearchService: fan-out, degradation, site path, filters, suggestions."""

import pytest

from searchhub.application.dtos.search import ContentTypeFilter
from searchhub.application.use_cases.search import UnifiedSearchService, parse_content_types
from searchhub.domain.enums import ContentType, ResourceType
from searchhub.domain.exceptions import MissingParameterException, SqlNotConfiguredException
from searchhub.infrastructure.exceptions import (
    UpstreamAuthException,
    UpstreamTransportException,
)
from tests.fakes import (
    FakeCorrector,
    FakeProvider,
    InMemoryWorkspaceRepository,
    make_resource,
    make_result,
)

FILE_TYPES = {ContentType.FILE, ContentType.FOLDER}


def _providers(files=None, mail=None, teams=None):
    return (
        files or FakeProvider("files", FILE_TYPES),
        mail or FakeProvider("mail", {ContentType.EMAIL}),
        teams or FakeProvider("teams", {ContentType.TEAMS_MESSAGE}),
    )


class TestParseContentTypes:
    def test_none_and_blank_are_empty(self) -> None:
        assert parse_content_types(None) == ContentTypeFilter()
        assert parse_content_types(" , ,") == ContentTypeFilter()

    def test_types_and_extensions(self) -> None:
        parsed = parse_content_types("file, PDF,,email,.docx")
        assert parsed.content_types == frozenset({ContentType.FILE, ContentType.EMAIL})
        assert parsed.file_extensions == ("pdf", "docx")

    def test_teams_token(self) -> None:
        assert parse_content_types("teams").content_types == frozenset({ContentType.TEAMS_MESSAGE})

    def test_planner_is_not_a_searchable_type(self) -> None:
        parsed = parse_content_types("planner")
        assert ContentType.PLANNER not in parsed.content_types
        assert parsed.file_extensions == ("planner",)


class TestUnifiedSearch:
    async def test_missing_user_id_raises(self) -> None:
        svc = UnifiedSearchService(_providers(), FakeCorrector())
        with pytest.raises(MissingParameterException) as exc_info:
            await svc.search(query="x", user_id=None)
        assert exc_info.value.details == {"parameter": "userId"}
        with pytest.raises(MissingParameterException):
            await svc.search(query="x", user_id="   ")

    async def test_merges_all_providers_by_score(self) -> None:
        files, mail, teams = _providers(
            FakeProvider("files", FILE_TYPES, [make_result("f", score=1.0)]),
            FakeProvider("mail", {ContentType.EMAIL}, [make_result("m", ContentType.EMAIL, score=3.0)]),
            FakeProvider(
                "teams", {ContentType.TEAMS_MESSAGE}, [make_result("t", ContentType.TEAMS_MESSAGE, score=2.0)]
            ),
        )
        svc = UnifiedSearchService([files, mail, teams], FakeCorrector())
        outcome = await svc.search(query="report", user_id="u1")
        assert [r.id for r in outcome.results] == ["m", "t", "f"]
        assert all(len(p.calls) == 1 for p in (files, mail, teams))

    async def test_failing_provider_is_skipped(self) -> None:
        """A provider error contributes zero results; the others still answer."""
        files, mail, teams = _providers(
            FakeProvider("files", FILE_TYPES, [make_result("f", score=1.0)]),
            FakeProvider("mail", {ContentType.EMAIL}, error=UpstreamTransportException("boom")),
            FakeProvider("teams", {ContentType.TEAMS_MESSAGE}, error=RuntimeError("bug")),
        )
        svc = UnifiedSearchService([files, mail, teams], FakeCorrector())
        outcome = await svc.search(query="report", user_id="u1")
        assert [r.id for r in outcome.results] == ["f"]

    async def test_auth_error_is_absorbed_on_federated_path(self) -> None:
        files, mail, teams = _providers(
            files=FakeProvider("files", FILE_TYPES, error=UpstreamAuthException("expired")),
        )
        svc = UnifiedSearchService([files, mail, teams], FakeCorrector())
        outcome = await svc.search(query="report", user_id="u1")
        assert outcome.results == []

    async def test_slow_provider_times_out(self) -> None:
        slow = FakeProvider("mail", {ContentType.EMAIL}, [make_result("m", ContentType.EMAIL)], delay=1.0)
        fast = FakeProvider("files", FILE_TYPES, [make_result("f")])
        svc = UnifiedSearchService([fast, slow], FakeCorrector(), provider_timeout=0.05)
        outcome = await svc.search(query="report", user_id="u1")
        assert [r.id for r in outcome.results] == ["f"]

    async def test_content_types_select_providers(self) -> None:
        files, mail, teams = _providers()
        svc = UnifiedSearchService([files, mail, teams], FakeCorrector())
        await svc.search(query="x", user_id="u1", content_types="email")
        assert len(mail.calls) == 1
        assert files.calls == [] and teams.calls == []

    async def test_extensions_only_still_runs_every_provider(self) -> None:
        files, mail, teams = _providers()
        svc = UnifiedSearchService([files, mail, teams], FakeCorrector())
        await svc.search(query="x", user_id="u1", content_types="pdf")
        assert len(files.calls) == len(mail.calls) == len(teams.calls) == 1
        options = files.calls[0][2]
        assert options.file_extensions == ("pdf",)
        assert options.content_types == frozenset(FILE_TYPES)

    async def test_planner_results_never_surface(self) -> None:
        files = FakeProvider(
            "files",
            FILE_TYPES,
            [make_result("f"), make_result("p", ContentType.PLANNER, score=99, plan_id="x")],
        )
        svc = UnifiedSearchService([files], FakeCorrector())
        outcome = await svc.search(query="x", user_id="u1")
        assert [r.id for r in outcome.results] == ["f"]

    async def test_suggestion_only_for_non_empty_query(self) -> None:
        corrector = FakeCorrector("bolig")
        svc = UnifiedSearchService(_providers(), corrector)
        assert (await svc.search(query="bolih", user_id="u1")).suggested_query == "bolig"
        assert (await svc.search(query="  ", user_id="u1")).suggested_query is None
        assert corrector.queries == ["bolih"]


class TestSiteScopedSearch:
    async def test_only_file_provider_runs_with_folders(self) -> None:
        files, mail, teams = _providers(
            FakeProvider("files", FILE_TYPES, [make_result("f", score=0.5), make_result("d", ContentType.FOLDER, score=1.0)])
        )
        svc = UnifiedSearchService([files, mail, teams], FakeCorrector())
        outcome = await svc.search(query="", user_id="u1", site_id="site-1", content_types="file")
        assert [r.id for r in outcome.results] == ["d", "f"]
        assert mail.calls == [] and teams.calls == []
        options = files.calls[0][2]
        assert options.site_id == "site-1"
        assert options.content_types == frozenset(FILE_TYPES)

    async def test_non_file_types_fall_back_to_files_and_folders(self) -> None:
        files = FakeProvider("files", FILE_TYPES)
        svc = UnifiedSearchService([files], FakeCorrector())
        await svc.search(query="x", user_id="u1", site_id="site-1", content_types="email")
        assert files.calls[0][2].content_types == frozenset(FILE_TYPES)

    @pytest.mark.parametrize(
        "error",
        [UpstreamAuthException("denied", 403), UpstreamTransportException("boom")],
    )
    async def test_provider_error_propagates(self, error: Exception) -> None:
        files = FakeProvider("files", FILE_TYPES, error=error)
        svc = UnifiedSearchService([files], FakeCorrector())
        with pytest.raises(type(error)):
            await svc.search(query="x", user_id="u1", site_id="site-1")


class TestWorkspaceFilterOnUnifiedSearch:
    async def test_results_outside_workspace_are_dropped(self) -> None:
        files = FakeProvider(
            "files",
            FILE_TYPES,
            [
                make_result("in", web_url="https://contoso.sharepoint.com/sites/site-123/a.docx"),
                make_result("out", web_url="https://contoso.sharepoint.com/sites/other/b.docx"),
                make_result("no-url"),
            ],
        )
        repo = InMemoryWorkspaceRepository([make_resource("site-123", workspace_id="ws-1")])
        svc = UnifiedSearchService([files], FakeCorrector(), workspace_repo=repo)
        outcome = await svc.search(query="x", user_id="u1", workspace_id="ws-1")
        assert [r.id for r in outcome.results] == ["in"]

    async def test_workspace_without_repository_raises(self) -> None:
        files = FakeProvider(
            "files",
            FILE_TYPES,
            [make_result("outside", web_url="https://contoso.sharepoint.com/sites/other/a.docx")],
        )
        svc = UnifiedSearchService([files], FakeCorrector())
        with pytest.raises(SqlNotConfiguredException):
            await svc.search(query="x", user_id="u1", workspace_id="ws-1")
        assert files.calls == []

    async def test_planner_resources_do_not_admit_tasks(self) -> None:
        files = FakeProvider(
            "files", FILE_TYPES, [make_result("t", ContentType.PLANNER, plan_id="plan-1")]
        )
        repo = InMemoryWorkspaceRepository([make_resource("plan-1", ResourceType.PLANNER)])
        svc = UnifiedSearchService([files], FakeCorrector(), workspace_repo=repo)
        outcome = await svc.search(query="x", user_id="u1", workspace_id="ws-1")
        assert outcome.results == []
