"""WorkspaceSearchService: SharePoint and Planner results scoped to one workspace."""

import pytest

from searchhub.application.use_cases.workspace_search import WorkspaceSearchService
from searchhub.domain.enums import ContentType, ResourceType
from searchhub.domain.exceptions import MissingParameterException, SqlNotConfiguredException
from searchhub.infrastructure.exceptions import UpstreamTransportException
from tests.fakes import (
    FakeCorrector,
    FakeProvider,
    InMemoryWorkspaceRepository,
    make_resource,
    make_result,
)

FILE_TYPES = {ContentType.FILE, ContentType.FOLDER}


@pytest.fixture
def files() -> FakeProvider:
    return FakeProvider(
        "files",
        FILE_TYPES,
        [
            make_result("doc", score=2.0, web_url="https://h/sites/site-a/doc.docx"),
            make_result("other", score=5.0, web_url="https://h/sites/site-b/x.docx"),
        ],
    )


@pytest.fixture
def planner() -> FakeProvider:
    return FakeProvider(
        "planner",
        {ContentType.PLANNER},
        [
            make_result("task-1", ContentType.PLANNER, score=80.0, plan_id="plan-1"),
            make_result("task-2", ContentType.PLANNER, score=90.0, plan_id="plan-2"),
        ],
    )


@pytest.mark.parametrize(
    ("kwargs", "missing"),
    [
        ({"query": "", "user_id": "u1", "workspace_id": "ws-1"}, "query"),
        ({"query": "x", "user_id": "u1", "workspace_id": None}, "workspace"),
        ({"query": "x", "user_id": None, "workspace_id": "ws-1"}, "userId"),
    ],
)
async def test_required_parameters(files, planner, kwargs, missing) -> None:
    svc = WorkspaceSearchService(files, planner, InMemoryWorkspaceRepository(), FakeCorrector())
    with pytest.raises(MissingParameterException) as exc_info:
        await svc.search(**kwargs)
    assert exc_info.value.details["parameter"] == missing


async def test_no_repository_means_sql_unavailable(files, planner) -> None:
    svc = WorkspaceSearchService(files, planner, None, FakeCorrector())
    with pytest.raises(SqlNotConfiguredException):
        await svc.search(query="x", user_id="u1", workspace_id="ws-1")


async def test_empty_workspace_returns_no_results(files, planner) -> None:
    svc = WorkspaceSearchService(
        files, planner, InMemoryWorkspaceRepository(), FakeCorrector("bolig")
    )
    outcome = await svc.search(query="bolih", user_id="u1", workspace_id="ws-1")
    assert outcome.results == []
    assert outcome.suggested_query == "bolig"
    assert files.calls == [] and planner.calls == []


async def test_files_and_tasks_are_filtered_and_merged(files, planner) -> None:
    repo = InMemoryWorkspaceRepository(
        [make_resource("site-a"), make_resource("plan-1", ResourceType.PLANNER)]
    )
    svc = WorkspaceSearchService(files, planner, repo, FakeCorrector())
    outcome = await svc.search(query="x", user_id="u1", workspace_id="ws-1")
    assert [r.id for r in outcome.results] == ["task-1", "doc"]


async def test_planner_skipped_without_plan_resources(files, planner) -> None:
    repo = InMemoryWorkspaceRepository([make_resource("site-a")])
    svc = WorkspaceSearchService(files, planner, repo, FakeCorrector())
    outcome = await svc.search(query="x", user_id="u1", workspace_id="ws-1")
    assert [r.id for r in outcome.results] == ["doc"]
    assert planner.calls == []


async def test_planner_failure_is_logged_and_skipped(files) -> None:
    failing = FakeProvider("planner", {ContentType.PLANNER}, error=UpstreamTransportException("boom"))
    repo = InMemoryWorkspaceRepository(
        [make_resource("site-a"), make_resource("plan-1", ResourceType.PLANNER)]
    )
    svc = WorkspaceSearchService(files, failing, repo, FakeCorrector())
    outcome = await svc.search(query="x", user_id="u1", workspace_id="ws-1")
    assert [r.id for r in outcome.results] == ["doc"]


async def test_sharepoint_failure_propagates(planner) -> None:
    failing = FakeProvider("files", FILE_TYPES, error=UpstreamTransportException("boom"))
    repo = InMemoryWorkspaceRepository([make_resource("site-a")])
    svc = WorkspaceSearchService(failing, planner, repo, FakeCorrector())
    with pytest.raises(UpstreamTransportException):
        await svc.search(query="x", user_id="u1", workspace_id="ws-1")
