"""Tests for the search endpoints (providers and repositories replaced by fakes)."""

from httpx import AsyncClient

from searchhub.api.v1.dependencies import (
    get_optional_workspace_repo,
    get_search_providers,
    get_spelling_corrector,
    get_workspace_search_service,
)
from searchhub.application.dtos.search import MessageLocation, Sender
from searchhub.application.use_cases.workspace_search import WorkspaceSearchService
from searchhub.domain.enums import ContentType, ResourceType
from searchhub.infrastructure.exceptions import (
    UpstreamAuthException,
    UpstreamTransportException,
)
from searchhub.main import app
from tests.fakes import (
    FakeCorrector,
    FakeProvider,
    InMemoryWorkspaceRepository,
    make_resource,
    make_result,
)

FIN_SITE = "https://contoso.sharepoint.com/sites/fin"


def use_providers(*providers: FakeProvider, suggestion: str | None = None) -> None:
    app.dependency_overrides[get_search_providers] = lambda: list(providers)
    app.dependency_overrides[get_spelling_corrector] = lambda: FakeCorrector(suggestion)


def file_provider(**kwargs) -> FakeProvider:
    return FakeProvider("files", {ContentType.FILE, ContentType.FOLDER}, **kwargs)


def mail_provider(**kwargs) -> FakeProvider:
    return FakeProvider("mail", {ContentType.EMAIL}, **kwargs)


def teams_provider(**kwargs) -> FakeProvider:
    return FakeProvider("teams", {ContentType.TEAMS_MESSAGE}, **kwargs)


async def test_search_without_user_id_returns_400(client: AsyncClient) -> None:
    """GET /api/v1/search without userId fails before any provider runs."""
    files = file_provider()
    use_providers(files)
    response = await client.get("/api/v1/search", params={"q": "budget"})
    assert response.status_code == 400
    body = response.json()
    assert body["error_code"] == "MISSING_PARAMETER"
    assert body["details"] == {"parameter": "userId"}
    assert files.calls == []


async def test_search_returns_camel_case_envelope(client: AsyncClient) -> None:
    """Results from every provider are merged by score and serialized camelCase."""
    use_providers(
        file_provider(
            results=[
                make_result(
                    "f1",
                    score=0.5,
                    web_url=f"{FIN_SITE}/Shared%20Documents/budget.xlsx",
                    path="/Shared Documents/budget.xlsx",
                    last_modified="2024-05-01T10:00:00Z",
                    size=2048,
                )
            ]
        ),
        mail_provider(
            results=[
                make_result(
                    "m1",
                    type=ContentType.EMAIL,
                    score=1.0,
                    sender=Sender(name="Kari", email="kari@example.com"),
                )
            ]
        ),
        teams_provider(
            results=[
                make_result(
                    "t1",
                    type=ContentType.TEAMS_MESSAGE,
                    score=50,
                    location=MessageLocation(team="Sales", channel="General"),
                )
            ]
        ),
        suggestion="budget",
    )
    response = await client.get("/api/v1/search", params={"q": "budgte", "userId": "u1"})
    assert response.status_code == 200
    body = response.json()
    assert body["suggestedQuery"] == "budget"
    assert [r["id"] for r in body["results"]] == ["t1", "m1", "f1"]
    teams, mail, file = body["results"]
    assert teams["type"] == "teams-message"
    assert teams["location"] == {"team": "Sales", "channel": "General"}
    assert mail["from"] == {"name": "Kari", "email": "kari@example.com"}
    assert file["webUrl"] == f"{FIN_SITE}/Shared%20Documents/budget.xlsx"
    assert file["lastModifiedDateTime"] == "2024-05-01T10:00:00Z"
    assert file["path"] == "/Shared Documents/budget.xlsx"
    assert file["size"] == 2048


async def test_content_types_select_providers(client: AsyncClient) -> None:
    """contentTypes=email,pdf runs only the mail provider; pdf is passed as an extension."""
    files, mail, teams = file_provider(), mail_provider(), teams_provider()
    use_providers(files, mail, teams)
    response = await client.get(
        "/api/v1/search", params={"q": "x", "userId": "u1", "contentTypes": "email, PDF"}
    )
    assert response.status_code == 200
    assert files.calls == [] and teams.calls == []
    assert mail.calls[0][2].file_extensions == ("pdf",)


async def test_failing_provider_is_skipped(client: AsyncClient) -> None:
    """A provider error on the federated path yields 200 with the other results."""
    use_providers(
        file_provider(error=UpstreamTransportException("down", "/search/query", 503)),
        mail_provider(results=[make_result("m1", type=ContentType.EMAIL, score=1.0)]),
    )
    response = await client.get("/api/v1/search", params={"q": "x", "userId": "u1"})
    assert response.status_code == 200
    assert [r["id"] for r in response.json()["results"]] == ["m1"]


async def test_site_search_forwards_graph_auth_status(client: AsyncClient) -> None:
    """With siteId the file provider's 403 becomes the response status."""
    mail = mail_provider()
    use_providers(file_provider(error=UpstreamAuthException("Access denied", 403, "u1")), mail)
    response = await client.get(
        "/api/v1/search", params={"q": "x", "userId": "u1", "siteId": "site-1"}
    )
    assert response.status_code == 403
    assert response.json()["error_code"] == "UPSTREAM_AUTH_ERROR"
    assert mail.calls == []


async def test_site_search_transport_failure_returns_500(client: AsyncClient) -> None:
    """With siteId a Graph transport failure is not absorbed."""
    use_providers(file_provider(error=UpstreamTransportException("timed out", "/sites/site-1")))
    response = await client.get(
        "/api/v1/search", params={"q": "x", "userId": "u1", "siteId": "site-1"}
    )
    assert response.status_code == 500
    assert response.json()["error_code"] == "UPSTREAM_TRANSPORT_ERROR"


async def test_site_search_always_includes_folders(client: AsyncClient) -> None:
    files = file_provider(results=[make_result("d1", type=ContentType.FOLDER)])
    use_providers(files)
    response = await client.get(
        "/api/v1/search",
        params={"q": "", "userId": "u1", "siteId": "site-1", "contentTypes": "file"},
    )
    assert response.status_code == 200
    options = files.calls[0][2]
    assert options.site_id == "site-1"
    assert options.content_types == {ContentType.FILE, ContentType.FOLDER}


async def test_site_search_with_extension_filter(client: AsyncClient) -> None:
    """siteId=abc with contentTypes=pdf searches files and folders, pdf files only."""
    files = file_provider()
    use_providers(files, mail_provider())
    response = await client.get(
        "/api/v1/search",
        params={"q": "report", "userId": "u1", "siteId": "abc", "contentTypes": "pdf"},
    )
    assert response.status_code == 200
    assert len(files.calls) == 1
    user_id, query, options = files.calls[0]
    assert (user_id, query) == ("u1", "report")
    assert options.site_id == "abc"
    assert options.content_types == {ContentType.FILE, ContentType.FOLDER}
    assert options.file_extensions == ("pdf",)


async def test_workspace_parameter_filters_results(client: AsyncClient) -> None:
    """Only results under a site linked to the workspace survive."""
    repo = InMemoryWorkspaceRepository([make_resource("site-guid", resource_url=FIN_SITE)])
    app.dependency_overrides[get_optional_workspace_repo] = lambda: repo
    use_providers(
        file_provider(
            results=[
                make_result("in", web_url=f"{FIN_SITE}/Shared%20Documents/a.docx", score=0.5),
                make_result("out", web_url="https://contoso.sharepoint.com/sites/hr/b.docx", score=1.0),
            ]
        ),
        mail_provider(
            results=[make_result("m1", type=ContentType.EMAIL, web_url="https://outlook.office.com/m1")]
        ),
    )
    response = await client.get(
        "/api/v1/search", params={"q": "x", "userId": "u1", "workspace": "ws-1"}
    )
    assert response.status_code == 200
    assert [r["id"] for r in response.json()["results"]] == ["in"]


async def test_workspace_parameter_without_database_returns_503(client: AsyncClient) -> None:
    """A workspace filter that cannot be loaded never falls back to unfiltered results."""
    app.dependency_overrides[get_optional_workspace_repo] = lambda: None
    files = file_provider(
        results=[make_result("outside", web_url="https://contoso.sharepoint.com/sites/other/a.docx")]
    )
    use_providers(files)
    response = await client.get(
        "/api/v1/search", params={"q": "x", "userId": "u1", "workspace": "ws-1"}
    )
    assert response.status_code == 503
    assert response.json()["error_code"] == "SERVICE_UNAVAILABLE"
    assert files.calls == []


def use_workspace_search(
    files: FakeProvider,
    planner: FakeProvider,
    repo: InMemoryWorkspaceRepository | None,
) -> None:
    service = WorkspaceSearchService(files, planner, repo, FakeCorrector())
    app.dependency_overrides[get_workspace_search_service] = lambda: service


async def test_workspace_search_parameter_order(client: AsyncClient) -> None:
    """Missing query, workspace and userId are reported in that order."""
    use_workspace_search(file_provider(), FakeProvider("planner", {ContentType.PLANNER}), None)

    response = await client.get("/api/v1/search/workspace", params={"userId": "u1"})
    assert response.status_code == 400
    assert response.json()["details"] == {"parameter": "query"}

    response = await client.get("/api/v1/search/workspace", params={"q": "x"})
    assert response.json()["details"] == {"parameter": "workspace"}

    response = await client.get("/api/v1/search/workspace", params={"q": "x", "workspace": "ws-1"})
    assert response.json()["details"] == {"parameter": "userId"}


async def test_workspace_search_without_database_returns_503(client: AsyncClient) -> None:
    use_workspace_search(file_provider(), FakeProvider("planner", {ContentType.PLANNER}), None)
    response = await client.get(
        "/api/v1/search/workspace", params={"q": "x", "workspace": "ws-1", "userId": "u1"}
    )
    assert response.status_code == 503
    assert response.json()["error_code"] == "SERVICE_UNAVAILABLE"


async def test_workspace_search_returns_files_and_tasks(client: AsyncClient) -> None:
    """The query alias is accepted and linked Planner tasks are returned."""
    repo = InMemoryWorkspaceRepository(
        [
            make_resource("site-guid", resource_url=FIN_SITE),
            make_resource("plan-1", resource_type=ResourceType.PLANNER),
        ]
    )
    files = file_provider(results=[make_result("f1", web_url=f"{FIN_SITE}/a.docx", score=1.0)])
    planner = FakeProvider(
        "planner",
        {ContentType.PLANNER},
        results=[
            make_result("task-1", type=ContentType.PLANNER, score=105, plan_id="plan-1"),
            make_result("task-2", type=ContentType.PLANNER, score=90, plan_id="plan-2"),
        ],
    )
    use_workspace_search(files, planner, repo)
    response = await client.get(
        "/api/v1/search/workspace",
        params={"query": "budget", "workspace": "ws-1", "userId": "u1"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["workspace"] == "ws-1"
    assert [(r["id"], r["type"]) for r in body["results"]] == [
        ("task-1", "planner"),
        ("f1", "file"),
    ]
    assert body["results"][0]["planId"] == "plan-1"
