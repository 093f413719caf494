"""Unified search use case: fan out to providers, merge, filter, suggest.

Two paths:

- site-scoped (site_id given): only the file provider runs, folders are
  always included, and its failure fails the request;
- federated: every provider whose content types are requested runs
  concurrently, each under its own timeout; a failed or slow provider
  contributes zero results and a warning.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from typing import TYPE_CHECKING

from searchhub.application.dtos.search import (
    ContentTypeFilter,
    SearchOptions,
    SearchOutcome,
    SearchResult,
)
from searchhub.application.services.result_merger import exclude_planner, merge_results
from searchhub.application.services.workspace_filter import WorkspaceResourceFilter
from searchhub.domain.enums import ContentType
from searchhub.domain.exceptions import (
    MissingParameterException,
    SqlNotConfiguredException,
)
from searchhub.shared.telemetry.logging import get_logger
from searchhub.shared.telemetry.tracing import (
    TracedOperation,
    add_span_attributes,
    set_span_error,
    traced,
)

if TYPE_CHECKING:
    from searchhub.application.interfaces.providers import SearchProvider
    from searchhub.application.interfaces.repositories import IWorkspaceResourceRepository
    from searchhub.application.interfaces.services import ISpellingCorrector

logger = get_logger(__name__)

# contentTypes tokens that name a result type; anything else is a file extension.
CONTENT_TYPE_TOKENS: dict[str, ContentType] = {
    "file": ContentType.FILE,
    "folder": ContentType.FOLDER,
    "email": ContentType.EMAIL,
    "teams": ContentType.TEAMS_MESSAGE,
}

FILE_CONTENT_TYPES = frozenset({ContentType.FILE, ContentType.FOLDER})
SEARCHABLE_CONTENT_TYPES = frozenset(CONTENT_TYPE_TOKENS.values())


def parse_content_types(raw: str | None) -> ContentTypeFilter:
    """Split a comma-separated contentTypes value into types and extensions.

    Tokens are trimmed and lower-cased; empty tokens are ignored. A leading
    "." on an extension is dropped. Order is kept and duplicates removed.
    "file, PDF,,email" gives types {file, email} and extensions ("pdf",).
    """
    if not raw:
        return ContentTypeFilter()
    content_types: set[ContentType] = set()
    extensions: list[str] = []
    for token in raw.split(","):
        token = token.strip().lower()
        if not token:
            continue
        content_type = CONTENT_TYPE_TOKENS.get(token)
        if content_type is not None:
            content_types.add(content_type)
            continue
        extension = token.lstrip(".")
        if extension and extension not in extensions:
            extensions.append(extension)
    return ContentTypeFilter(
        content_types=frozenset(content_types),
        file_extensions=tuple(extensions),
    )


class UnifiedSearchService:
    """Federated search across the configured providers."""

    def __init__(
        self,
        providers: Sequence[SearchProvider],
        corrector: ISpellingCorrector,
        workspace_repo: IWorkspaceResourceRepository | None = None,
        provider_timeout: float = 10.0,
    ) -> None:
        self.providers = list(providers)
        self.corrector = corrector
        self.workspace_repo = workspace_repo
        self.provider_timeout = provider_timeout

    def _file_provider(self) -> SearchProvider | None:
        for provider in self.providers:
            if ContentType.FILE in provider.content_types:
                return provider
        return None

    @traced("search.unified")
    async def search(
        self,
        *,
        query: str | None,
        user_id: str | None,
        site_id: str | None = None,
        content_types: str | None = None,
        workspace_id: str | None = None,
    ) -> SearchOutcome:
        """Run a unified search for user_id and return merged results.

        Raises:
            MissingParameterException: user_id missing or blank.
            SqlNotConfiguredException: workspace_id given but no workspace
                repository is wired (no DATABASE_URL).
            UpstreamAuthException / UpstreamTransportException: only on the
                site-scoped path, where the single provider's failure is fatal.
        """
        if not user_id or not user_id.strip():
            raise MissingParameterException("userId")
        user_id = user_id.strip()
        if workspace_id and self.workspace_repo is None:
            raise SqlNotConfiguredException()
        query = (query or "").strip()
        requested = parse_content_types(content_types)

        if site_id:
            results = await self._search_site(user_id, query, site_id, requested)
        else:
            results = await self._search_all(user_id, query, requested)

        if workspace_id:
            results = await self._filter_by_workspace(workspace_id, results)

        results = exclude_planner(results)
        add_span_attributes(**{"search.result_count": len(results)})
        suggested = self.corrector.suggest(query) if query else None
        return SearchOutcome(results=results, suggested_query=suggested)

    async def _search_site(
        self,
        user_id: str,
        query: str,
        site_id: str,
        requested: ContentTypeFilter,
    ) -> list[SearchResult]:
        provider = self._file_provider()
        if provider is None:
            logger.warning("Site search requested but no file provider is configured")
            return []
        wanted = requested.content_types & FILE_CONTENT_TYPES
        effective = (wanted | {ContentType.FOLDER}) if wanted else FILE_CONTENT_TYPES
        options = SearchOptions(
            site_id=site_id,
            content_types=frozenset(effective),
            file_extensions=requested.file_extensions,
        )
        async with TracedOperation(
            "search.provider", {"provider": provider.name, "site_scoped": True}
        ):
            results = await provider.search(user_id, query, options)
        return merge_results(results)

    async def _search_all(
        self,
        user_id: str,
        query: str,
        requested: ContentTypeFilter,
    ) -> list[SearchResult]:
        effective = requested.content_types or SEARCHABLE_CONTENT_TYPES
        calls = []
        for provider in self.providers:
            provider_types = provider.content_types & effective
            if not provider_types:
                continue
            options = SearchOptions(
                content_types=frozenset(provider_types),
                file_extensions=requested.file_extensions,
            )
            calls.append(self._run_provider(provider, user_id, query, options))
        if not calls:
            return []
        result_lists = await asyncio.gather(*calls)
        return merge_results(*result_lists)

    async def _run_provider(
        self,
        provider: SearchProvider,
        user_id: str,
        query: str,
        options: SearchOptions,
    ) -> list[SearchResult]:
        """Run one provider; failures and timeouts become an empty list."""
        async with TracedOperation("search.provider", {"provider": provider.name}):
            try:
                results = await asyncio.wait_for(
                    provider.search(user_id, query, options),
                    timeout=self.provider_timeout,
                )
            except TimeoutError as e:
                set_span_error(e)
                logger.warning(
                    "Provider %s timed out after %.1fs (user_id=%s, query=%r)",
                    provider.name,
                    self.provider_timeout,
                    user_id,
                    query,
                )
                return []
            except Exception as e:
                set_span_error(e)
                logger.warning(
                    "Provider %s failed (user_id=%s, query=%r): %s",
                    provider.name,
                    user_id,
                    query,
                    e,
                )
                return []
            add_span_attributes(**{"search.provider_result_count": len(results)})
            return results

    async def _filter_by_workspace(
        self, workspace_id: str, results: list[SearchResult]
    ) -> list[SearchResult]:
        resources = await self.workspace_repo.list_by_workspace(workspace_id)
        return WorkspaceResourceFilter(resources).apply(results)
