"""Workspace allow-list filter for search results.

A workspace links SharePoint sites (and Planner plans) to a project. A
result belongs to the workspace when its URL mentions one of the linked
site IDs, or when its site-collection URL matches a linked site URL.

The URL heuristic keeps host + "/" + the first two path segments
(e.g. "contoso.sharepoint.com/sites/marketing"). Nested subsites and
renamed sites can mismatch; that is accepted behavior.
"""

from __future__ import annotations

from collections.abc import Iterable
from urllib.parse import urlsplit

from searchhub.application.dtos.search import SearchResult
from searchhub.application.dtos.workspace import WorkspaceResourceResult
from searchhub.domain.enums import ContentType, ResourceType
from searchhub.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


def normalize_site_url(url: str) -> str:
    """Return lower-cased host + first three "/"-split path parts of url.

    "https://Contoso.sharepoint.com/sites/Marketing/Shared Documents/a.docx"
    -> "contoso.sharepoint.com/sites/marketing". Input that does not parse
    as an absolute URL is returned lower-cased unchanged.
    """
    lowered = url.strip().lower()
    try:
        parts = urlsplit(lowered)
    except ValueError:
        return lowered
    if not parts.scheme or not parts.hostname:
        return lowered
    return parts.hostname + "/".join(parts.path.split("/")[:3])


def site_id_variants(resource_id: str) -> set[str]:
    """Return the forms a SharePoint site id may take inside a webUrl.

    Graph site ids are compound ("host,siteGuid,webGuid") and are sometimes
    stored with braces; each variant is lower-cased and empty ones dropped.
    """
    candidates = (
        resource_id,
        resource_id.replace("{", "").replace("}", ""),
        resource_id.split(",")[0],
    )
    return {c.strip().lower() for c in candidates if c.strip()}


class WorkspaceResourceFilter:
    """Predicate built once from a workspace's resources and applied per result."""

    def __init__(self, resources: Iterable[WorkspaceResourceResult]) -> None:
        self.site_ids: set[str] = set()
        self.site_urls: set[str] = set()
        self.plan_ids: set[str] = set()
        for resource in resources:
            if resource.resource_type == ResourceType.SHAREPOINT:
                self.site_ids |= site_id_variants(resource.resource_id)
                if resource.resource_url:
                    normalized = normalize_site_url(resource.resource_url)
                    if normalized:
                        self.site_urls.add(normalized)
            elif resource.resource_type == ResourceType.PLANNER:
                self.plan_ids.add(resource.resource_id)

    @property
    def has_sharepoint(self) -> bool:
        return bool(self.site_ids or self.site_urls)

    @property
    def has_planner(self) -> bool:
        return bool(self.plan_ids)

    def allows(self, result: SearchResult) -> bool:
        """Return True when result belongs to one of the workspace's resources."""
        if result.type == ContentType.PLANNER:
            return result.plan_id is not None and result.plan_id in self.plan_ids
        if not result.web_url:
            return False
        web_url = result.web_url.lower()
        if any(site_id in web_url for site_id in self.site_ids):
            return True
        result_site = normalize_site_url(web_url)
        return any(site_url in result_site for site_url in self.site_urls)

    def apply(self, results: Iterable[SearchResult]) -> list[SearchResult]:
        """Return the results the workspace allows, preserving order."""
        results = list(results)
        kept = [result for result in results if self.allows(result)]
        logger.debug(
            "Workspace filter kept %d of %d results (sites=%d, urls=%d, plans=%d)",
            len(kept),
            len(results),
            len(self.site_ids),
            len(self.site_urls),
            len(self.plan_ids),
        )
        return kept
