"""SharePoint / OneDrive file and folder search via Microsoft Graph."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote, unquote, urlsplit

from searchhub.application.dtos.search import SearchOptions, SearchResult
from searchhub.domain.enums import ContentType
from searchhub.infrastructure.external.graph.client import GraphClient
from searchhub.infrastructure.external.search.providers._common import hit_score, odata_quote
from searchhub.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

_SITE_COLLECTION_ROOTS = ("sites", "teams", "personal")


def item_path(item: dict[str, Any]) -> str | None:
    """Return the item's location inside its drive, e.g. "/Shared Documents/Reports/q1.xlsx".

    Prefers parentReference.path (text after "root:"); otherwise derives it
    from webUrl by dropping the host and the site-collection prefix
    ("/sites/<name>"), URL-decoded.
    """
    name = item.get("name") or ""
    parent = (item.get("parentReference") or {}).get("path")
    if isinstance(parent, str) and "root:" in parent:
        folder = parent.split("root:", 1)[1].rstrip("/")
        return f"{folder}/{name}" if name else folder or "/"
    web_url = item.get("webUrl")
    if not isinstance(web_url, str) or not web_url:
        return None
    segments = [s for s in urlsplit(web_url).path.split("/") if s]
    if len(segments) >= 2 and segments[0].lower() in _SITE_COLLECTION_ROOTS:
        segments = segments[2:]
    if not segments:
        return None
    return "/" + "/".join(unquote(s) for s in segments)


def file_extension(name: str) -> str:
    """Return the lower-cased extension of a file name, without the dot ("" if none)."""
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[1].lower()


class SharePointFileProvider:
    """Searches drive items the user can see (all sites, or one site when site_id is given)."""

    name = "sharepoint-files"
    content_types = frozenset({ContentType.FILE, ContentType.FOLDER})

    def __init__(self, graph: GraphClient, page_size: int = 25) -> None:
        self.graph = graph
        self.page_size = page_size

    async def search(
        self,
        user_id: str,
        query: str,
        options: SearchOptions | None = None,
    ) -> list[SearchResult]:
        options = options or SearchOptions(content_types=self.content_types)
        query = query.strip()
        wanted = options.content_types & self.content_types or self.content_types
        extensions = {e.lower() for e in options.file_extensions}

        if options.site_id:
            items = await self._search_site(user_id, query, options.site_id)
            scored = [(item, 1.0 / (i + 1)) for i, item in enumerate(items)]
        elif not query:
            items = await self.graph.get_collection(user_id, "/me/drive/root/children")
            scored = [(item, 1.0 / (i + 1)) for i, item in enumerate(items)]
        else:
            hits = await self.graph.search_query(
                user_id, "driveItem", self._query_string(query, extensions), self.page_size
            )
            scored = [
                (hit["resource"], hit_score(hit, i))
                for i, hit in enumerate(hits)
                if isinstance(hit.get("resource"), dict)
            ]

        results: list[SearchResult] = []
        for item, score in scored:
            result = self._to_result(item, score)
            if result is None or result.type not in wanted:
                continue
            if extensions and result.type == ContentType.FILE and file_extension(result.name) not in extensions:
                continue
            results.append(result)
        logger.debug(
            "File search returned %d of %d items (site_id=%s)",
            len(results),
            len(scored),
            options.site_id,
        )
        return results

    async def _search_site(self, user_id: str, query: str, site_id: str) -> list[dict[str, Any]]:
        if not query:
            return await self.graph.get_collection(user_id, f"/sites/{site_id}/drive/root/children")
        # "#", "?" and "/" in the query must stay inside the path segment.
        q = quote(odata_quote(query), safe="")
        return await self.graph.get_collection(
            user_id, f"/sites/{site_id}/drive/root/search(q='{q}')"
        )

    @staticmethod
    def _query_string(query: str, extensions: set[str]) -> str:
        if not extensions:
            return query
        filetypes = " OR ".join(f"filetype:{ext}" for ext in sorted(extensions))
        return f"({query}) AND ({filetypes})"

    @staticmethod
    def _to_result(item: dict[str, Any], score: float) -> SearchResult | None:
        item_id = item.get("id")
        if not item_id:
            return None
        is_folder = "folder" in item and item.get("folder") is not None
        size = item.get("size")
        return SearchResult(
            id=str(item_id),
            name=item.get("name") or "Untitled",
            type=ContentType.FOLDER if is_folder else ContentType.FILE,
            score=score,
            web_url=item.get("webUrl"),
            path=item_path(item),
            last_modified=item.get("lastModifiedDateTime"),
            size=size if isinstance(size, int) else None,
        )
