"""DTOs for federated search (no dependency on ORM or HTTP schemas)."""

from dataclasses import dataclass, field

from searchhub.domain.enums import ContentType


@dataclass(frozen=True)
class Sender:
    """Email sender or Teams message author."""

    name: str
    email: str = ""


@dataclass(frozen=True)
class MessageLocation:
    """Where a Teams message lives: team + channel, or "Chat" + chat topic."""

    team: str
    channel: str


@dataclass(frozen=True)
class SearchResult:
    """Single normalized hit from any provider (read-model, never persisted).

    score is provider-scaled: Graph relevance, positional 1/rank, or the
    Teams/Planner heuristics. Scores are not comparable across providers.
    """

    id: str
    name: str
    type: ContentType
    score: float = 0.0
    web_url: str | None = None
    path: str | None = None
    last_modified: str | None = None
    preview: str | None = None
    size: int | None = None
    sender: Sender | None = None
    location: MessageLocation | None = None
    plan_id: str | None = None


@dataclass(frozen=True)
class SearchOptions:
    """Per-call options handed to a provider by the dispatcher."""

    site_id: str | None = None
    content_types: frozenset[ContentType] = frozenset()
    file_extensions: tuple[str, ...] = ()


@dataclass(frozen=True)
class ContentTypeFilter:
    """Parsed contentTypes parameter: recognized types plus leftover file extensions."""

    content_types: frozenset[ContentType] = frozenset()
    file_extensions: tuple[str, ...] = ()


@dataclass(frozen=True)
class SearchOutcome:
    """Merged results plus an optional spelling suggestion."""

    results: list[SearchResult] = field(default_factory=list)
    suggested_query: str | None = None
