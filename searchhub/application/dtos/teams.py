"""DTOs for the Teams chat directory."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class TeamsChat:
    """One chat the user belongs to, with a display-ready topic."""

    id: str
    topic: str
    chat_type: str = "oneOnOne"
    web_url: str | None = None
    member_count: int = 0
    last_updated: str | None = None

    def to_cache(self) -> dict[str, Any]:
        """Return a JSON-serializable dict for the chat cache."""
        return asdict(self)

    @classmethod
    def from_cache(cls, data: dict[str, Any]) -> "TeamsChat":
        """Rebuild from a dict produced by to_cache()."""
        return cls(**data)
