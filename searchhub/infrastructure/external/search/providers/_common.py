"""Helpers shared by the Graph search providers."""

from __future__ import annotations

import html
import re
from typing import Any

_TAG_RE = re.compile(r"<[^>]*>")
_WS_RE = re.compile(r"\s+")


def hit_score(hit: dict[str, Any], position: int) -> float:
    """Return a relevance score for a /search/query hit.

    Graph's own score when present; otherwise 1 / rank, falling back to
    1 / (position + 1) when the hit carries no rank either.
    """
    score = hit.get("score")
    if isinstance(score, (int, float)) and not isinstance(score, bool) and score > 0:
        return float(score)
    rank = hit.get("rank")
    if isinstance(rank, int) and not isinstance(rank, bool) and rank > 0:
        return 1.0 / rank
    return 1.0 / (position + 1)


def clean_html(content: str | None) -> str:
    """Strip tags, decode entities (&nbsp; becomes a space) and collapse whitespace."""
    if not content:
        return ""
    text = _TAG_RE.sub("", content)
    text = text.replace("&nbsp;", " ")
    text = html.unescape(text).replace("\xa0", " ")
    return _WS_RE.sub(" ", text).strip()


def excerpt(text: str, length: int) -> str:
    """Return the first length characters, with "..." appended when cut."""
    if len(text) > length:
        return text[:length] + "..."
    return text


def odata_quote(value: str) -> str:
    """Escape a value for use inside a single-quoted OData string literal."""
    return value.replace("'", "''")
