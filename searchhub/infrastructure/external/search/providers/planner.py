"""Planner task search.

The Planner API has no text search, so every task assigned to the user is
fetched together with its details and matched word by word.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from datetime import datetime
from typing import Any

from searchhub.application.dtos.search import SearchOptions, SearchResult
from searchhub.core.constants import PLANNER_TASK_URL_TEMPLATE
from searchhub.domain.enums import ContentType
from searchhub.domain.exceptions import SearchHubException
from searchhub.infrastructure.external.graph.client import GraphClient
from searchhub.shared.telemetry.logging import get_logger
from searchhub.shared.utils.datetime import parse_graph_datetime, utc_now

logger = get_logger(__name__)

_TASK_SELECT = "id,title,planId,createdDateTime,dueDateTime,priority,percentComplete"
_SECONDS_PER_DAY = 86400


def count_word_matches(text: str, query: str) -> int:
    """Count words of text that contain the query or are contained in it."""
    return sum(1 for word in text.lower().split() if query in word or word in query)


def score_task(
    task: dict[str, Any],
    description: str,
    query: str,
    now: datetime,
) -> float | None:
    """Return the relevance score of a task, or None when nothing matches."""
    title_matches = count_word_matches(task.get("title") or "", query)
    description_matches = count_word_matches(description, query)
    if not title_matches and not description_matches:
        return None

    score = 25.0 * title_matches + 10.0 * description_matches

    created = parse_graph_datetime(task.get("createdDateTime"))
    if created is not None:
        age_days = (now - created).total_seconds() / _SECONDS_PER_DAY
        score += max(0.0, 30 - age_days)

    score += 10 * _number(task.get("priority"))

    due = parse_graph_datetime(task.get("dueDateTime"))
    if due is not None:
        days_until_due = (due - now).total_seconds() / _SECONDS_PER_DAY
        if 0 < days_until_due < 7:
            score += max(0.0, 70 - days_until_due * 10)

    score -= _number(task.get("percentComplete"))
    return score


def _number(value: Any) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    return 0.0


class PlannerTaskProvider:
    """Searches the Planner tasks assigned to the user."""

    name = "planner-tasks"
    content_types = frozenset({ContentType.PLANNER})

    def __init__(
        self,
        graph: GraphClient,
        task_host: str,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.graph = graph
        self.task_host = task_host
        self._clock = clock

    async def search(
        self,
        user_id: str,
        query: str,
        options: SearchOptions | None = None,
    ) -> list[SearchResult]:
        query = query.strip().lower()
        if not query:
            return []
        tasks = await self.graph.get_collection(
            user_id, "/me/planner/tasks", {"$select": _TASK_SELECT}
        )
        tasks = [task for task in tasks if task.get("id")]
        details = await asyncio.gather(*(self._details(user_id, task["id"]) for task in tasks))

        now = self._clock()
        results: list[SearchResult] = []
        for task, detail in zip(tasks, details):
            description = detail.get("description") or ""
            score = score_task(task, description, query, now)
            if score is None:
                continue
            results.append(
                SearchResult(
                    id=str(task["id"]),
                    name=task.get("title") or "Untitled task",
                    type=ContentType.PLANNER,
                    score=score,
                    web_url=PLANNER_TASK_URL_TEMPLATE.format(host=self.task_host, task_id=task["id"]),
                    last_modified=detail.get("lastModifiedDateTime") or task.get("createdDateTime"),
                    preview=description,
                    plan_id=task.get("planId"),
                )
            )
        results.sort(key=lambda r: r.score, reverse=True)
        logger.debug("Planner search matched %d of %d tasks", len(results), len(tasks))
        return results

    async def _details(self, user_id: str, task_id: str) -> dict[str, Any]:
        try:
            return await self.graph.get(user_id, f"/planner/tasks/{task_id}/details")
        except SearchHubException as e:
            logger.warning("Could not load details for task %s: %s", task_id, e.message)
            return {}
