"""Merging of per-provider result lists into one ranked list."""

from collections.abc import Iterable

from searchhub.application.dtos.search import SearchResult
from searchhub.domain.enums import ContentType


def merge_results(*result_lists: Iterable[SearchResult]) -> list[SearchResult]:
    """Concatenate lists in the given order and sort by score, highest first.

    The sort is stable, so equal scores keep provider order and each
    provider's own order. Scores are used as-is, without normalization.
    """
    merged: list[SearchResult] = []
    for results in result_lists:
        merged.extend(results)
    merged.sort(key=lambda result: result.score, reverse=True)
    return merged


def exclude_planner(results: Iterable[SearchResult]) -> list[SearchResult]:
    """Drop Planner tasks; unified search never returns them."""
    return [result for result in results if result.type != ContentType.PLANNER]
