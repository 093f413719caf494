"""Application services: pure ranking, filtering and spelling logic."""

from searchhub.application.services.result_merger import exclude_planner, merge_results
from searchhub.application.services.spelling_corrector import (
    SpellingCorrector,
    find_closest_match,
    levenshtein_distance,
    string_similarity,
    suggest_spelling_correction,
)
from searchhub.application.services.workspace_filter import (
    WorkspaceResourceFilter,
    normalize_site_url,
)

__all__ = [
    "SpellingCorrector",
    "WorkspaceResourceFilter",
    "exclude_planner",
    "find_closest_match",
    "levenshtein_distance",
    "merge_results",
    "normalize_site_url",
    "string_similarity",
    "suggest_spelling_correction",
]
