"""Graph-backed search providers and the Teams chat directory."""

from searchhub.infrastructure.external.search.providers.email import OutlookMailProvider
from searchhub.infrastructure.external.search.providers.files import SharePointFileProvider
from searchhub.infrastructure.external.search.providers.planner import PlannerTaskProvider
from searchhub.infrastructure.external.search.providers.teams import TeamsMessageProvider
from searchhub.infrastructure.external.search.providers.teams_chats import TeamsChatDirectory

__all__ = [
    "OutlookMailProvider",
    "PlannerTaskProvider",
    "SharePointFileProvider",
    "TeamsChatDirectory",
    "TeamsMessageProvider",
]
