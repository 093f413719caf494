"""Application ports implemented by infrastructure."""

from searchhub.application.interfaces.providers import SearchProvider
from searchhub.application.interfaces.repositories import IWorkspaceResourceRepository
from searchhub.application.interfaces.services import (
    IAccessTokenProvider,
    ISpellingCorrector,
    ITeamsChatDirectory,
)

__all__ = [
    "IAccessTokenProvider",
    "ISpellingCorrector",
    "ITeamsChatDirectory",
    "IWorkspaceResourceRepository",
    "SearchProvider",
]
