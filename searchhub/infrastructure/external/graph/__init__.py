"""Microsoft Graph access: REST client and token lookup."""

from searchhub.infrastructure.external.graph.client import GraphClient
from searchhub.infrastructure.external.graph.tokens import CacheAccessTokenProvider

__all__ = ["CacheAccessTokenProvider", "GraphClient"]
