"""Infrastructure exceptions for Microsoft Graph calls.

Graph errors extend SearchHubException so presentation can map them to
HTTP responses consistently. Providers raise these; the unified search
fan-out absorbs them, the site-scoped path lets them propagate.
"""

from searchhub.domain.exceptions import SearchHubException


class UpstreamException(SearchHubException):
    """Base exception for failures talking to Microsoft Graph."""


class UpstreamAuthException(UpstreamException):
    """Graph rejected the credentials (401/403) or no token is stored for the user."""

    def __init__(self, reason: str, status_code: int = 401, user_id: str | None = None) -> None:
        details: dict[str, object] = {"reason": reason, "status_code": status_code}
        if user_id:
            details["user_id"] = user_id
        super().__init__(
            f"Microsoft Graph authorization failed: {reason}",
            "UPSTREAM_AUTH_ERROR",
            details,
        )
        self.status_code = status_code


class UpstreamTransportException(UpstreamException):
    """Network error, timeout, unexpected status or malformed body from Graph."""

    def __init__(self, reason: str, path: str | None = None, status_code: int | None = None) -> None:
        details: dict[str, object] = {"reason": reason}
        if path:
            details["path"] = path
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(
            f"Microsoft Graph request failed: {reason}",
            "UPSTREAM_TRANSPORT_ERROR",
            details,
        )
