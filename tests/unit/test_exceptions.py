"""Exception payloads and their HTTP status mapping."""

import pytest

from searchhub.core.exception_handlers import _status_for
from searchhub.domain.exceptions import (
    DuplicateResourceException,
    MissingParameterException,
    ResourceNotFoundException,
    SearchHubException,
    SqlNotConfiguredException,
    ValidationException,
)
from searchhub.infrastructure.exceptions import (
    UpstreamAuthException,
    UpstreamTransportException,
)


def test_missing_parameter_body() -> None:
    assert MissingParameterException("userId").to_dict() == {
        "error": "Missing required parameter: userId",
        "error_code": "MISSING_PARAMETER",
        "details": {"parameter": "userId"},
    }


def test_error_code_defaults_to_class_name() -> None:
    assert SearchHubException("boom").error_code == "SearchHubException"


def test_upstream_auth_details() -> None:
    exc = UpstreamAuthException("expired", 403, "u1")
    assert exc.details == {"reason": "expired", "status_code": 403, "user_id": "u1"}
    assert exc.message == "Microsoft Graph authorization failed: expired"


@pytest.mark.parametrize(
    ("exc", "status"),
    [
        (MissingParameterException("q"), 400),
        (ValidationException("bad", "resourceType"), 400),
        (ResourceNotFoundException("workspace_resource", "r1"), 404),
        (DuplicateResourceException("w1", "site", "s1"), 409),
        (SqlNotConfiguredException(), 503),
        (UpstreamAuthException("expired"), 401),
        (UpstreamAuthException("forbidden", 403), 403),
        (UpstreamTransportException("down", "/me", 502), 500),
        (SearchHubException("other"), 400),
    ],
)
def test_status_mapping(exc: SearchHubException, status: int) -> None:
    assert _status_for(exc) == status
