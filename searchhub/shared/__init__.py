"""Shared utilities: request context, telemetry, and cross-cutting helpers.

Used by application, infrastructure and presentation. No business logic.
"""

from searchhub.shared.context import (
    get_correlation_id,
    get_request_id,
    set_correlation_id,
    set_request_id,
)
from searchhub.shared.utils import generate_cuid, parse_graph_datetime, utc_now

__all__ = [
    "get_correlation_id",
    "get_request_id",
    "set_correlation_id",
    "set_request_id",
    "generate_cuid",
    "parse_graph_datetime",
    "utc_now",
]
