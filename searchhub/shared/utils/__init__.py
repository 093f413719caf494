"""Shared utilities: datetime, generators."""

from searchhub.shared.utils.datetime import parse_graph_datetime, utc_now
from searchhub.shared.utils.generators import generate_cuid

__all__ = [
    "generate_cuid",
    "parse_graph_datetime",
    "utc_now",
]
