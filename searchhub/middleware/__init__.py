"""HTTP middleware: timeout, request ID, correlation ID.

Applied in main app; order matters (last added = outermost).
"""

from searchhub.middleware.correlation_id import CorrelationIDMiddleware
from searchhub.middleware.request_id import RequestIDMiddleware
from searchhub.middleware.timeout import TimeoutMiddleware

__all__ = [
    "CorrelationIDMiddleware",
    "RequestIDMiddleware",
    "TimeoutMiddleware",
]
