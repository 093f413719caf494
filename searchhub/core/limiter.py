"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports. Limits are read from settings at request
time so tests can turn limiting off with RATE_LIMIT_ENABLED=false.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from searchhub.core.config import get_settings


def _search_limit() -> str:
    return get_settings().search_rate_limit


def _exempt_when_disabled() -> bool:
    return not get_settings().rate_limit_enabled


limiter = Limiter(key_func=get_remote_address)

limit_search = limiter.limit(_search_limit, exempt_when=_exempt_when_disabled)

# Fixed limit for workspace allow-list edits.
WRITE_ENDPOINT_LIMIT = "60/minute"

limit_writes = limiter.limit(WRITE_ENDPOINT_LIMIT, exempt_when=_exempt_when_disabled)
