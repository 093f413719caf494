"""Cache key builders. Single place for key format.

Identifier components (user_id) must not contain CACHE_KEY_SEP to avoid
ambiguous or colliding keys. Free-text components go last.
"""

from searchhub.core.constants import (
    CACHE_KEY_SEP,
    CACHE_PREFIX_GRAPH_TOKEN,
    CACHE_PREFIX_TEAMS_CHATS,
)


def _validate_key_component(value: str, name: str) -> None:
    """Raise ValueError if value is empty or contains the cache key separator.

    Args:
        value: String component used in a cache key.
        name: Name of the component (for error message).

    Raises:
        ValueError: If value is empty or contains CACHE_KEY_SEP.
    """
    if not value:
        raise ValueError(f"Cache key component {name!r} must not be empty")
    if CACHE_KEY_SEP in value:
        raise ValueError(
            f"Cache key component {name!r} must not contain separator {CACHE_KEY_SEP!r}"
        )


def graph_token_key(user_id: str) -> str:
    """Cache key for a user's Microsoft Graph access token (written by the OAuth service)."""
    _validate_key_component(user_id, "user_id")
    return f"{CACHE_PREFIX_GRAPH_TOKEN}{CACHE_KEY_SEP}{user_id}"


def teams_chats_key(user_id: str, query: str | None = None) -> str:
    """Cache key for a user's Teams chat listing, optionally narrowed by topic query."""
    _validate_key_component(user_id, "user_id")
    return (
        f"{CACHE_PREFIX_TEAMS_CHATS}{CACHE_KEY_SEP}{user_id}"
        f"{CACHE_KEY_SEP}{(query or '').strip().lower()}"
    )
