"""Core constants: cache key prefixes and shared literal values."""

# Cache key prefixes
CACHE_PREFIX_GRAPH_TOKEN = "graph_token"
CACHE_PREFIX_TEAMS_CHATS = "teams_chats"

# Delimiter for composite keys
CACHE_KEY_SEP = ":"

# Queries shorter than this are never spell-corrected.
MIN_CORRECTABLE_QUERY_LENGTH = 3

# A fuzzy suggestion must be strictly more similar than this.
SPELLING_SIMILARITY_THRESHOLD = 0.8

# Teams message excerpts used as result names.
TEAMS_EXCERPT_LENGTH = 100

# Planner deep links.
PLANNER_TASK_URL_TEMPLATE = "https://tasks.office.com/{host}/Home/Task/{task_id}"
