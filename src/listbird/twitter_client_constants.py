from __future__ import annotations

TWITTER_API_BASE = "https://x.com/i/api/graphql"

QUERY_IDS = {
    "CombinedLists": "h1n9SzVAHCeWyVBcGqOgFA",
    "ListMemberships": "nRcU3YA0oMdrQYxK0zjkfQ",
    "UserByScreenName": "x3RLKWW1Tl7JgU7YtGxuzw",
}

ADD_ENTRIES_INSTRUCTION = "TimelineAddEntries"
BOTTOM_CURSOR_TYPE = "Bottom"

DEFAULT_OWNED_LISTS_COUNT = 100
DEFAULT_MEMBERSHIPS_COUNT = 20
