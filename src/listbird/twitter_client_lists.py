from __future__ import annotations

from .twitter_client_base import TwitterClientBase
from .twitter_client_constants import DEFAULT_MEMBERSHIPS_COUNT, DEFAULT_OWNED_LISTS_COUNT
from .twitter_client_features import build_lists_features
from .twitter_client_utils import (
    build_graphql_url,
    extract_bottom_cursor,
    find_timeline_entries,
    parse_lists_from_entries,
)
from .types import ListMembershipsResult, ListsResult


class TwitterClientListsMixin(TwitterClientBase):
    def get_lists_by_user(self, user_id: str, count: int = DEFAULT_OWNED_LISTS_COUNT) -> ListsResult:
        # count is only a hint; the endpoint returns a single page with no cursor.
        variables = {"userId": user_id, "count": count}
        url = build_graphql_url(
            self._get_query_id("CombinedLists"), "CombinedLists", variables, build_lists_features()
        )
        response = self._fetch_json(url, context=f"CombinedLists userId={user_id}")
        if not response.get("success"):
            return {"success": False, "error": response["error"]}

        entries = find_timeline_entries(response.get("data"))
        return {"success": True, "lists": parse_lists_from_entries(entries)}

    def get_lists_by_member(
        self,
        user_id: str,
        count: int | None = DEFAULT_MEMBERSHIPS_COUNT,
        cursor: str | None = None,
    ) -> ListMembershipsResult:
        variables = {"userId": user_id, "count": count or DEFAULT_MEMBERSHIPS_COUNT}
        if cursor:
            variables["cursor"] = cursor
        url = build_graphql_url(
            self._get_query_id("ListMemberships"), "ListMemberships", variables, build_lists_features()
        )
        response = self._fetch_json(url, context=f"ListMemberships userId={user_id}")
        if not response.get("success"):
            return {"success": False, "error": response["error"]}

        entries = find_timeline_entries(response.get("data"))
        result: ListMembershipsResult = {"success": True, "lists": parse_lists_from_entries(entries)}
        next_cursor = extract_bottom_cursor(entries)
        if next_cursor:
            result["nextCursor"] = next_cursor
        return result
