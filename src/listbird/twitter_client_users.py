from __future__ import annotations

from .errors import ClientError
from .identifiers import resolve_user_id
from .twitter_client_base import TwitterClientBase
from .twitter_client_features import build_user_lookup_features
from .twitter_client_utils import build_graphql_url, dig
from .types import UserIdResult


class TwitterClientUsersMixin(TwitterClientBase):
    def get_user_id_by_screen_name(self, username: str) -> UserIdResult:
        variables = {"screen_name": username, "withSafetyModeUserFields": True}
        url = build_graphql_url(
            self._get_query_id("UserByScreenName"), "UserByScreenName", variables, build_user_lookup_features()
        )
        response = self._fetch_json(url, context=f"UserByScreenName screen_name={username}")
        if not response.get("success"):
            return {"success": False, "error": response["error"]}

        user_id = dig(response.get("data"), "data", "user", "result", "rest_id")
        if user_id is None:
            reason = dig(response.get("data"), "data", "user", "result", "reason")
            message = f"User @{username} not found" + (f" ({reason})" if reason else "")
            return {
                "success": False,
                "error": ClientError(kind="InvalidResponse", message=message, context=username),
            }
        # Shape is checked by resolve_user_id, not here.
        return {"success": True, "userId": user_id}

    def resolve_user_id(self, identifier: str) -> UserIdResult:
        return resolve_user_id(identifier, self.get_user_id_by_screen_name)
