from .cookies import resolve_credentials
from .errors import ClientError
from .identifiers import resolve_user_id
from .twitter_client import TwitterClient
from .twitter_client_features import LISTS_FEATURES
from .twitter_client_utils import extract_bottom_cursor, find_timeline_entries, parse_lists_from_entries
from .types import (
    ListMembershipsResult,
    ListOwnerProfile,
    ListsResult,
    TwitterCookies,
    TwitterList,
    UserIdResult,
)

__all__ = [
    "ClientError",
    "LISTS_FEATURES",
    "ListMembershipsResult",
    "ListOwnerProfile",
    "ListsResult",
    "TwitterClient",
    "TwitterCookies",
    "TwitterList",
    "UserIdResult",
    "extract_bottom_cursor",
    "find_timeline_entries",
    "parse_lists_from_entries",
    "resolve_credentials",
    "resolve_user_id",
]
