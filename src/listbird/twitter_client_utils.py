from __future__ import annotations

from datetime import datetime
from email.utils import parsedate_to_datetime
import json
from typing import Any
from urllib.parse import quote, urlencode

from .errors import debug_log
from .twitter_client_constants import ADD_ENTRIES_INSTRUCTION, BOTTOM_CURSOR_TYPE, TWITTER_API_BASE
from .types import ListOwnerProfile, TwitterList


def dig(value: Any, *path: str) -> Any:
    """Walk ``path`` through nested mappings, returning None at the first gap.

    A segment that is missing, or a parent that is not a dict, short-circuits
    to None instead of raising.
    """
    current = value
    for key in path:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
        if current is None:
            return None
    return current


def build_graphql_url(query_id: str, operation: str, variables: dict, features: dict[str, bool]) -> str:
    params = urlencode(
        {
            "variables": json.dumps(variables, separators=(",", ":")),
            "features": json.dumps(features, separators=(",", ":")),
        },
        quote_via=quote,
    )
    return f"{TWITTER_API_BASE}/{query_id}/{operation}?{params}"


def parse_twitter_date(value: object) -> datetime | None:
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None


def find_timeline_entries(data: Any) -> list[dict] | None:
    instructions = dig(data, "data", "user", "result", "timeline", "timeline", "instructions")
    if not isinstance(instructions, list):
        return None
    for instruction in instructions:
        if isinstance(instruction, dict) and instruction.get("type") == ADD_ENTRIES_INSTRUCTION:
            entries = instruction.get("entries")
            if not isinstance(entries, list):
                return None
            return [entry for entry in entries if isinstance(entry, dict)]
    return None


def is_cursor_entry(entry: dict) -> bool:
    return dig(entry, "content", "cursorType") is not None


def extract_bottom_cursor(entries: list[dict] | None) -> str | None:
    for entry in entries or []:
        if dig(entry, "content", "cursorType") != BOTTOM_CURSOR_TYPE:
            continue
        value = dig(entry, "content", "value")
        if isinstance(value, str) and value:
            return value
        return None
    return None


def strip_cursor_entries(entries: list[dict] | None) -> list[dict]:
    return [entry for entry in entries or [] if not is_cursor_entry(entry)]


def _unwrap_user_result(user_result: Any) -> dict | None:
    if isinstance(user_result, dict) and user_result.get("__typename") == "UserWithVisibilityResults":
        user_result = user_result.get("user")
    return user_result if isinstance(user_result, dict) else None


def map_list_owner(user_result: dict) -> ListOwnerProfile:
    return {
        "userId": user_result.get("rest_id"),
        "username": dig(user_result, "legacy", "screen_name") or dig(user_result, "core", "screen_name"),
        "name": dig(user_result, "legacy", "name") or dig(user_result, "core", "name"),
        "isBlueVerified": user_result.get("is_blue_verified"),
    }


def map_list_result(list_result: Any) -> TwitterList | None:
    if not isinstance(list_result, dict):
        return None
    owner = _unwrap_user_result(dig(list_result, "user_results", "result"))
    if owner is None:
        debug_log("lists", f"Skipping list {list_result.get('id_str')!r} without a resolved owner")
        return None

    parsed: TwitterList = {
        "id": list_result.get("id_str"),
        "name": list_result.get("name"),
        "description": list_result.get("description"),
        "memberCount": list_result.get("member_count"),
        "subscriberCount": list_result.get("subscriber_count"),
        "createdAt": parse_twitter_date(list_result.get("created_at")),
        "ownerProfile": map_list_owner(owner),
    }
    banner_url = dig(list_result, "custom_banner_media", "media_info", "original_img_url")
    if banner_url is not None:
        parsed["bannerUrl"] = banner_url
    return parsed


def parse_lists_from_entries(entries: list[dict] | None) -> list[TwitterList]:
    lists: list[TwitterList] = []
    for entry in strip_cursor_entries(entries):
        mapped = map_list_result(dig(entry, "content", "itemContent", "list"))
        if mapped is not None:
            lists.append(mapped)
    return lists
