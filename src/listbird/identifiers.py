from __future__ import annotations

import re
from typing import Callable

from .errors import ClientError
from .types import UserIdResult

_NUMERIC_ID_REGEX = re.compile(r"^\d+$")

UsernameLookup = Callable[[str], UserIdResult]


def is_numeric_user_id(value: object) -> bool:
    return isinstance(value, str) and bool(_NUMERIC_ID_REGEX.match(value))


def _failure(kind, message: str, context: str | None, cause: object = None) -> UserIdResult:
    return {"success": False, "error": ClientError(kind=kind, message=message, context=context, cause=cause)}


def resolve_user_id(identifier: object, lookup: UsernameLookup) -> UserIdResult:
    """Turn a numeric id or a handle into a canonical numeric user id.

    Numeric input is returned trimmed and never touches ``lookup``. Anything
    else is treated as a handle (an optional leading ``@`` is dropped) and
    passed to ``lookup``, whose answer must itself be a numeric string.
    """
    if not isinstance(identifier, str) or not identifier.strip():
        return _failure("InvalidInput", "User identifier must be a non-empty string", None)

    clean = identifier.strip()
    if is_numeric_user_id(clean):
        return {"success": True, "userId": clean}

    username = clean[1:].strip() if clean.startswith("@") else clean
    if not username:
        return _failure("InvalidInput", "User identifier must be a non-empty string", clean)

    result = lookup(username)

    if not result.get("success"):
        cause = result.get("error")
        return _failure(
            "ResolutionFailed",
            f"Failed to resolve username {username}: {cause or 'Unknown error'}",
            username,
            cause,
        )

    user_id = result.get("userId")
    if not is_numeric_user_id(user_id):
        return _failure("InvalidResponse", f"Invalid user ID returned for username {username}", username, user_id)

    return {"success": True, "userId": user_id}
