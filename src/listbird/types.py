from __future__ import annotations

from datetime import datetime
from typing import Any, Literal, TypedDict

from .errors import ClientError


class TwitterCookies(TypedDict, total=False):
    authToken: str | None
    ct0: str | None
    cookieHeader: str | None
    source: str | None


class CookieExtractionResult(TypedDict):
    cookies: TwitterCookies
    warnings: list[str]


CookieSource = Literal["safari", "chrome", "firefox"]


class ListOwnerProfile(TypedDict):
    userId: str | None
    username: str | None
    name: str | None
    isBlueVerified: bool | None


class TwitterList(TypedDict, total=False):
    id: str
    name: str
    description: str
    memberCount: int
    subscriberCount: int
    createdAt: datetime | None
    bannerUrl: str
    ownerProfile: ListOwnerProfile


class JsonResult(TypedDict, total=False):
    success: bool
    data: Any
    error: ClientError


class ListsResult(TypedDict, total=False):
    success: bool
    lists: list[TwitterList]
    error: ClientError


class ListMembershipsResult(TypedDict, total=False):
    success: bool
    lists: list[TwitterList]
    nextCursor: str
    error: ClientError


class UserIdResult(TypedDict, total=False):
    success: bool
    userId: str
    error: ClientError


class TwitterClientOptions(TypedDict, total=False):
    cookies: TwitterCookies
    userAgent: str
    timeoutMs: int
    queryIds: dict[str, str]
