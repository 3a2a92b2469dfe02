from __future__ import annotations

import secrets
import uuid
from typing import Any

import httpx

from .errors import ClientError, debug_log
from .twitter_client_constants import QUERY_IDS
from .types import JsonResult, TwitterClientOptions

_BEARER_TOKEN = (
    "Bearer AAAAAAAAAAAAAAAAAAAAANRILgAAAAAAnNwIzUejRCOuH5E6I8xnZz4puTs%3D"
    "1Zv7ttfk8LF81IUq16cHjhLTvJu4FA33AGWWjCpTnA"
)


class TwitterClientBase:
    def __init__(self, options: TwitterClientOptions):
        cookies = options.get("cookies")
        if not cookies or not cookies.get("authToken") or not cookies.get("ct0"):
            raise ValueError("Both authToken and ct0 cookies are required")
        self.auth_token = cookies["authToken"]
        self.ct0 = cookies["ct0"]
        self.cookie_header = cookies.get("cookieHeader") or f"auth_token={self.auth_token}; ct0={self.ct0}"
        self.user_agent = options.get(
            "userAgent",
            "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36",
        )
        self.timeout_ms = options.get("timeoutMs")
        self.query_ids = {**QUERY_IDS, **(options.get("queryIds") or {})}
        self.client_uuid = str(uuid.uuid4())
        self.client_device_id = str(uuid.uuid4())

    def _get_query_id(self, operation_name: str) -> str:
        return self.query_ids[operation_name]

    def _request(self, method: str, url: str, *, headers: dict[str, str]) -> httpx.Response:
        timeout = None
        if self.timeout_ms and self.timeout_ms > 0:
            timeout = self.timeout_ms / 1000
        return httpx.request(method, url, headers=headers, timeout=timeout)

    def _fetch_json(self, url: str, *, context: str) -> JsonResult:
        """GET ``url`` and return its decoded body, or a TransportFailure.

        HTTP errors, undecodable bodies and GraphQL ``errors`` arrays are all
        reported as failures; nothing is retried.
        """
        try:
            response = self._request("GET", url, headers=self._get_headers())
        except (httpx.HTTPError, ValueError) as exc:
            # ValueError covers headers httpx cannot encode, e.g. non-ASCII cookies.
            debug_log("transport", f"{context}: request failed: {exc}")
            return self._transport_failure(str(exc), context, exc)

        if response.status_code >= 400:
            debug_log("transport", f"{context}: HTTP {response.status_code}", {"body": response.text[:500]})
            return self._transport_failure(
                f"HTTP {response.status_code}: {response.text[:200]}", context, response.status_code
            )

        try:
            data = response.json()
        except ValueError as exc:
            debug_log("transport", f"{context}: invalid JSON body", {"body": response.text[:500]})
            return self._transport_failure(f"Invalid JSON response: {exc}", context, exc)

        errors = data.get("errors") if isinstance(data, dict) else None
        if errors:
            debug_log("transport", f"{context}: GraphQL errors", errors)
            messages = [
                err["message"]
                for err in (errors if isinstance(errors, list) else [])
                if isinstance(err, dict) and isinstance(err.get("message"), str)
            ]
            message = ", ".join(messages)
            return self._transport_failure(message or "Unknown GraphQL error", context, errors)

        return {"success": True, "data": data}

    def _transport_failure(self, message: str, context: str, cause: Any) -> JsonResult:
        return {
            "success": False,
            "error": ClientError(kind="TransportFailure", message=message, context=context, cause=cause),
        }

    def _get_headers(self) -> dict[str, str]:
        return {
            "accept": "*/*",
            "accept-language": "en-US,en;q=0.9",
            "authorization": _BEARER_TOKEN,
            "content-type": "application/json",
            "x-csrf-token": self.ct0,
            "x-twitter-auth-type": "OAuth2Session",
            "x-twitter-active-user": "yes",
            "x-twitter-client-language": "en",
            "x-client-uuid": self.client_uuid,
            "x-twitter-client-deviceid": self.client_device_id,
            "x-client-transaction-id": secrets.token_hex(16),
            "cookie": self.cookie_header,
            "user-agent": self.user_agent,
            "origin": "https://x.com",
            "referer": "https://x.com/",
        }
