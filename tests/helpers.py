from __future__ import annotations

import httpx

from listbird.twitter_client import TwitterClient

COOKIES = {"authToken": "token", "ct0": "csrf"}


def make_list(list_id: str = "123", name: str = "Tech", *, owner: dict | None = None, **extra) -> dict:
    list_result = {
        "id_str": list_id,
        "name": name,
        "description": "Tech people",
        "member_count": 5,
        "subscriber_count": 2,
        "created_at": "Mon Jan 01 00:00:00 +0000 2024",
        "user_results": {
            "result": owner
            if owner is not None
            else {
                "__typename": "User",
                "rest_id": "42",
                "is_blue_verified": True,
                "legacy": {"screen_name": "alice", "name": "Alice"},
            }
        },
    }
    list_result.update(extra)
    return list_result


def list_entry(list_result: dict) -> dict:
    return {"entryId": f"list-{list_result.get('id_str')}", "content": {"itemContent": {"list": list_result}}}


def cursor_entry(value: str, cursor_type: str = "Bottom") -> dict:
    return {
        "entryId": f"cursor-{cursor_type.lower()}-{value}",
        "content": {"entryType": "TimelineTimelineCursor", "cursorType": cursor_type, "value": value},
    }


def timeline_response(entries: list[dict], *, instruction_type: str = "TimelineAddEntries") -> dict:
    return {
        "data": {
            "user": {
                "result": {
                    "timeline": {
                        "timeline": {
                            "instructions": [
                                {"type": "TimelineClearCache"},
                                {"type": instruction_type, "entries": entries},
                            ]
                        }
                    }
                }
            }
        }
    }


class RecordingClient(TwitterClient):
    def __init__(self, responses: list[httpx.Response | Exception]):
        super().__init__({"cookies": COOKIES})
        self.responses = list(responses)
        self.urls: list[str] = []

    def _request(self, method: str, url: str, *, headers: dict[str, str]) -> httpx.Response:
        self.urls.append(url)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response
