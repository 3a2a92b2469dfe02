import json
from urllib.parse import parse_qs, urlsplit

import httpx
from helpers import RecordingClient


def _user_response(result: dict) -> dict:
    return {"data": {"user": {"result": result}}}


def test_get_user_id_by_screen_name():
    client = RecordingClient([httpx.Response(200, json=_user_response({"__typename": "User", "rest_id": "99"}))])
    assert client.get_user_id_by_screen_name("alice") == {"success": True, "userId": "99"}

    url = client.urls[0]
    assert "/x3RLKWW1Tl7JgU7YtGxuzw/UserByScreenName?" in url
    variables = json.loads(parse_qs(urlsplit(url).query)["variables"][0])
    assert variables["screen_name"] == "alice"


def test_get_user_id_by_screen_name_unknown_user():
    body = _user_response({"__typename": "UserUnavailable", "reason": "Suspended"})
    result = RecordingClient([httpx.Response(200, json=body)]).get_user_id_by_screen_name("ghost")

    assert result["success"] is False
    assert result["error"].kind == "InvalidResponse"
    assert "Suspended" in str(result["error"])


def test_resolve_numeric_identifier_does_no_io():
    client = RecordingClient([])
    assert client.resolve_user_id(" 42 ") == {"success": True, "userId": "42"}
    assert client.urls == []


def test_resolve_username():
    client = RecordingClient([httpx.Response(200, json=_user_response({"rest_id": "99"}))])
    assert client.resolve_user_id("alice") == {"success": True, "userId": "99"}
    assert len(client.urls) == 1


def test_resolve_username_transport_failure():
    client = RecordingClient([httpx.Response(404, text="Not Found")])
    result = client.resolve_user_id("alice")

    assert result["success"] is False
    assert result["error"].kind == "ResolutionFailed"
    assert result["error"].cause.kind == "TransportFailure"


def test_resolve_username_with_non_numeric_rest_id():
    client = RecordingClient([httpx.Response(200, json=_user_response({"rest_id": "VXNlcjo0Mg=="}))])
    result = client.resolve_user_id("alice")
    assert result["error"].kind == "InvalidResponse"


def test_resolve_user_id_reports_connection_errors_as_resolution_failed():
    client = RecordingClient([httpx.ConnectError("connection refused")])
    result = client.resolve_user_id("@alice")

    assert result["success"] is False
    error = result["error"]
    assert error.kind == "ResolutionFailed"
    assert error.context == "alice"
    assert error.cause.kind == "TransportFailure"
    assert isinstance(error.cause.cause, httpx.ConnectError)
