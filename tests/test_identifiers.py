import pytest

from listbird.errors import ClientError
from listbird.identifiers import is_numeric_user_id, resolve_user_id


class FakeLookup:
    def __init__(self, result=None, exc: Exception | None = None):
        self.result = result
        self.exc = exc
        self.calls: list[str] = []

    def __call__(self, username: str):
        self.calls.append(username)
        if self.exc is not None:
            raise self.exc
        return self.result


def test_is_numeric_user_id():
    assert is_numeric_user_id("42")
    assert not is_numeric_user_id("4a2")
    assert not is_numeric_user_id("")
    assert not is_numeric_user_id(42)


@pytest.mark.parametrize("identifier", [" 42 ", "42", "\t1234567890\n"])
def test_numeric_identifier_is_returned_without_lookup(identifier):
    lookup = FakeLookup()
    result = resolve_user_id(identifier, lookup)
    assert result == {"success": True, "userId": identifier.strip()}
    assert lookup.calls == []


@pytest.mark.parametrize("identifier", ["", "   ", None, 42, "@", " @ "])
def test_invalid_input(identifier):
    lookup = FakeLookup()
    result = resolve_user_id(identifier, lookup)
    assert result["success"] is False
    assert result["error"].kind == "InvalidInput"
    assert lookup.calls == []


def test_username_resolved_through_lookup():
    lookup = FakeLookup({"success": True, "userId": "99"})
    assert resolve_user_id("alice", lookup) == {"success": True, "userId": "99"}
    assert resolve_user_id(" @alice ", lookup) == {"success": True, "userId": "99"}
    assert lookup.calls == ["alice", "alice"]


def test_lookup_failure_is_wrapped_as_resolution_failed():
    cause = ClientError(kind="TransportFailure", message="HTTP 503: unavailable", context="UserByScreenName")
    result = resolve_user_id("alice", FakeLookup({"success": False, "error": cause}))

    assert result["success"] is False
    error = result["error"]
    assert error.kind == "ResolutionFailed"
    assert error.cause is cause
    assert error.context == "alice"
    assert "alice" in str(error)
    assert "HTTP 503" in str(error)


def test_lookup_bugs_are_not_swallowed():
    with pytest.raises(KeyError):
        resolve_user_id("alice", FakeLookup(exc=KeyError("rest_id")))


@pytest.mark.parametrize("user_id", ["alice", "", None, 99, "12a"])
def test_non_numeric_lookup_value_is_invalid_response(user_id):
    result = resolve_user_id("alice", FakeLookup({"success": True, "userId": user_id}))
    assert result["success"] is False
    assert result["error"].kind == "InvalidResponse"
    assert result["error"].context == "alice"
