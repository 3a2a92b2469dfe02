import json

from listbird.runtime_features import FEATURES_ENV_VAR, apply_feature_overrides, load_feature_overrides
from listbird.twitter_client_features import (
    LISTS_FEATURES,
    USER_LOOKUP_FEATURES,
    build_lists_features,
    build_user_lookup_features,
)


def test_no_overrides_returns_base_unchanged(monkeypatch):
    monkeypatch.delenv(FEATURES_ENV_VAR, raising=False)
    base = {"a": True}
    assert apply_feature_overrides("lists", base) is base
    assert build_lists_features() == dict(LISTS_FEATURES)


def test_global_overrides_apply_to_every_set(monkeypatch):
    monkeypatch.setenv(
        FEATURES_ENV_VAR,
        json.dumps(
            {
                "global": {"verified_phone_label_enabled": True, "ignored": 1},
                "sets": {"lists": {"verified_phone_label_enabled": False}},
            }
        ),
    )

    lookup = build_user_lookup_features()
    lists = build_lists_features()

    assert lookup["verified_phone_label_enabled"] is True
    assert "ignored" not in lookup
    # set overrides win over global ones
    assert lists["verified_phone_label_enabled"] is False
    assert USER_LOOKUP_FEATURES["verified_phone_label_enabled"] is False


def test_unparseable_overrides_are_ignored(monkeypatch, capsys):
    monkeypatch.setenv(FEATURES_ENV_VAR, "{not json")
    monkeypatch.setenv("LISTBIRD_DEBUG", "1")

    assert load_feature_overrides() == {"global": {}, "sets": {}}
    assert build_lists_features() == dict(LISTS_FEATURES)
    assert f"Ignoring unparseable {FEATURES_ENV_VAR}" in capsys.readouterr().err


def test_non_object_overrides_are_ignored(monkeypatch):
    monkeypatch.setenv(FEATURES_ENV_VAR, json.dumps(["global"]))
    assert load_feature_overrides() == {"global": {}, "sets": {}}
