from __future__ import annotations

import json
import os

from .errors import debug_log

FEATURES_ENV_VAR = "LISTBIRD_FEATURES_JSON"


def _normalize_feature_map(value: object) -> dict[str, bool]:
    if not isinstance(value, dict):
        return {}
    return {key: val for key, val in value.items() if isinstance(val, bool)}


def _normalize_overrides(value: object) -> dict:
    if not isinstance(value, dict):
        return {"global": {}, "sets": {}}
    sets: dict[str, dict[str, bool]] = {}
    raw_sets = value.get("sets") if isinstance(value.get("sets"), dict) else {}
    for name, entry in raw_sets.items():
        normalized = _normalize_feature_map(entry)
        if normalized:
            sets[name] = normalized
    return {"global": _normalize_feature_map(value.get("global")), "sets": sets}


def load_feature_overrides() -> dict:
    raw = os.environ.get(FEATURES_ENV_VAR)
    if not raw:
        return {"global": {}, "sets": {}}
    try:
        return _normalize_overrides(json.loads(raw))
    except ValueError as exc:
        debug_log("features", f"Ignoring unparseable {FEATURES_ENV_VAR}: {exc}")
        return {"global": {}, "sets": {}}


def apply_feature_overrides(set_name: str, base: dict[str, bool]) -> dict[str, bool]:
    overrides = load_feature_overrides()
    global_overrides = overrides["global"]
    set_overrides = overrides["sets"].get(set_name)
    if not global_overrides and not set_overrides:
        return base
    return {**base, **global_overrides, **(set_overrides or {})}
