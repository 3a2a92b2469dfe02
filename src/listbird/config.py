from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

import json5

from .types import CookieSource


@dataclass(frozen=True)
class ListbirdConfig:
    chromeProfile: str | None = None
    firefoxProfile: str | None = None
    cookieSource: CookieSource | list[CookieSource] | None = None
    timeoutMs: int | None = None
    queryIds: dict[str, str] = field(default_factory=dict)


def _read_config_file(path: Path, warn: Callable[[str], None]) -> dict:
    if not path.exists():
        return {}
    try:
        parsed = json5.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        warn(f"Failed to parse config at {path}: {exc}")
        return {}
    return parsed if isinstance(parsed, dict) else {}


def _string_map(value: object) -> dict[str, str]:
    if not isinstance(value, dict):
        return {}
    return {key: val for key, val in value.items() if isinstance(key, str) and isinstance(val, str) and val}


def load_config(
    warn: Callable[[str], None],
    *,
    global_path: Path | None = None,
    local_path: Path | None = None,
) -> ListbirdConfig:
    global_path = global_path or Path.home() / ".config" / "listbird" / "config.json5"
    local_path = local_path or Path.cwd() / ".listbirdrc.json5"

    merged: dict = {}
    merged.update(_read_config_file(global_path, warn))
    merged.update(_read_config_file(local_path, warn))

    return ListbirdConfig(
        chromeProfile=merged.get("chromeProfile"),
        firefoxProfile=merged.get("firefoxProfile"),
        cookieSource=merged.get("cookieSource"),
        timeoutMs=merged.get("timeoutMs"),
        queryIds=_string_map(merged.get("queryIds")),
    )
