from __future__ import annotations

from dataclasses import dataclass
import json
import os
import sys
from typing import Literal

ErrorKind = Literal["TransportFailure", "InvalidInput", "ResolutionFailed", "InvalidResponse"]


@dataclass(frozen=True)
class ClientError:
    """Failure carried in the ``error`` key of every unsuccessful result.

    ``context`` names what was being fetched or resolved (an operation name, a
    user id, a handle). ``cause`` holds the underlying ClientError, exception or
    upstream message, unchanged.
    """

    kind: ErrorKind
    message: str
    context: str | None = None
    cause: object = None

    def __str__(self) -> str:
        return self.message


def debug_enabled() -> bool:
    return os.environ.get("LISTBIRD_DEBUG") == "1"


def debug_log(scope: str, message: str, payload: object = None) -> None:
    if not debug_enabled():
        return
    line = f"[listbird][debug][{scope}] {message}"
    if payload is not None:
        line = f"{line} {json.dumps(payload, indent=2, default=str)}"
    print(line, file=sys.stderr)
