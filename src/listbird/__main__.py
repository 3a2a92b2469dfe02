from __future__ import annotations

import sys

from typer.main import get_command

from .cli import app

KNOWN_COMMANDS = {"lists", "resolve", "check"}
_VALUE_OPTIONS = {"--auth-token", "--ct0", "--chrome-profile", "--firefox-profile", "--cookie-source", "--timeout"}


def rewrite_argv(raw_args: list[str]) -> list[str]:
    """Treat ``listbird <user>`` as ``listbird lists <user>``."""
    args = raw_args[1:] if raw_args[:1] == ["--"] else raw_args
    if not args:
        return ["--help"]
    index = 0
    while index < len(args):
        arg = args[index]
        if not arg.startswith("-"):
            if arg in KNOWN_COMMANDS:
                return args
            return [*args[:index], "lists", *args[index:]]
        index += 2 if arg in _VALUE_OPTIONS else 1
    return args


def main() -> None:
    get_command(app).main(args=rewrite_argv(sys.argv[1:]), prog_name="listbird")


if __name__ == "__main__":
    main()
