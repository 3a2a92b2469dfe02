from __future__ import annotations

from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version
import json
import os
import sys
from typing import List

import typer

from .config import ListbirdConfig, load_config
from .cookies import DEFAULT_COOKIE_SOURCES, resolve_credentials
from .output import (
    OutputConfig,
    format_list_lines,
    label_prefix,
    resolve_output_config,
    serialize_list,
    status_prefix,
)
from .twitter_client import TwitterClient
from .twitter_client_constants import DEFAULT_OWNED_LISTS_COUNT

app = typer.Typer(add_completion=False, help="Fetch X lists by owner or membership.")


def get_cli_version() -> str:
    try:
        return version("listbird")
    except PackageNotFoundError:
        return "0.0.0+dev"


def _parse_cookie_source(value: str) -> str:
    normalized = value.strip().lower()
    if normalized in DEFAULT_COOKIE_SOURCES:
        return normalized
    raise typer.BadParameter(f"Invalid --cookie-source '{value}'. Allowed: safari, chrome, firefox.")


def _resolve_cookie_source_order(input_value: object) -> list[str] | None:
    if isinstance(input_value, str):
        return [_parse_cookie_source(input_value)]
    if isinstance(input_value, list):
        return [_parse_cookie_source(entry) for entry in input_value if isinstance(entry, str)] or None
    return None


def _resolve_timeout_ms(*values) -> int | None:
    for value in values:
        if value is None or value == "":
            continue
        try:
            parsed = int(value)
        except (TypeError, ValueError):
            continue
        if parsed > 0:
            return parsed
    return None


@dataclass
class CliContext:
    output: OutputConfig
    config: ListbirdConfig
    global_opts: dict

    def p(self, kind: str) -> str:
        return status_prefix(kind, self.output)

    def l(self, kind: str) -> str:
        return label_prefix(kind, self.output)

    def fail(self, message: str, code: int = 1) -> None:
        typer.echo(f"{self.p('err')}{message}", err=True)
        raise typer.Exit(code=code)

    def resolve_credentials(self) -> dict:
        opts = self.global_opts
        raw_sources = opts.get("cookie_source") or []
        cookie_source = [_parse_cookie_source(value) for value in raw_sources] or _resolve_cookie_source_order(
            self.config.cookieSource
        )
        return resolve_credentials(
            auth_token=opts.get("auth_token"),
            ct0=opts.get("ct0"),
            cookie_source=cookie_source,
            chrome_profile=opts.get("chrome_profile") or self.config.chromeProfile,
            firefox_profile=opts.get("firefox_profile") or self.config.firefoxProfile,
        )

    def build_client(self) -> TwitterClient:
        res = self.resolve_credentials()
        for warning in res["warnings"]:
            typer.echo(f"{self.p('warn')}{warning}", err=True)
        cookies = res["cookies"]
        if not cookies.get("authToken") or not cookies.get("ct0"):
            self.fail("Missing required credentials")
        timeout_ms = _resolve_timeout_ms(
            self.global_opts.get("timeout"), self.config.timeoutMs, os.environ.get("LISTBIRD_TIMEOUT_MS")
        )
        return TwitterClient({"cookies": cookies, "timeoutMs": timeout_ms, "queryIds": self.config.queryIds})


def _build_context(ctx: typer.Context) -> CliContext:
    output = resolve_output_config(ctx.obj.get("output_opts", {}), dict(os.environ), sys.stdout.isatty())
    config = load_config(lambda message: typer.echo(message, err=True))
    return CliContext(output=output, config=config, global_opts=ctx.obj["global_opts"])


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(get_cli_version())
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    auth_token: str | None = typer.Option(None, "--auth-token", help="Twitter auth_token cookie"),
    ct0: str | None = typer.Option(None, "--ct0", help="Twitter ct0 cookie"),
    chrome_profile: str | None = typer.Option(None, "--chrome-profile", help="Chrome profile name for cookie extraction"),
    firefox_profile: str | None = typer.Option(None, "--firefox-profile", help="Firefox profile name for cookie extraction"),
    cookie_source: List[str] = typer.Option(None, "--cookie-source", help="Browser to read cookies from (repeatable)"),
    timeout: str | None = typer.Option(None, "--timeout", help="Request timeout in milliseconds"),
    plain: bool = typer.Option(False, "--plain", help="Plain output (stable, no emoji, no color)"),
    no_emoji: bool = typer.Option(False, "--no-emoji", help="Disable emoji output"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable ANSI colors (or set NO_COLOR)"),
    show_version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Print the version and exit"
    ),
):
    if ctx.obj is None:
        ctx.obj = {}
    ctx.obj["output_opts"] = {"plain": plain, "emoji": not no_emoji, "color": not no_color}
    ctx.obj["global_opts"] = {
        "auth_token": auth_token,
        "ct0": ct0,
        "chrome_profile": chrome_profile,
        "firefox_profile": firefox_profile,
        "cookie_source": cookie_source or [],
        "timeout": timeout,
    }
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


@app.command("resolve")
def resolve_command(
    ctx: typer.Context,
    identifier: str = typer.Argument(..., help="Numeric user ID, handle or @handle"),
    json_output: bool = typer.Option(False, "--json"),
) -> None:
    context = _build_context(ctx)
    client = context.build_client()
    result = client.resolve_user_id(identifier)
    if not result.get("success"):
        error = result["error"]
        context.fail(f"{error.kind}: {error}", code=2 if error.kind == "InvalidInput" else 1)

    if json_output:
        typer.echo(json.dumps({"identifier": identifier, "userId": result["userId"]}, indent=2))
        return
    typer.echo(f"{context.l('userId')}{result['userId']}")


@app.command("lists")
def lists_command(
    ctx: typer.Context,
    user: str = typer.Argument(..., help="Numeric user ID, handle or @handle"),
    member_of: bool = typer.Option(False, "--member-of", help="Lists the user is a member of instead of owned lists"),
    count: int | None = typer.Option(None, "-n", "--count"),
    cursor: str | None = typer.Option(None, "--cursor", help="Continue a --member-of listing from a previous page"),
    json_output: bool = typer.Option(False, "--json"),
) -> None:
    context = _build_context(ctx)
    if count is not None and count <= 0:
        context.fail("Invalid --count. Expected a positive integer.")
    if cursor and not member_of:
        context.fail("--cursor is only supported together with --member-of.", code=2)

    client = context.build_client()
    resolved = client.resolve_user_id(user)
    if not resolved.get("success"):
        error = resolved["error"]
        context.fail(f"Could not resolve user {user!r}: {error}", code=2 if error.kind == "InvalidInput" else 1)
    user_id = resolved["userId"]

    if member_of:
        result = client.get_lists_by_member(user_id, count, cursor)
    else:
        result = client.get_lists_by_user(user_id, count or DEFAULT_OWNED_LISTS_COUNT)
    if not result.get("success"):
        context.fail(f"Failed to fetch lists: {result['error']}")

    lists = result.get("lists") or []
    next_cursor = result.get("nextCursor")
    if json_output:
        payload: dict = {"userId": user_id, "lists": [serialize_list(entry) for entry in lists]}
        if member_of:
            payload["nextCursor"] = next_cursor
        typer.echo(json.dumps(payload, indent=2))
        return

    if not lists:
        typer.echo("This user is not a member of any lists." if member_of else "This user does not own any lists.")
    for entry in lists:
        for line in format_list_lines(entry, context.output):
            typer.echo(line)
        typer.echo("-" * 50)
    if next_cursor:
        typer.echo(f"{context.l('cursor')}{next_cursor}")


@app.command("check")
def check_command(ctx: typer.Context) -> None:
    context = _build_context(ctx)
    res = context.resolve_credentials()

    typer.echo(f"{context.p('info')}Credential check")
    typer.echo("-" * 40)

    cookies = res["cookies"]
    for field, label in (("authToken", "auth_token"), ("ct0", "ct0")):
        if cookies.get(field):
            typer.echo(f"{context.p('ok')}{label}: {cookies[field][:10]}...")
        else:
            typer.echo(f"{context.p('err')}{label}: not found")

    if cookies.get("source"):
        typer.echo(f"{context.l('source')}{cookies['source']}")

    if res["warnings"]:
        typer.echo(f"\n{context.p('warn')}Warnings:")
        for warning in res["warnings"]:
            typer.echo(f"   - {warning}")

    if cookies.get("authToken") and cookies.get("ct0"):
        typer.echo(f"\n{context.p('ok')}Ready to fetch lists.")
        return

    typer.echo(f"\n{context.p('err')}Missing credentials. Options:")
    typer.echo("   1. Login to x.com in Safari/Chrome/Firefox")
    typer.echo("   2. Set AUTH_TOKEN and CT0 environment variables")
    typer.echo("   3. Use --auth-token and --ct0 flags")
    raise typer.Exit(code=1)
