from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .types import TwitterList

StatusKind = Literal["ok", "warn", "err", "info"]
LabelKind = Literal["url", "date", "source", "user", "userId", "cursor"]

ANSI_RESET = "\x1b[0m"
_ANSI = {
    "bold": "\x1b[1m",
    "cyan": "\x1b[36m",
    "magenta": "\x1b[35m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "red": "\x1b[31m",
    "gray": "\x1b[90m",
}


@dataclass(frozen=True)
class OutputConfig:
    plain: bool
    emoji: bool
    color: bool


_STATUS = {
    "ok": {"emoji": "✅", "text": "OK:", "plain": "[ok]", "color": "green"},
    "warn": {"emoji": "⚠️", "text": "Warning:", "plain": "[warn]", "color": "yellow"},
    "err": {"emoji": "❌", "text": "Error:", "plain": "[err]", "color": "red"},
    "info": {"emoji": "ℹ️", "text": "Info:", "plain": "[info]", "color": "cyan"},
}

_LABELS = {
    "url": {"emoji": "🔗", "text": "URL:", "plain": "url:"},
    "date": {"emoji": "📅", "text": "Created:", "plain": "created:"},
    "source": {"emoji": "📍", "text": "Source:", "plain": "source:"},
    "user": {"emoji": "🙋", "text": "Owner:", "plain": "owner:"},
    "userId": {"emoji": "🪪", "text": "User ID:", "plain": "user_id:"},
    "cursor": {"emoji": "➡️", "text": "Next cursor:", "plain": "next_cursor:"},
}


def style_text(text: str, *, color: str | None = None, bold: bool = False, enabled: bool = True) -> str:
    if not enabled:
        return text
    output = text
    if color:
        output = f"{_ANSI[color]}{output}{ANSI_RESET}"
    if bold:
        output = f"{_ANSI['bold']}{output}{ANSI_RESET}"
    return output


def resolve_output_config(opts: dict[str, bool | None], env: dict[str, str], is_tty: bool) -> OutputConfig:
    has_no_color_env = "NO_COLOR" in env or env.get("TERM") == "dumb"
    plain = bool(opts.get("plain"))
    emoji = not plain and opts.get("emoji") is not False
    color = not plain and opts.get("color") is not False and is_tty and not has_no_color_env
    return OutputConfig(plain=plain, emoji=emoji, color=color)


def _prefix(entry: dict[str, str], cfg: OutputConfig) -> str:
    if cfg.plain:
        return f"{entry['plain']} "
    if cfg.emoji:
        return f"{entry['emoji']} "
    return f"{entry['text']} "


def status_prefix(kind: StatusKind, cfg: OutputConfig) -> str:
    prefix = _prefix(_STATUS[kind], cfg)
    return style_text(prefix, color=_STATUS[kind]["color"], enabled=cfg.color)


def label_prefix(kind: LabelKind, cfg: OutputConfig) -> str:
    return _prefix(_LABELS[kind], cfg)


def format_list_url(list_id: str) -> str:
    return f"https://x.com/i/lists/{list_id}"


def format_list_lines(entry: TwitterList, cfg: OutputConfig) -> list[str]:
    lines = [style_text(str(entry.get("name") or ""), bold=True, enabled=cfg.color)]
    description = entry.get("description")
    if description:
        lines.append(f"  {description[:100]}{'...' if len(description) > 100 else ''}")
    lines.append(f"  {status_prefix('info', cfg)}{entry.get('memberCount') or 0} members, {entry.get('subscriberCount') or 0} subscribers")
    owner = entry.get("ownerProfile") or {}
    if owner.get("username"):
        verified = " [verified]" if owner.get("isBlueVerified") else ""
        lines.append(f"  {label_prefix('user', cfg)}@{owner['username']}{verified}")
    created_at = entry.get("createdAt")
    if created_at is not None:
        lines.append(f"  {label_prefix('date', cfg)}{created_at.date().isoformat()}")
    lines.append(f"  {label_prefix('url', cfg)}{style_text(format_list_url(str(entry.get('id'))), color='green', enabled=cfg.color)}")
    return lines


def serialize_list(entry: TwitterList) -> dict:
    created_at = entry.get("createdAt")
    return {**entry, "createdAt": created_at.isoformat() if created_at is not None else None}
