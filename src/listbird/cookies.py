from __future__ import annotations

import os

import browser_cookie3

from .types import CookieExtractionResult, CookieSource, TwitterCookies

TWITTER_DOMAINS = ("x.com", "twitter.com")
DEFAULT_COOKIE_SOURCES: list[CookieSource] = ["safari", "chrome", "firefox"]

_ENV_KEYS = {
    "authToken": ("AUTH_TOKEN", "TWITTER_AUTH_TOKEN"),
    "ct0": ("CT0", "TWITTER_CT0"),
}
_BROWSER_LABELS = {"safari": "Safari", "chrome": "Chrome", "firefox": "Firefox"}


def _clean(value: str | None) -> str | None:
    if not value:
        return None
    return value.strip() or None


def _empty_cookies() -> TwitterCookies:
    return {"authToken": None, "ct0": None, "cookieHeader": None, "source": None}


def _finalize(cookies: TwitterCookies) -> TwitterCookies:
    if cookies.get("authToken") and cookies.get("ct0"):
        cookies["cookieHeader"] = f"auth_token={cookies['authToken']}; ct0={cookies['ct0']}"
    return cookies


def _open_jar(source: CookieSource, profile: str | None, domain: str):
    if source == "chrome":
        return browser_cookie3.chrome(domain_name=domain, chrome_profile=profile)
    if source == "firefox":
        return browser_cookie3.firefox(domain_name=domain, profile=profile)
    if source == "safari":
        return browser_cookie3.safari(domain_name=domain)
    raise ValueError(f"Unknown cookie source: {source}")


def read_browser_cookies(source: CookieSource, profile: str | None = None) -> CookieExtractionResult:
    """Read auth_token/ct0 from one browser, preferring x.com over twitter.com."""
    warnings: list[str] = []
    found: dict[str, str] = {}
    for domain in TWITTER_DOMAINS:
        try:
            jar = _open_jar(source, profile, domain)
        except Exception as exc:  # browser_cookie3 raises a mix of OS, sqlite and its own errors
            warnings.append(f"{_BROWSER_LABELS[source]}: {exc}")
            continue
        for cookie in jar:
            if cookie.name in ("auth_token", "ct0") and cookie.value and cookie.name not in found:
                found[cookie.name] = cookie.value

    cookies = _empty_cookies()
    cookies["authToken"] = found.get("auth_token")
    cookies["ct0"] = found.get("ct0")
    if cookies["authToken"] and cookies["ct0"]:
        label = _BROWSER_LABELS[source]
        cookies["source"] = f'{label} profile "{profile}"' if profile else label
        return {"cookies": _finalize(cookies), "warnings": warnings}

    warnings.append(f"No Twitter cookies found in {_BROWSER_LABELS[source]}. Make sure you are logged into x.com there.")
    return {"cookies": cookies, "warnings": warnings}


def resolve_credentials(
    *,
    auth_token: str | None = None,
    ct0: str | None = None,
    cookie_source: CookieSource | list[CookieSource] | None = None,
    chrome_profile: str | None = None,
    firefox_profile: str | None = None,
) -> CookieExtractionResult:
    warnings: list[str] = []
    cookies = _empty_cookies()

    for field, value in (("authToken", auth_token), ("ct0", ct0)):
        if _clean(value):
            cookies[field] = _clean(value)
            cookies["source"] = "CLI argument"

    for field, keys in _ENV_KEYS.items():
        if cookies.get(field):
            continue
        for key in keys:
            value = _clean(os.environ.get(key))
            if value:
                cookies[field] = value
                cookies["source"] = cookies.get("source") or f"env {key}"
                break

    if cookies.get("authToken") and cookies.get("ct0"):
        return {"cookies": _finalize(cookies), "warnings": warnings}

    if isinstance(cookie_source, list):
        sources = cookie_source
    else:
        sources = [cookie_source] if cookie_source else DEFAULT_COOKIE_SOURCES
    for source in sources:
        profile = chrome_profile if source == "chrome" else firefox_profile if source == "firefox" else None
        res = read_browser_cookies(source, profile)
        warnings.extend(res["warnings"])
        if res["cookies"].get("authToken") and res["cookies"].get("ct0"):
            return {"cookies": res["cookies"], "warnings": warnings}

    if not cookies.get("authToken"):
        warnings.append("Missing auth_token - provide via --auth-token, AUTH_TOKEN env var, or login to x.com in a browser")
    if not cookies.get("ct0"):
        warnings.append("Missing ct0 - provide via --ct0, CT0 env var, or login to x.com in a browser")
    return {"cookies": cookies, "warnings": warnings}
