from __future__ import annotations

import re
from urllib.parse import urlsplit

from limelink_mcp.domain.value_objects import VALID_SLUGS

FREE_PLAN_HOST = "deep.limelink.org"
BASE_DOMAIN = ".limelink.org"

_PRO_PLAN_PATH = re.compile(r"^/link/(.+)$", re.DOTALL)
_SPECIAL_SCHEMES = ("http", "https")


def _remove_dot_segments(path: str) -> str:
    """Resolve "." and ".." segments of an absolute path as browsers do."""
    if not path.startswith("/"):
        return path
    segments = path[1:].split("/")
    output: list[str] = []
    for i, segment in enumerate(segments):
        last = i == len(segments) - 1
        if segment == "..":
            if output:
                output.pop()
            if last:
                output.append("")
        elif segment == ".":
            if last:
                output.append("")
        else:
            output.append(segment)
    return "/" + "/".join(output)


def extract_suffix(url: str) -> str | None:
    """Return the dynamic link suffix encoded in a Limelink URL, or None.

    Two URL shapes are recognised:
    - Free plan: https://deep.limelink.org/{suffix}
    - Pro plan:  https://{project}.limelink.org/link/{suffix}

    Nested suffixes ("a/b") are returned verbatim. Query strings and fragments
    are ignored. For http(s) URLs backslashes count as path separators and
    dot segments are resolved before matching. Never raises: malformed input
    (including an invalid port) and foreign hosts yield None.
    """
    try:
        parts = urlsplit(url)
        if parts.scheme in _SPECIAL_SCHEMES and "\\" in url:
            parts = urlsplit(url.replace("\\", "/"))
        # .port raises ValueError on a non-numeric or out-of-range port
        hostname, _port = parts.hostname, parts.port
    except ValueError:
        return None
    if not parts.scheme or not hostname:
        return None

    path = _remove_dot_segments(parts.path)

    # Exact host match must win over the base-domain suffix match below
    if hostname == FREE_PLAN_HOST:
        suffix = path[1:] if path.startswith("/") else path
        return suffix or None

    if hostname.endswith(BASE_DOMAIN):
        match = _PRO_PLAN_PATH.match(path)
        return match.group(1) if match else None

    return None


def is_valid_slug(slug: str) -> bool:
    """Return True when slug names a known documentation page (exact, case-sensitive)."""
    return slug in VALID_SLUGS
