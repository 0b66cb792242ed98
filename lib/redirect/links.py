"""Link cleaning and YouTube link recognition.

A cleaned link is the request path+query with the leading "/" and any
http(s):// prefix removed:

  /https://youtu.be/abc?t=5  ->  youtu.be/abc?t=5
  /watch?v=abc123            ->  watch?v=abc123
"""

import re
from typing import Tuple

from lib.redirect.config import DEFAULT_SETTINGS, RedirectSettings

_LEADING_SLASH_RE = re.compile(r"^/")
_SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)


def strip_scheme(link: str) -> str:
    return _SCHEME_RE.sub("", link, count=1)


def clean_link(raw: str) -> str:
    """Strip one leading slash, then a leading http:// or https://."""
    link = _LEADING_SLASH_RE.sub("", raw or "", count=1)
    return strip_scheme(link)


def is_blocked_link(cleaned: str, settings: RedirectSettings = DEFAULT_SETTINGS) -> bool:
    """Empty links and scanner probes (/.env) resolve to the web home."""
    return not cleaned or cleaned in settings.blocked_links


def split_query(link: str) -> Tuple[str, str]:
    """Split on the first "?" only. Query is "" when absent."""
    path, _, query = link.partition("?")
    return path, query


def link_host(link: str) -> str:
    """Host part of a cleaned link, lower-cased and without port."""
    path, _ = split_query(link)
    host = path.split("/", 1)[0]
    return host.split(":", 1)[0].lower()


def _host_in(host: str, domains) -> bool:
    return any(host == domain or host.endswith("." + domain) for domain in domains)


def is_youtube_link(link: str, settings: RedirectSettings = DEFAULT_SETTINGS) -> bool:
    """True when the link's host is a YouTube domain or one of its subdomains."""
    return _host_in(link_host(link), settings.youtube_domains)


def is_short_link(link: str, settings: RedirectSettings = DEFAULT_SETTINGS) -> bool:
    return link_host(link) in settings.short_link_domains


def expand_short_link(link: str, settings: RedirectSettings = DEFAULT_SETTINGS) -> str:
    """Rewrite youtu.be/<id>[?q] into www.youtube.com/watch?v=<id>[&q].

    The Android app does not resolve bare short links reliably via intent.
    Anything else is returned unchanged.
    """
    if not is_short_link(link, settings):
        return link

    path, query = split_query(link)
    _, _, rest = path.partition("/")
    video_id = rest.split("/", 1)[0]
    if not video_id:
        return link

    expanded = f"{settings.web_host}/watch?v={video_id}"
    if query:
        expanded = f"{expanded}&{query}"
    return expanded
