"""In-app browser detection.

intent:// redirects are unreliable inside social-app webviews, so Android
viewers matching any of these get the interstitial page instead.
"""

import re
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class UserAgentMatcher:
    name: str
    pattern: re.Pattern

    def matches(self, user_agent: str) -> bool:
        return bool(self.pattern.search(user_agent))


def _matcher(name: str, pattern: str) -> UserAgentMatcher:
    return UserAgentMatcher(name=name, pattern=re.compile(pattern))


# Evaluated in order, first match wins. Add new apps at the end.
IN_APP_MATCHERS = (
    _matcher("facebook", r"FBAN|FBAV"),
    _matcher("instagram", r"Instagram"),
    _matcher("kakaotalk", r"KAKAOTALK"),
    _matcher("line", r"Line/"),
    _matcher("webview", r"; wv\)"),
    _matcher("android_webview_safari", r"Version/[\d.]+ Chrome/[\d.]+ Mobile Safari"),
)


def detect_in_app_browser(user_agent: Optional[str]) -> Optional[str]:
    """Return the name of the first matching in-app browser, or None."""
    if not user_agent:
        return None

    for matcher in IN_APP_MATCHERS:
        if matcher.matches(user_agent):
            return matcher.name
    return None


def is_in_app_browser(user_agent: Optional[str]) -> bool:
    return detect_in_app_browser(user_agent) is not None
