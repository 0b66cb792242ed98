"""Per-device redirect URL synthesis.

iOS:      youtube://watch?v=abc123
Android:  intent://www.youtube.com/watch?v=abc123#Intent;scheme=https;
            package=com.google.android.youtube;
            S.browser_fallback_url=https%3A%2F%2Fwww.youtube.com%2Fwatch%3Fv%3Dabc123;end
Web:      https://www.youtube.com/watch?v=abc123
"""

from urllib.parse import quote

from lib.redirect.config import DEFAULT_SETTINGS, RedirectSettings
from lib.redirect.links import expand_short_link, is_youtube_link, split_query, strip_scheme
from lib.redirect.models import RedirectKind, RedirectTarget


def build_app_scheme_url(cleaned: str, settings: RedirectSettings = DEFAULT_SETTINGS) -> str:
    """Custom app scheme with the cleaned link appended verbatim."""
    return f"{settings.app_scheme}://{cleaned}"


def build_web_url(cleaned: str, settings: RedirectSettings = DEFAULT_SETTINGS) -> str:
    """YouTube links pass through over https; anything else becomes a path on
    the YouTube site, so the redirector can't be used as an open redirect.

    "YouTube link" is decided by host, not by a substring match: evil.com/youtube.com
    and fooyoutube.com/x stay on the YouTube site.
    """
    path, query = split_query(cleaned)
    query_string = f"?{query}" if query else ""

    if is_youtube_link(cleaned, settings):
        return f"https://{path}{query_string}"
    return f"{settings.web_home}{path}{query_string}"


def build_intent_url(cleaned: str, settings: RedirectSettings = DEFAULT_SETTINGS) -> str:
    web_url = build_web_url(expand_short_link(cleaned, settings), settings)
    return _intent_for(web_url, settings)


def _intent_for(web_url: str, settings: RedirectSettings) -> str:
    fallback = quote(web_url, safe="")
    return (
        f"intent://{strip_scheme(web_url)}#Intent;"
        f"scheme={settings.intent_scheme};"
        f"package={settings.android_package};"
        f"{settings.fallback_param}={fallback};end"
    )


def build_android_target(cleaned: str, settings: RedirectSettings = DEFAULT_SETTINGS) -> RedirectTarget:
    """Intent URI plus the fallbacks the interstitial page needs."""
    web_url = build_web_url(expand_short_link(cleaned, settings), settings)
    return RedirectTarget(
        kind=RedirectKind.INTENT,
        location=_intent_for(web_url, settings),
        web_url=web_url,
        scheme_url=build_app_scheme_url(cleaned, settings),
    )
