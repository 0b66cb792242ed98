"""Unit tests for per-device redirect URL synthesis."""

from urllib.parse import unquote

from lib.redirect.config import RedirectSettings
from lib.redirect.models import RedirectKind
from lib.redirect.targets import (
    build_android_target,
    build_app_scheme_url,
    build_intent_url,
    build_web_url,
)

INTENT_SUFFIX = "#Intent;scheme=https;package=com.google.android.youtube;"


def _fallback(intent_url: str) -> str:
    """Decoded S.browser_fallback_url value of an intent URI."""
    value = intent_url.split("S.browser_fallback_url=", 1)[1]
    assert value.endswith(";end")
    return unquote(value[: -len(";end")])


# --- iOS ---


class TestAppScheme:
    def test_relative_path(self):
        assert build_app_scheme_url("xyz") == "youtube://xyz"

    def test_appends_verbatim(self):
        assert build_app_scheme_url("watch?v=abc&t=5") == "youtube://watch?v=abc&t=5"

    def test_no_percent_encoding(self):
        assert build_app_scheme_url("results?search_query=a b") == "youtube://results?search_query=a b"

    def test_custom_scheme(self):
        settings = RedirectSettings(app_scheme="vnd.youtube")
        assert build_app_scheme_url("watch?v=x", settings) == "vnd.youtube://watch?v=x"


# --- Web ---


class TestWebUrl:
    def test_relative_path_goes_under_home(self):
        assert build_web_url("watch?v=abc123") == "https://www.youtube.com/watch?v=abc123"

    def test_youtube_link_passes_through(self):
        assert build_web_url("m.youtube.com/watch?v=abc") == "https://m.youtube.com/watch?v=abc"

    def test_short_link_passes_through(self):
        assert build_web_url("youtu.be/abc?t=5") == "https://youtu.be/abc?t=5"

    def test_youtube_in_path_is_not_a_youtube_host(self):
        assert build_web_url("evil.com/youtube.com") == "https://www.youtube.com/evil.com/youtube.com"

    def test_lookalike_host_stays_on_youtube(self):
        assert build_web_url("fooyoutube.com/x") == "https://www.youtube.com/fooyoutube.com/x"

    def test_non_youtube_host_is_not_an_open_redirect(self):
        assert build_web_url("evil.com/phish") == "https://www.youtube.com/evil.com/phish"

    def test_query_split_on_first_question_mark(self):
        assert build_web_url("watch?v=a?b=c") == "https://www.youtube.com/watch?v=a?b=c"

    def test_empty_query_dropped(self):
        assert build_web_url("watch?") == "https://www.youtube.com/watch"


# --- Android ---


class TestIntentUrl:
    def test_relative_path(self):
        url = build_intent_url("xyz")
        assert url == (
            "intent://www.youtube.com/xyz" + INTENT_SUFFIX
            + "S.browser_fallback_url=https%3A%2F%2Fwww.youtube.com%2Fxyz;end"
        )

    def test_watch(self):
        url = build_intent_url("watch?v=abc123")
        assert url.startswith("intent://www.youtube.com/watch?v=abc123#Intent;")
        assert _fallback(url) == "https://www.youtube.com/watch?v=abc123"

    def test_playlist(self):
        url = build_intent_url("www.youtube.com/playlist?list=PL123")
        assert url.startswith("intent://www.youtube.com/playlist?list=PL123#Intent;")

    def test_short_link_rewritten_to_watch(self):
        url = build_intent_url("youtu.be/abc123?t=5")
        assert url.startswith("intent://www.youtube.com/watch?v=abc123&t=5#Intent;")
        assert _fallback(url) == "https://www.youtube.com/watch?v=abc123&t=5"

    def test_fallback_is_percent_encoded(self):
        url = build_intent_url("watch?v=abc&t=5")
        encoded = url.split("S.browser_fallback_url=", 1)[1]
        assert "%3A%2F%2F" in encoded
        assert "%3F" in encoded and "%26" in encoded
        assert "?" not in encoded and "&" not in encoded

    def test_ends_with_end(self):
        assert build_intent_url("watch?v=abc").endswith(";end")

    def test_fallback_param_is_configurable(self):
        settings = RedirectSettings(fallback_param="fallback")
        url = build_intent_url("watch?v=abc", settings)
        assert ";fallback=https%3A%2F%2Fwww.youtube.com%2Fwatch%3Fv%3Dabc;end" in url
        assert "S.browser_fallback_url" not in url


class TestAndroidTarget:
    def test_carries_fallbacks(self):
        target = build_android_target("youtu.be/abc?t=5")
        assert target.kind == RedirectKind.INTENT
        assert target.location == build_intent_url("youtu.be/abc?t=5")
        assert target.web_url == "https://www.youtube.com/watch?v=abc&t=5"
        assert target.scheme_url == "youtube://youtu.be/abc?t=5"
