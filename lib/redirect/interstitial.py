"""Interstitial page for Android in-app browsers.

In-app webviews often refuse a 302 to intent://, so instead we serve a page
that walks a fixed fallback ladder on timers:

  +100ms   intent URI
  +1000ms  native scheme URI       (skipped if the app seems to have opened)
  +2000ms  web URL, external window (same)
  +3000ms  show "Open in browser", navigate to the web URL (same)

"App opened" is inferred from visibilitychange/pagehide/blur. Any tab
switch fires those too, so it is a heuristic only. Timers are never
cancelled; the flag only gates their navigation.
"""

import html
import json

from lib.redirect.config import DEFAULT_SETTINGS, RedirectSettings

# ---------------------------------------------------------------------------
# Page template
# ---------------------------------------------------------------------------

_PAGE_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<meta name="robots" content="noindex, nofollow">
<title>Opening YouTube...</title>
<style>
body { margin: 0; font-family: -apple-system, Roboto, sans-serif; background: #fff; color: #0f0f0f; }
.wrap { display: flex; flex-direction: column; align-items: center; justify-content: center; min-height: 100vh; padding: 24px; box-sizing: border-box; text-align: center; }
.spinner { width: 32px; height: 32px; border: 3px solid #e5e5e5; border-top-color: #ff0000; border-radius: 50%; animation: spin 0.8s linear infinite; }
@keyframes spin { to { transform: rotate(360deg); } }
#fallback { display: none; margin-top: 24px; padding: 12px 20px; background: #ff0000; color: #fff; border-radius: 20px; text-decoration: none; font-weight: 600; }
</style>
</head>
<body>
<div class="wrap">
  <div class="spinner"></div>
  <p>Opening YouTube...</p>
  <a id="fallback" href="__WEB_HREF__" target="_blank" rel="noopener">Open in browser</a>
</div>
__LADDER_JS__
</body>
</html>"""

_LADDER_JS = """<script>
(function() {
    var INTENT_URL = __INTENT_URL__;
    var SCHEME_URL = __SCHEME_URL__;
    var WEB_URL = __WEB_URL__;
    var appOpened = false;

    function markOpened() { appOpened = true; }

    document.addEventListener('visibilitychange', function() {
        if (document.hidden) markOpened();
    });
    window.addEventListener('pagehide', markOpened);
    window.addEventListener('blur', markOpened);

    // Keep back from landing on this page again
    try {
        history.pushState(null, '', location.href);
        window.addEventListener('popstate', function() {
            history.pushState(null, '', location.href);
        });
    } catch (e) {}

    setTimeout(function() {
        window.location.href = INTENT_URL;
    }, __INTENT_DELAY__);

    setTimeout(function() {
        if (appOpened) return;
        window.location.href = SCHEME_URL;
    }, __SCHEME_DELAY__);

    setTimeout(function() {
        if (appOpened) return;
        try {
            window.open(WEB_URL, '_blank');
        } catch (e) {}
    }, __EXTERNAL_DELAY__);

    setTimeout(function() {
        var link = document.getElementById('fallback');
        if (link) link.style.display = 'inline-block';
        if (appOpened) return;
        window.location.href = WEB_URL;
    }, __FALLBACK_DELAY__);
})();
</script>"""


def _js_string(value: str) -> str:
    """JSON-quote a value for inline script, without allowing </script>."""
    return json.dumps(value).replace("</", "<\\/")


def build_ladder_js(
    intent_url: str,
    scheme_url: str,
    web_url: str,
    settings: RedirectSettings = DEFAULT_SETTINGS,
) -> str:
    return (
        _LADDER_JS
        .replace("__INTENT_URL__", _js_string(intent_url))
        .replace("__SCHEME_URL__", _js_string(scheme_url))
        .replace("__WEB_URL__", _js_string(web_url))
        .replace("__INTENT_DELAY__", str(settings.intent_delay_ms))
        .replace("__SCHEME_DELAY__", str(settings.scheme_delay_ms))
        .replace("__EXTERNAL_DELAY__", str(settings.external_delay_ms))
        .replace("__FALLBACK_DELAY__", str(settings.fallback_delay_ms))
    )


def render_interstitial(
    intent_url: str,
    scheme_url: str,
    web_url: str,
    settings: RedirectSettings = DEFAULT_SETTINGS,
) -> str:
    """Full HTML document that tries the app first and falls back to the web."""
    ladder_js = build_ladder_js(intent_url, scheme_url, web_url, settings)
    return (
        _PAGE_HTML
        .replace("__WEB_HREF__", html.escape(web_url, quote=True))
        .replace("__LADDER_JS__", ladder_js)
    )
