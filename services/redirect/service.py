"""Business logic for device-aware redirects.

resolve_redirect() is a pure function of the request. handle_request() wraps
it with logging and maps any failure to a 500 without exposing details.
"""

from typing import Optional

from loguru import logger

from lib.redirect.config import DEFAULT_SETTINGS, RedirectSettings
from lib.redirect.device import USER_AGENT_HEADER, classify_device
from lib.redirect.interstitial import render_interstitial
from lib.redirect.links import clean_link, is_blocked_link
from lib.redirect.models import (
    DeviceClass,
    RedirectKind,
    RedirectRequest,
    RedirectResponse,
    RedirectTarget,
    server_error_response,
)
from lib.redirect.targets import build_android_target, build_app_scheme_url, build_web_url
from lib.redirect.user_agent import detect_in_app_browser

HTML_CONTENT_TYPE = "text/html; charset=utf-8"


def resolve_target(
    cleaned: str,
    device: DeviceClass,
    user_agent: Optional[str] = None,
    settings: RedirectSettings = DEFAULT_SETTINGS,
) -> RedirectTarget:
    """Pick the destination for a cleaned link and device class."""
    if device == DeviceClass.IOS:
        return RedirectTarget(
            kind=RedirectKind.APP_SCHEME,
            location=build_app_scheme_url(cleaned, settings),
        )

    if device == DeviceClass.ANDROID:
        target = build_android_target(cleaned, settings)
        in_app = detect_in_app_browser(user_agent)
        if in_app:
            logger.debug(f"In-app browser detected: {in_app}")
            target.kind = RedirectKind.INTERSTITIAL
        return target

    return RedirectTarget(kind=RedirectKind.WEB, location=build_web_url(cleaned, settings))


def _redirect(location: str, settings: RedirectSettings) -> RedirectResponse:
    headers = {"Location": location}
    headers.update(settings.no_cache_headers)
    return RedirectResponse(status_code=302, headers=headers)


def _html(body: str, settings: RedirectSettings) -> RedirectResponse:
    headers = {"Content-Type": HTML_CONTENT_TYPE}
    headers.update(settings.no_cache_headers)
    return RedirectResponse(status_code=200, headers=headers, body=body)


def resolve_redirect(
    request: RedirectRequest,
    settings: RedirectSettings = DEFAULT_SETTINGS,
) -> RedirectResponse:
    """Compute the response for a request. Pure, may raise."""
    if not request.path or request.path == "/":
        return _redirect(settings.web_home, settings)

    cleaned = clean_link(request.original_link)
    if is_blocked_link(cleaned, settings):
        return _redirect(settings.web_home, settings)

    device = classify_device(request.headers)
    target = resolve_target(cleaned, device, request.header(USER_AGENT_HEADER), settings)

    logger.info(f"Device type: {device.value}")

    if target.kind == RedirectKind.INTERSTITIAL:
        logger.info(f"Interstitial for: {target.location}")
        body = render_interstitial(
            intent_url=target.location,
            scheme_url=target.scheme_url,
            web_url=target.web_url,
            settings=settings,
        )
        return _html(body, settings)

    logger.info(f"Redirect location: {target.location}")
    return _redirect(target.location, settings)


def handle_request(
    request: RedirectRequest,
    settings: RedirectSettings = DEFAULT_SETTINGS,
) -> RedirectResponse:
    """Resolve a request; any exception becomes a generic 500."""
    try:
        logger.debug(
            f"Received request: path={request.path!r} query={request.query_string!r} "
            f"headers={request.headers}"
        )
        return resolve_redirect(request, settings)
    except Exception:
        logger.exception("Error in redirect handler")
        return server_error_response()
