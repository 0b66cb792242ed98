"""Device classification from CloudFront viewer headers."""

from typing import Mapping

from lib.redirect.models import DeviceClass

IOS_VIEWER_HEADER = "cloudfront-is-ios-viewer"
ANDROID_VIEWER_HEADER = "cloudfront-is-android-viewer"
DESKTOP_VIEWER_HEADER = "cloudfront-is-desktop-viewer"
USER_AGENT_HEADER = "user-agent"

# Checked in order, first "true" wins
DEVICE_HEADER_PRIORITY = (
    (IOS_VIEWER_HEADER, DeviceClass.IOS),
    (ANDROID_VIEWER_HEADER, DeviceClass.ANDROID),
    (DESKTOP_VIEWER_HEADER, DeviceClass.DESKTOP),
)


def classify_device(headers: Mapping[str, str]) -> DeviceClass:
    """Return the device class for a header map.

    Only the literal string "true" counts. Missing headers never match, so
    a request without viewer headers is UNKNOWN.
    """
    lowered = {str(k).lower(): v for k, v in (headers or {}).items()}
    for header, device in DEVICE_HEADER_PRIORITY:
        if lowered.get(header) == "true":
            return device
    return DeviceClass.UNKNOWN
