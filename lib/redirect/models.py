"""Data models for device-aware redirect resolution."""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional


class DeviceClass(str, Enum):
    """Viewer device class as reported by the CDN viewer headers."""

    IOS = "ios"
    ANDROID = "android"
    DESKTOP = "desktop"
    UNKNOWN = "unknown"


class RedirectKind(str, Enum):
    """What kind of destination was synthesized for a request."""

    APP_SCHEME = "app_scheme"  # youtube://...
    INTENT = "intent"  # intent://...#Intent;...;end
    WEB = "web"  # https://...
    INTERSTITIAL = "interstitial"  # 200 HTML page that tries the app first


@dataclass
class RedirectRequest:
    """Normalized inbound request: path, raw query string and headers."""

    path: str = ""
    query_string: str = ""
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        self.path = self.path or ""
        self.query_string = (self.query_string or "").lstrip("?")
        self.headers = {str(k).lower(): str(v) for k, v in (self.headers or {}).items()}

    @classmethod
    def from_event(cls, event: Optional[Mapping]) -> "RedirectRequest":
        """Build a request from a Lambda HTTP API (payload v2) event."""
        event = event or {}
        return cls(
            path=event.get("rawPath") or "",
            query_string=event.get("rawQueryString") or "",
            headers=event.get("headers") or {},
        )

    def header(self, name: str) -> str:
        return self.headers.get(name.lower(), "")

    @property
    def original_link(self) -> str:
        """Path plus query string, as the viewer requested it."""
        if self.query_string:
            return f"{self.path}?{self.query_string}"
        return self.path


@dataclass
class RedirectTarget:
    """Output of per-device URL synthesis."""

    kind: RedirectKind
    location: str  # For INTERSTITIAL, the intent URI the page opens first
    web_url: Optional[str] = None  # Browser fallback (Android targets)
    scheme_url: Optional[str] = None  # Native scheme fallback (Android targets)


@dataclass
class RedirectResponse:
    """Structured response handed back to the host runtime."""

    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: Optional[str] = None

    @property
    def location(self) -> Optional[str]:
        return self.headers.get("Location")

    def to_event(self) -> dict:
        """Render as a Lambda proxy response."""
        event = {"statusCode": self.status_code, "headers": dict(self.headers)}
        if self.body is not None:
            event["body"] = self.body
        return event


def server_error_response() -> RedirectResponse:
    """The one error response. Never carries exception details."""
    return RedirectResponse(
        status_code=500,
        headers={"Content-Type": "application/json"},
        body=json.dumps({"error": "Internal Server Error"}, separators=(",", ":")),
    )
