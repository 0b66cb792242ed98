"""
Redirect settings.

Fixed constants grouped in one immutable model. Nothing here is read from
the environment.
"""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class RedirectSettings(BaseModel):
    """Targets, intent parameters and interstitial timings."""

    model_config = ConfigDict(frozen=True)

    # Web targets
    web_home: str = Field(
        default="https://www.youtube.com/", description="Canonical web home URL"
    )
    web_host: str = Field(
        default="www.youtube.com", description="Host used for relative and intent targets"
    )
    youtube_domains: Tuple[str, ...] = Field(
        default=("youtube.com", "youtu.be"),
        description="Domains passed through as-is (subdomains included)",
    )
    short_link_domains: Tuple[str, ...] = Field(
        default=("youtu.be", "www.youtu.be"),
        description="Hosts whose /<id> paths are rewritten to watch?v=<id>",
    )

    # Native app targets
    app_scheme: str = Field(default="youtube", description="iOS custom URL scheme")
    android_package: str = Field(
        default="com.google.android.youtube", description="Android package for intents"
    )
    intent_scheme: str = Field(default="https", description="scheme= value of intent URIs")
    fallback_param: str = Field(
        default="S.browser_fallback_url",
        description="Intent extra carrying the browser fallback URL",
    )

    # Inputs that always resolve to the web home
    blocked_links: Tuple[str, ...] = Field(
        default=(".env",), description="Cleaned links treated as scanner probes"
    )

    # Interstitial fallback ladder (milliseconds after load)
    intent_delay_ms: int = Field(default=100, ge=0)
    scheme_delay_ms: int = Field(default=1000, ge=0)
    external_delay_ms: int = Field(default=2000, ge=0)
    fallback_delay_ms: int = Field(default=3000, ge=0)

    no_cache_headers: Tuple[Tuple[str, str], ...] = Field(
        default=(
            ("Cache-Control", "no-cache, no-store, must-revalidate"),
            ("Pragma", "no-cache"),
            ("Expires", "0"),
        ),
        description="Headers attached to every successful response",
    )


DEFAULT_SETTINGS = RedirectSettings()
