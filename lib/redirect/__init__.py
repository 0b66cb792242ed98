"""Device-aware YouTube deep-link redirects.

Pure building blocks only: no I/O, no logging.
Business logic lives in services/redirect/.
Host adapters (Lambda, FastAPI) live in api/redirect/.
"""

from lib.redirect.config import DEFAULT_SETTINGS, RedirectSettings
from lib.redirect.models import (
    DeviceClass,
    RedirectKind,
    RedirectRequest,
    RedirectResponse,
    RedirectTarget,
)

__all__ = [
    "DEFAULT_SETTINGS",
    "RedirectSettings",
    "DeviceClass",
    "RedirectKind",
    "RedirectRequest",
    "RedirectResponse",
    "RedirectTarget",
]
