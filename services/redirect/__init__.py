"""Redirect service: public interface."""

from services.redirect.service import handle_request, resolve_redirect, resolve_target

__all__ = [
    "handle_request",
    "resolve_redirect",
    "resolve_target",
]
