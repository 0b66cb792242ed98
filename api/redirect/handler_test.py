"""Tests for the Lambda entry point."""

import json
from unittest.mock import patch

import pytest

from api.redirect.handler import redirect_handler

NO_CACHE = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


def _event(path="", query="", headers=None):
    return {"rawPath": path, "rawQueryString": query, "headers": headers or {}}


class TestRedirectHandler:
    def test_root(self):
        result = redirect_handler(_event("/"))
        assert result["statusCode"] == 302
        assert result["headers"]["Location"] == "https://www.youtube.com/"
        assert "body" not in result

    def test_empty_event(self):
        result = redirect_handler({})
        assert result["statusCode"] == 302
        assert result["headers"]["Location"] == "https://www.youtube.com/"

    def test_desktop_watch(self):
        result = redirect_handler(
            _event("/watch", "v=abc123", {"cloudfront-is-desktop-viewer": "true"})
        )
        assert result == {
            "statusCode": 302,
            "headers": {"Location": "https://www.youtube.com/watch?v=abc123", **NO_CACHE},
        }

    def test_ios(self):
        result = redirect_handler(_event("/xyz", headers={"cloudfront-is-ios-viewer": "true"}))
        assert result["headers"]["Location"] == "youtube://xyz"

    def test_android_intent(self):
        result = redirect_handler(
            _event("/youtu.be/abc123", "t=5", {"cloudfront-is-android-viewer": "true"})
        )
        assert result["headers"]["Location"].startswith("intent://www.youtube.com/watch?v=abc123&t=5#Intent;")

    def test_android_in_app(self):
        result = redirect_handler(
            _event(
                "/watch",
                "v=abc123",
                {"cloudfront-is-android-viewer": "true", "user-agent": "Mozilla/5.0 KAKAOTALK 10.5.0"},
            )
        )
        assert result["statusCode"] == 200
        assert result["headers"]["Content-Type"] == "text/html; charset=utf-8"
        assert result["body"].startswith("<!DOCTYPE html>")

    def test_env_probe(self):
        result = redirect_handler(_event("/.env", headers={"cloudfront-is-ios-viewer": "true"}))
        assert result["headers"]["Location"] == "https://www.youtube.com/"

    def test_unhandled_error(self):
        with patch("services.redirect.service.resolve_redirect", side_effect=ValueError("bad")):
            result = redirect_handler(_event("/xyz"))

        assert result["statusCode"] == 500
        assert result["headers"] == {"Content-Type": "application/json"}
        assert json.loads(result["body"]) == {"error": "Internal Server Error"}

    @pytest.mark.parametrize(
        "event",
        [
            {"rawPath": "/xyz", "rawQueryString": 5},
            {"rawPath": "/xyz", "headers": "not-a-map"},
            ["not", "a", "dict"],
        ],
    )
    def test_malformed_event(self, event, log_buffer):
        result = redirect_handler(event)

        assert result["statusCode"] == 500
        assert result["headers"] == {"Content-Type": "application/json"}
        assert result["body"] == '{"error":"Internal Server Error"}'
        assert "Malformed redirect event" in log_buffer.getvalue()
